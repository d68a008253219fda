"""Centralized file I/O operations.

Writes generated values to disk for the download affordance and prepares
the log directory. Files holding secrets get owner-only permissions on Unix.
"""

import json
import os
import stat
import sys

from core.config import LOG_DIR


# Secure file permission: owner read/write only (0600 in octal)
SECURE_FILE_MODE = stat.S_IRUSR | stat.S_IWUSR  # 0o600


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


def _set_secure_permissions(filepath: str) -> None:
    """Set restrictive file permissions on a file holding a secret.

    On Unix systems: Sets file to mode 0600 (owner read/write only)
    On Windows: No-op (Windows uses ACLs, not Unix permissions)

    Args:
        filepath: Path to the file to secure
    """
    if sys.platform == "win32":
        return

    os.chmod(filepath, SECURE_FILE_MODE)


def ensure_directories(*directories: str) -> None:
    """Create directories if they don't exist (the log directory by default).

    On Unix systems, directories are created with mode 0700 (owner only).
    """
    for directory in directories or (LOG_DIR,):
        if not directory:
            continue
        if sys.platform != "win32":
            os.makedirs(directory, mode=0o700, exist_ok=True)
        else:
            os.makedirs(directory, exist_ok=True)


def save_text(filepath: str, text: str) -> None:
    """Save text to a file readable only by its owner.

    Args:
        filepath: Destination path
        text: Text to write, without a trailing newline

    Raises:
        StorageError: If the write fails
    """
    try:
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(text)
        _set_secure_permissions(filepath)
    except OSError as e:
        raise StorageError(f"Failed to write {filepath}: {e}")


def read_json_lines(filepath: str) -> list[dict]:
    """Read a JSON-lines file, skipping lines that don't parse.

    Returns:
        Parsed objects in file order, or an empty list if the file is missing
    """
    if not os.path.exists(filepath):
        return []

    entries = []
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                try:
                    entries.append(json.loads(line))
                except json.JSONDecodeError:
                    continue
    except OSError as e:
        raise StorageError(f"Failed to read {filepath}: {e}")

    return entries
