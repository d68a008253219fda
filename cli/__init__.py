"""CLI package for CraftMyPass.

Provides modular CLI flows for password and passphrase generation.
"""

from cli.generator import (
    copy_to_clipboard,
    download_password,
    generate_password_flow,
    generate_passphrase_flow,
)
from cli.tester import test_password_flow

__all__ = [
    "copy_to_clipboard",
    "download_password",
    "generate_password_flow",
    "generate_passphrase_flow",
    "test_password_flow",
]
