"""Password and passphrase generation CLI flows.

Handles generation, preview, clipboard copy and the optional download.
Implements secure display to prevent the value leaking into terminal history.
"""

import os
from typing import Optional

import pyperclip

from core import (
    DOWNLOAD_FILENAME,
    GeneratorSession,
    PasswordOptions,
    PassphraseOptions,
    PASSWORD_MODE,
    PASSPHRASE_MODE,
    StorageError,
    ValidationError,
    save_text,
)
from password_checker import StrengthReport, check_password_strength

from cli.prompts import (
    ask_yes_no,
    confirm_action,
    prompt_for_character_types,
    prompt_for_custom_text,
    prompt_for_excluded_chars,
    prompt_for_password_length,
    prompt_for_separator,
    prompt_for_word_count,
)


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the system clipboard.

    Args:
        text: Text to copy

    Returns:
        True if copied, False if there is nothing to copy or no clipboard
    """
    if not text:
        return False

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException:
        return False
    return True


def download_password(value: str, directory: str = ".") -> Optional[str]:
    """Write the value to ``password.txt`` in the given directory.

    Args:
        value: Generated password or passphrase
        directory: Destination directory

    Returns:
        Path of the written file, or None if there was nothing to write

    Raises:
        StorageError: If the file cannot be written
    """
    if not value:
        return None

    path = os.path.join(directory, DOWNLOAD_FILENAME)
    save_text(path, value)
    return path


def _mask_password(password: str, show_chars: int = 4) -> str:
    """Create a masked version of password showing only first/last chars.

    Args:
        password: Password to mask
        show_chars: Number of characters to show at start and end

    Returns:
        Masked password string like "Ab12****xy9!"
    """
    if len(password) <= show_chars * 2:
        return "*" * len(password)

    return password[:show_chars] + "*" * (len(password) - show_chars * 2) + password[-show_chars:]


def display_strength(report: StrengthReport) -> None:
    """Print the strength label, warning and suggestions."""
    print(f"Strength: {report.label} ({report.score}/4)")

    if report.warning:
        print(f"Warning: {report.warning}")

    if report.suggestions:
        print("Suggestions:")
        for tip in report.suggestions:
            print(f"  - {tip}")


def preview_and_analyze(
    value: str,
    report: Optional[StrengthReport] = None,
    secure_display: bool = True
) -> StrengthReport:
    """Display a value securely and show its strength.

    By default, copies the value to the clipboard instead of displaying it in
    the terminal. Falls back to masked display if the clipboard is
    unavailable.

    Args:
        value: Password or passphrase to show
        report: Precomputed strength report, scored here if omitted
        secure_display: If True, use clipboard/masked display (default: True)

    Returns:
        The strength report
    """
    if secure_display:
        if copy_to_clipboard(value):
            print("\n[COPIED TO CLIPBOARD]")
            print(f"Preview (masked): {_mask_password(value)}")
        else:
            print("\nCould not copy to clipboard.")
            print(f"Generated value (masked): {_mask_password(value)}")
            reveal = input("Show full value? (y/n - WARNING: visible in terminal history): ").strip().lower()
            if reveal == 'y':
                print(f"Full value: {value}")
    else:
        print(f"\nGenerated value: {value}")

    report = report or check_password_strength(value)
    display_strength(report)
    return report


def offer_download(value: str, directory: str = ".") -> Optional[str]:
    """Ask whether to save the value as password.txt and do so if confirmed.

    Returns:
        Path of the written file, or None if skipped or failed
    """
    if not confirm_action(f"\nSave as {DOWNLOAD_FILENAME}?"):
        return None

    try:
        path = download_password(value, directory)
    except StorageError as e:
        print(f"Download failed: {e}")
        return None

    print(f"Saved as {path}")
    return path


def _run_generation(session: GeneratorSession) -> Optional[str]:
    """Generate, preview and offer download. Validation errors are reported."""
    try:
        value = session.generate()
    except ValidationError as e:
        print(f"Error: {e}")
        return None

    preview_and_analyze(value, session.strength)
    offer_download(value)
    return value


def generate_password_flow(session: Optional[GeneratorSession] = None) -> Optional[str]:
    """Full interactive flow for generating a password."""
    print("\n--- Password Generation ---")
    session = session or GeneratorSession()

    length = prompt_for_password_length()
    if length is None:
        print("Canceled password generation.")
        return None

    char_types = prompt_for_character_types()
    if char_types is None:
        print("Canceled password generation.")
        return None

    upper, lower, numbers, special = char_types
    session.mode = PASSWORD_MODE
    session.password_options = PasswordOptions(
        length=length,
        include_uppercase=upper,
        include_lowercase=lower,
        include_numbers=numbers,
        include_special_chars=special,
        custom_text=prompt_for_custom_text(),
        exclude_chars=prompt_for_excluded_chars(),
    )
    return _run_generation(session)


def generate_passphrase_flow(session: Optional[GeneratorSession] = None) -> Optional[str]:
    """Full interactive flow for generating a diceware passphrase."""
    print("\n--- Passphrase Generation ---")
    session = session or GeneratorSession()

    word_count = prompt_for_word_count()
    if word_count is None:
        print("Canceled passphrase generation.")
        return None

    separator = prompt_for_separator()

    numbers = ask_yes_no("a trailing number")
    if numbers is None:
        print("Canceled passphrase generation.")
        return None

    special = ask_yes_no("a trailing special character")
    if special is None:
        print("Canceled passphrase generation.")
        return None

    session.mode = PASSPHRASE_MODE
    session.passphrase_options = PassphraseOptions(word_count=word_count, separator=separator)
    session.password_options.include_numbers = numbers
    session.password_options.include_special_chars = special
    return _run_generation(session)
