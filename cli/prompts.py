"""Shared CLI prompt utilities.

Common input prompts and validation used across CLI flows.
"""

from typing import Optional

from core import (
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    DEFAULT_PASSWORD_LENGTH,
    MIN_WORD_COUNT,
    MAX_WORD_COUNT,
    DEFAULT_WORD_COUNT,
    DEFAULT_SEPARATOR,
)


CANCEL_WORDS = ['q', 'exit']


def _prompt_for_int(label: str, low: int, high: int, default: int) -> Optional[int]:
    """Prompt until the user enters an integer within [low, high].

    An empty answer selects the default.

    Returns:
        The chosen integer, or None to cancel
    """
    while True:
        val = input(
            f"Enter {label} ({low}-{high}, Enter for {default}, or 'q' to cancel): "
        ).strip().lower()

        if val in CANCEL_WORDS:
            return None
        if not val:
            return default

        try:
            number = int(val)
            if low <= number <= high:
                return number
            print(f"Please enter a number between {low} and {high}.")
        except ValueError:
            print("Invalid input. Enter a number.")


def prompt_for_password_length() -> Optional[int]:
    """Prompt user for valid password length.

    Returns:
        Length as integer, or None to cancel
    """
    return _prompt_for_int(
        "password length", MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH, DEFAULT_PASSWORD_LENGTH
    )


def prompt_for_word_count() -> Optional[int]:
    """Prompt user for the number of passphrase words.

    Returns:
        Word count as integer, or None to cancel
    """
    return _prompt_for_int("number of words", MIN_WORD_COUNT, MAX_WORD_COUNT, DEFAULT_WORD_COUNT)


def ask_yes_no(part: str) -> Optional[bool]:
    """Ask whether to include something.

    Returns:
        True/False for y/n, or None to cancel
    """
    while True:
        ans = input(f"Include {part}? (y/n or q to cancel): ").strip().lower()
        if ans in CANCEL_WORDS:
            return None
        if ans in ['y', 'n']:
            return ans == 'y'
        print("Please enter 'y', 'n', or 'q' to cancel.")


def prompt_for_character_types() -> Optional[tuple[bool, bool, bool, bool]]:
    """Prompt user to choose character types for password generation.

    Returns:
        Tuple of (uppercase, lowercase, numbers, special) as booleans,
        or None to cancel
    """
    upper = ask_yes_no("uppercase letters (A-Z)")
    if upper is None:
        return None

    lower = ask_yes_no("lowercase letters (a-z)")
    if lower is None:
        return None

    numbers = ask_yes_no("numbers (0-9)")
    if numbers is None:
        return None

    special = ask_yes_no("special characters (!@#$...)")
    if special is None:
        return None

    if not any([upper, lower, numbers, special]):
        print("At least one character type must be selected.\n")
        return prompt_for_character_types()

    return upper, lower, numbers, special


def prompt_for_text(prompt: str, default: str = "") -> str:
    """Prompt for free text. Spaces are kept since they may be intended.

    Returns:
        The entered text, or the default when nothing was entered
    """
    val = input(f"{prompt}: ")
    return val if val else default


def prompt_for_custom_text() -> str:
    """Prompt for text to embed somewhere in the password."""
    return prompt_for_text("Custom text to include (optional, Enter to skip)")


def prompt_for_excluded_chars() -> str:
    """Prompt for characters that must not appear in the password."""
    return prompt_for_text("Characters to exclude, e.g. oO0,;: (optional, Enter to skip)")


def prompt_for_separator() -> str:
    """Prompt for the passphrase word separator."""
    return prompt_for_text(f"Separator (Enter for '{DEFAULT_SEPARATOR}')", DEFAULT_SEPARATOR)


def confirm_action(prompt: str) -> bool:
    """Prompt for a y/n confirmation.

    Args:
        prompt: Question to ask

    Returns:
        True if confirmed, False otherwise
    """
    response = input(f"{prompt} (y/n): ").strip().lower()
    return response == 'y'
