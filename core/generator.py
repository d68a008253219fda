"""Password and passphrase construction.

Both generators are stateless: options in, string out. Randomness comes from
``secrets.SystemRandom`` unless a caller injects its own source (anything
with ``choice`` and ``randint``, e.g. a seeded ``random.Random``).
"""

import secrets
from dataclasses import dataclass
from typing import Optional

from core.config import (
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    DEFAULT_PASSWORD_LENGTH,
    MIN_WORD_COUNT,
    MAX_WORD_COUNT,
    DEFAULT_WORD_COUNT,
    DEFAULT_SEPARATOR,
    UPPERCASE_CHARS,
    LOWERCASE_CHARS,
    NUMBER_CHARS,
    SPECIAL_CHARS,
)
from core.wordlist import WordSource, get_default_word_source


class ValidationError(ValueError):
    """Base exception for user-input errors during generation."""
    pass


class NoCharsetSelected(ValidationError):
    """Every character class is off, or exclusions removed all characters."""

    def __init__(self, message: str = "no character types selected"):
        super().__init__(message)


class CustomTextTooLong(ValidationError):
    """Custom text occupies or exceeds the requested length."""

    def __init__(self, message: str = "custom text too long"):
        super().__init__(message)


class LengthOutOfRange(ValidationError):
    """Requested password length is outside the supported bounds."""

    def __init__(self, message: str = "length out of range"):
        super().__init__(message)


class WordCountOutOfRange(ValidationError):
    """Requested passphrase word count is outside the supported bounds."""

    def __init__(self, message: str = "word count out of range"):
        super().__init__(message)


@dataclass
class PasswordOptions:
    """User-chosen constraints for password mode."""
    length: int = DEFAULT_PASSWORD_LENGTH
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_special_chars: bool = False
    custom_text: str = ""
    exclude_chars: str = ""

    def __post_init__(self):
        if not MIN_PASSWORD_LENGTH <= self.length <= MAX_PASSWORD_LENGTH:
            raise LengthOutOfRange(
                f"length out of range ({MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH})"
            )


@dataclass
class PassphraseOptions:
    """User-chosen constraints for passphrase mode."""
    word_count: int = DEFAULT_WORD_COUNT
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self):
        if not MIN_WORD_COUNT <= self.word_count <= MAX_WORD_COUNT:
            raise WordCountOutOfRange(
                f"word count out of range ({MIN_WORD_COUNT}-{MAX_WORD_COUNT})"
            )


def _default_rng():
    return secrets.SystemRandom()


def build_charset(options: PasswordOptions) -> str:
    """Assemble the allowed characters for a password.

    Enabled classes are concatenated in order (uppercase, lowercase, numbers,
    special). Each character of ``exclude_chars`` is then removed as a literal.

    Args:
        options: Password options

    Returns:
        Allowed characters, possibly empty
    """
    charset = ""
    if options.include_uppercase:
        charset += UPPERCASE_CHARS
    if options.include_lowercase:
        charset += LOWERCASE_CHARS
    if options.include_numbers:
        charset += NUMBER_CHARS
    if options.include_special_chars:
        charset += SPECIAL_CHARS

    excluded = set(options.exclude_chars)
    return "".join(c for c in charset if c not in excluded)


def generate_password(options: PasswordOptions, rng=None) -> str:
    """Generate a password of exactly ``options.length`` characters.

    Random characters are drawn uniformly from the allowed set. Custom text,
    when given, is spliced in as one contiguous block at a uniformly chosen
    position among the random characters.

    Args:
        options: Password options
        rng: Optional random source exposing ``choice`` and ``randint``

    Returns:
        Generated password string

    Raises:
        NoCharsetSelected: If no characters remain after exclusion
        CustomTextTooLong: If custom text leaves no room for random characters
    """
    rng = rng or _default_rng()

    charset = build_charset(options)
    if not charset:
        raise NoCharsetSelected()

    custom_text = options.custom_text
    if len(custom_text) >= options.length:
        raise CustomTextTooLong()

    random_length = options.length - len(custom_text)
    random_chars = [rng.choice(charset) for _ in range(random_length)]

    if not custom_text:
        return "".join(random_chars)

    insert_at = rng.randint(0, random_length)
    return "".join(random_chars[:insert_at]) + custom_text + "".join(random_chars[insert_at:])


def generate_passphrase(
    options: PassphraseOptions,
    include_numbers: bool = False,
    include_special_chars: bool = False,
    word_source: Optional[WordSource] = None,
    rng=None,
) -> str:
    """Generate a passphrase of ``options.word_count`` words.

    Words are joined with ``options.separator``. A random digit and then a
    random special character are appended when the matching flags are set.

    Args:
        options: Passphrase options
        include_numbers: Append one random digit
        include_special_chars: Append one random special character
        word_source: Word source to draw from (diceware list by default)
        rng: Optional random source exposing ``choice`` and ``randint``

    Returns:
        Generated passphrase string
    """
    rng = rng or _default_rng()
    word_source = word_source or get_default_word_source()

    words = [word_source.choose(rng) for _ in range(options.word_count)]
    passphrase = options.separator.join(words)

    if include_numbers:
        passphrase += rng.choice(NUMBER_CHARS)
    if include_special_chars:
        passphrase += rng.choice(SPECIAL_CHARS)

    return passphrase
