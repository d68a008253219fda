"""CraftMyPass Core Package.

Provides modular components for password and passphrase generation:
- config: Centralized configuration constants
- generator: Password and passphrase construction
- wordlist: Diceware and in-memory word sources
- session: Current options/result state with strength tracking
- storage: File I/O operations
- events: Structured event logging
"""

# Configuration constants
from core.config import (
    LOG_DIR,
    EVENT_LOG_FILE,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    DEFAULT_PASSWORD_LENGTH,
    MIN_WORD_COUNT,
    MAX_WORD_COUNT,
    DEFAULT_WORD_COUNT,
    DEFAULT_SEPARATOR,
    SPECIAL_CHARS,
    DOWNLOAD_FILENAME,
)

# Generation
from core.generator import (
    PasswordOptions,
    PassphraseOptions,
    ValidationError,
    NoCharsetSelected,
    CustomTextTooLong,
    LengthOutOfRange,
    WordCountOutOfRange,
    build_charset,
    generate_password,
    generate_passphrase,
)

# Word sources
from core.wordlist import (
    WordSource,
    StaticWordSource,
    DicewareWordSource,
    get_default_word_source,
)

# Session state
from core.session import (
    GeneratorSession,
    GenerationInProgress,
    PASSWORD_MODE,
    PASSPHRASE_MODE,
)

# Event logging
from core.events import log_event, get_events

# Storage utilities
from core.storage import StorageError, ensure_directories, save_text

__all__ = [
    # Config
    "LOG_DIR",
    "EVENT_LOG_FILE",
    "MIN_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
    "DEFAULT_PASSWORD_LENGTH",
    "MIN_WORD_COUNT",
    "MAX_WORD_COUNT",
    "DEFAULT_WORD_COUNT",
    "DEFAULT_SEPARATOR",
    "SPECIAL_CHARS",
    "DOWNLOAD_FILENAME",
    # Generation
    "PasswordOptions",
    "PassphraseOptions",
    "ValidationError",
    "NoCharsetSelected",
    "CustomTextTooLong",
    "LengthOutOfRange",
    "WordCountOutOfRange",
    "build_charset",
    "generate_password",
    "generate_passphrase",
    # Word sources
    "WordSource",
    "StaticWordSource",
    "DicewareWordSource",
    "get_default_word_source",
    # Session
    "GeneratorSession",
    "GenerationInProgress",
    "PASSWORD_MODE",
    "PASSPHRASE_MODE",
    # Events
    "log_event",
    "get_events",
    # Storage
    "StorageError",
    "ensure_directories",
    "save_text",
]
