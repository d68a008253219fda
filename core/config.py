"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Deployment-sensitive settings can be overridden via environment variables.
"""

import os
import string

# Directories
LOG_DIR = os.environ.get("LOG_DIR", "logs")
EVENT_LOG_FILE = os.path.join(LOG_DIR, "events.jsonl")

# Event log rotation
EVENT_LOG_MAX_BYTES = int(os.environ.get("EVENT_LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
EVENT_LOG_BACKUP_COUNT = int(os.environ.get("EVENT_LOG_BACKUP_COUNT", 5))

# Password generation
MIN_PASSWORD_LENGTH = 4
MAX_PASSWORD_LENGTH = 128
DEFAULT_PASSWORD_LENGTH = 12

UPPERCASE_CHARS = string.ascii_uppercase
LOWERCASE_CHARS = string.ascii_lowercase
NUMBER_CHARS = string.digits
SPECIAL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Passphrase generation
MIN_WORD_COUNT = 3
MAX_WORD_COUNT = 10
DEFAULT_WORD_COUNT = 6
DEFAULT_SEPARATOR = "-"

# Diceware word list shipped with the xkcdpass distribution
WORDLIST_NAME = os.environ.get("WORDLIST_NAME", "eff-long")
DICEWARE_DICE_PER_WORD = 5
DICE_SIDES = 6

# Download
DOWNLOAD_FILENAME = "password.txt"

# HTTPS enforcement
# Set REQUIRE_HTTPS=true in production to reject non-HTTPS requests
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"

# Rate limiting (slowapi limit string, applied per client IP)
RATE_LIMIT = os.environ.get("RATE_LIMIT", "120/minute")

# CORS
# Comma-separated list of origins allowed to call the API from a browser
_cors_origins_env = os.environ.get("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
]
