"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints.
"""

from pydantic import BaseModel, Field

from core.config import (
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    DEFAULT_PASSWORD_LENGTH,
    MIN_WORD_COUNT,
    MAX_WORD_COUNT,
    DEFAULT_WORD_COUNT,
    DEFAULT_SEPARATOR,
)


class PasswordGenerateRequest(BaseModel):
    """Request model for password generation."""
    length: int = Field(
        default=DEFAULT_PASSWORD_LENGTH,
        ge=MIN_PASSWORD_LENGTH,
        le=MAX_PASSWORD_LENGTH,
        description="Password length"
    )
    include_uppercase: bool = Field(default=True, description="Include uppercase letters")
    include_lowercase: bool = Field(default=True, description="Include lowercase letters")
    include_numbers: bool = Field(default=True, description="Include digits")
    include_special_chars: bool = Field(default=False, description="Include special characters")
    custom_text: str = Field(default="", max_length=MAX_PASSWORD_LENGTH, description="Text embedded in the password")
    exclude_chars: str = Field(default="", max_length=256, description="Characters that must not appear")


class PassphraseGenerateRequest(BaseModel):
    """Request model for passphrase generation."""
    word_count: int = Field(
        default=DEFAULT_WORD_COUNT,
        ge=MIN_WORD_COUNT,
        le=MAX_WORD_COUNT,
        description="Number of words"
    )
    separator: str = Field(default=DEFAULT_SEPARATOR, max_length=16, description="Text between words")
    include_numbers: bool = Field(default=False, description="Append a random digit")
    include_special_chars: bool = Field(default=False, description="Append a random special character")


class StrengthResponse(BaseModel):
    """Strength estimate for a value."""
    score: int
    label: str
    warning: str
    suggestions: list[str]


class GenerateResponse(BaseModel):
    """Response model for a generated password or passphrase."""
    value: str
    mode: str
    strength: StrengthResponse


class StrengthCheckRequest(BaseModel):
    """Request model for password strength check."""
    password: str = Field(..., min_length=1, description="Password to check")


class DownloadRequest(BaseModel):
    """Request model for downloading a value as a text file."""
    value: str = Field(..., min_length=1, description="Value to download")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    wordlist_size: int
