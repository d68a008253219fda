"""Generator session state.

Holds the current options and the current result for one user, the way the
generator form does: each generation overwrites the previous value and the
strength estimate is recomputed whenever the value changes.
"""

from typing import Callable, Optional

from core.events import log_event
from core.generator import (
    PasswordOptions,
    PassphraseOptions,
    ValidationError,
    generate_password,
    generate_passphrase,
)
from core.wordlist import WordSource
from password_checker import StrengthReport, check_password_strength


PASSWORD_MODE = "password"
PASSPHRASE_MODE = "passphrase"
MODES = (PASSWORD_MODE, PASSPHRASE_MODE)


class GenerationInProgress(RuntimeError):
    """A generation was requested while another one is still running."""
    pass


class GeneratorSession:
    """Current options, current value and its strength estimate."""

    def __init__(
        self,
        mode: str = PASSWORD_MODE,
        word_source: Optional[WordSource] = None,
        rng=None,
        scorer: Callable[[str], StrengthReport] = check_password_strength,
        source: str = "cli",
    ):
        self.mode = mode
        self.password_options = PasswordOptions()
        self.passphrase_options = PassphraseOptions()
        self.word_source = word_source
        self.rng = rng
        self.scorer = scorer
        self.source = source
        self.is_generating = False
        self.strength: Optional[StrengthReport] = None
        self._value = ""

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, new_value: str) -> None:
        self._value = new_value
        self.strength = self.scorer(new_value) if new_value else None

    def _generate_value(self) -> str:
        if self.mode == PASSWORD_MODE:
            return generate_password(self.password_options, rng=self.rng)

        return generate_passphrase(
            self.passphrase_options,
            include_numbers=self.password_options.include_numbers,
            include_special_chars=self.password_options.include_special_chars,
            word_source=self.word_source,
            rng=self.rng,
        )

    def _event_details(self) -> dict:
        if self.mode == PASSWORD_MODE:
            return {
                "length": self.password_options.length,
                "custom_text_length": len(self.password_options.custom_text),
                "excluded_count": len(set(self.password_options.exclude_chars)),
            }
        return {
            "word_count": self.passphrase_options.word_count,
            "include_numbers": self.password_options.include_numbers,
            "include_special_chars": self.password_options.include_special_chars,
        }

    def generate(self) -> str:
        """Generate a new value for the current mode and options.

        Returns:
            The new value, also stored as ``self.value``

        Raises:
            ValueError: If the mode is unknown
            ValidationError: If the options are unusable; the previous value is kept
            GenerationInProgress: If called while a generation is running
        """
        if self.mode not in MODES:
            raise ValueError(f"Unknown generator mode: {self.mode!r}")
        if self.is_generating:
            raise GenerationInProgress("A generation is already in progress.")

        event_type = f"generate_{self.mode}"
        details = self._event_details()

        self.is_generating = True
        try:
            new_value = self._generate_value()
        except ValidationError as e:
            log_event(event_type, "FAILURE", source=self.source, details={**details, "error": str(e)})
            raise
        finally:
            self.is_generating = False

        self.value = new_value
        log_event(event_type, "SUCCESS", source=self.source, details=details)
        return new_value
