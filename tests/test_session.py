"""Tests for generator session state and event logging."""

import random
import string

import pytest

from core import (
    GeneratorSession,
    GenerationInProgress,
    NoCharsetSelected,
    PasswordOptions,
    PassphraseOptions,
    StaticWordSource,
    PASSWORD_MODE,
    PASSPHRASE_MODE,
    get_events,
)
from password_checker import StrengthReport


WORDS = ["apple", "berry", "cherry"]


class TestGeneratorSession:
    """Test cases for the current options/result pair."""

    def test_password_mode(self):
        session = GeneratorSession()
        value = session.generate()
        assert session.mode == PASSWORD_MODE
        assert session.value == value
        assert len(value) == 12

    def test_strength_tracks_value(self):
        """Strength is recomputed when the value changes."""
        session = GeneratorSession()
        assert session.strength is None

        session.generate()
        assert isinstance(session.strength, StrengthReport)

        session.value = "password"
        assert session.strength.score == 0

        session.value = ""
        assert session.strength is None

    def test_scorer_called_per_value(self):
        scored = []

        def scorer(value):
            scored.append(value)
            return StrengthReport(score=4)

        session = GeneratorSession(scorer=scorer)
        first = session.generate()
        second = session.generate()
        assert scored == [first, second]

    def test_last_write_wins(self):
        session = GeneratorSession(rng=random.Random(5))
        session.generate()
        session.password_options = PasswordOptions(length=30)
        latest = session.generate()
        assert session.value == latest
        assert len(session.value) == 30

    def test_passphrase_mode_uses_password_flags(self):
        """Passphrase suffixes follow the shared number/special flags."""
        session = GeneratorSession(mode=PASSPHRASE_MODE, word_source=StaticWordSource(WORDS))
        session.passphrase_options = PassphraseOptions(word_count=3, separator="+")
        session.password_options.include_numbers = True
        session.password_options.include_special_chars = False

        value = session.generate()
        assert value[-1] in string.digits
        assert all(word in WORDS for word in value[:-1].split("+"))

    def test_failure_keeps_previous_value(self):
        """A validation error leaves the last good result in place."""
        session = GeneratorSession()
        previous = session.generate()
        previous_strength = session.strength

        session.password_options = PasswordOptions(
            include_uppercase=False, include_lowercase=False,
            include_numbers=False, include_special_chars=False
        )
        with pytest.raises(NoCharsetSelected):
            session.generate()

        assert session.value == previous
        assert session.strength is previous_strength
        assert session.is_generating is False

    def test_unknown_mode(self):
        session = GeneratorSession(mode="pin")
        with pytest.raises(ValueError):
            session.generate()

    def test_reentrant_generation_rejected(self):
        session = GeneratorSession()
        session.is_generating = True
        with pytest.raises(GenerationInProgress):
            session.generate()


class TestGenerationEvents:
    """Test event logging around generation."""

    def test_success_event(self, event_log):
        session = GeneratorSession()
        session.password_options = PasswordOptions(length=20, custom_text="abc")
        value = session.generate()

        events = get_events()
        assert len(events) == 1
        event = events[0]
        assert event["event_type"] == "generate_password"
        assert event["status"] == "SUCCESS"
        assert event["source"] == "cli"
        assert event["details"]["length"] == 20
        assert event["details"]["custom_text_length"] == 3
        assert value not in event_log.read_text()

    def test_failure_event(self):
        session = GeneratorSession()
        session.password_options = PasswordOptions(length=4, custom_text="secret")
        with pytest.raises(ValueError):
            session.generate()

        event = get_events()[-1]
        assert event["status"] == "FAILURE"
        assert event["details"]["error"] == "custom text too long"

    def test_custom_text_never_logged(self, event_log):
        session = GeneratorSession()
        session.password_options = PasswordOptions(length=30, custom_text="MyDogRex")
        session.generate()
        assert "MyDogRex" not in event_log.read_text()

    def test_passphrase_event(self):
        session = GeneratorSession(mode=PASSPHRASE_MODE, word_source=StaticWordSource(WORDS), source="api")
        session.generate()

        event = get_events()[-1]
        assert event["event_type"] == "generate_passphrase"
        assert event["source"] == "api"
        assert event["details"]["word_count"] == 6

    def test_limit(self):
        session = GeneratorSession()
        for _ in range(5):
            session.generate()
        assert len(get_events(limit=3)) == 3
