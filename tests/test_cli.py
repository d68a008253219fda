"""Tests for CLI flows, clipboard and download."""

import os
import stat
import sys
from unittest.mock import patch

import pyperclip
import pytest

from cli.tester import test_password_flow as run_password_test
from cli.generator import (
    _mask_password,
    copy_to_clipboard,
    download_password,
    generate_password_flow,
    generate_passphrase_flow,
    offer_download,
)
from core import GeneratorSession, StaticWordSource, StorageError, save_text


class TestClipboard:
    """Test clipboard copy."""

    @patch("cli.generator.pyperclip.copy")
    def test_copy_success(self, mock_copy):
        assert copy_to_clipboard("secret") is True
        mock_copy.assert_called_once_with("secret")

    @patch("cli.generator.pyperclip.copy", side_effect=pyperclip.PyperclipException("no clipboard"))
    def test_copy_failure_is_reported(self, mock_copy):
        assert copy_to_clipboard("secret") is False

    @patch("cli.generator.pyperclip.copy")
    def test_empty_value_not_copied(self, mock_copy):
        assert copy_to_clipboard("") is False
        mock_copy.assert_not_called()


class TestDownload:
    """Test the password.txt download."""

    def test_writes_password_txt(self, tmp_path):
        path = download_password("Secr3t-Value", str(tmp_path))
        assert os.path.basename(path) == "password.txt"
        with open(path, encoding="utf-8") as f:
            assert f.read() == "Secr3t-Value"

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_owner_only_permissions(self, tmp_path):
        path = download_password("value", str(tmp_path))
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    def test_empty_value_not_written(self, tmp_path):
        assert download_password("", str(tmp_path)) is None
        assert not (tmp_path / "password.txt").exists()

    def test_overwrites_previous_download(self, tmp_path):
        download_password("first", str(tmp_path))
        path = download_password("second", str(tmp_path))
        with open(path, encoding="utf-8") as f:
            assert f.read() == "second"

    def test_missing_directory_raises_storage_error(self, tmp_path):
        with pytest.raises(StorageError):
            save_text(str(tmp_path / "missing" / "password.txt"), "value")

    @patch("builtins.input", return_value="y")
    def test_offer_download_confirmed(self, mock_input, tmp_path):
        path = offer_download("value", str(tmp_path))
        assert path == os.path.join(str(tmp_path), "password.txt")

    @patch("builtins.input", return_value="n")
    def test_offer_download_declined(self, mock_input, tmp_path):
        assert offer_download("value", str(tmp_path)) is None
        assert not (tmp_path / "password.txt").exists()


class TestMasking:
    def test_mask_long_value(self):
        assert _mask_password("Ab12secretxy9!") == "Ab12******xy9!"

    def test_mask_short_value(self):
        assert _mask_password("short") == "*****"


class TestFlows:
    """Test interactive flows with scripted input."""

    @patch("cli.generator.offer_download", return_value=None)
    @patch("cli.generator.copy_to_clipboard", return_value=True)
    def test_password_flow(self, mock_copy, mock_download, capsys):
        # length, upper, lower, numbers, special, custom text, exclusions
        answers = iter(["16", "n", "n", "y", "n", "", "0"])
        with patch("builtins.input", lambda _: next(answers)):
            value = generate_password_flow()

        assert len(value) == 16
        assert value.isdigit()
        assert "0" not in value
        mock_copy.assert_called_once_with(value)
        assert "Strength:" in capsys.readouterr().out

    @patch("cli.generator.offer_download", return_value=None)
    @patch("cli.generator.copy_to_clipboard", return_value=True)
    def test_password_flow_reports_validation_error(self, mock_copy, mock_download, capsys):
        answers = iter(["4", "y", "y", "y", "y", "toolong", ""])
        with patch("builtins.input", lambda _: next(answers)):
            value = generate_password_flow()

        assert value is None
        assert "custom text too long" in capsys.readouterr().out
        mock_copy.assert_not_called()

    def test_password_flow_cancel(self, capsys):
        with patch("builtins.input", return_value="q"):
            assert generate_password_flow() is None
        assert "Canceled" in capsys.readouterr().out

    @patch("cli.generator.offer_download", return_value=None)
    @patch("cli.generator.copy_to_clipboard", return_value=True)
    def test_passphrase_flow(self, mock_copy, mock_download):
        session = GeneratorSession(word_source=StaticWordSource(["one", "two", "three"]))
        # word count, separator, trailing number, trailing special
        answers = iter(["4", ".", "y", "n"])
        with patch("builtins.input", lambda _: next(answers)):
            value = generate_passphrase_flow(session)

        assert value[-1].isdigit()
        assert len(value[:-1].split(".")) == 4
        assert session.value == value

    @patch("cli.generator.offer_download", return_value=None)
    @patch("cli.generator.copy_to_clipboard", return_value=False)
    def test_clipboard_failure_falls_back_to_masked(self, mock_copy, mock_download, capsys):
        session = GeneratorSession(word_source=StaticWordSource(["one", "two", "three"]))
        # defaults for count and separator, no suffixes, decline reveal
        answers = iter(["", "", "n", "n", "n"])
        with patch("builtins.input", lambda _: next(answers)):
            value = generate_passphrase_flow(session)

        out = capsys.readouterr().out
        assert "Could not copy to clipboard" in out
        assert value not in out
        assert len(value.split("-")) == 6


class TestTesterFlow:
    """Test the password testing flow."""

    @patch("cli.tester.getpass.getpass", return_value="password")
    def test_reports_strength(self, mock_getpass, capsys):
        run_password_test()
        out = capsys.readouterr().out
        assert "Strength: Weak (0/4)" in out

    @patch("cli.tester.getpass.getpass", return_value="")
    def test_empty_input(self, mock_getpass, capsys):
        run_password_test()
        assert "No password entered." in capsys.readouterr().out
