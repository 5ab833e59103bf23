"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

import pytest

from midiwire.cli.main import main, parse_hex


def run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "midiwire.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "midiwire: Typed MIDI Message Codec" in result.stdout
    assert "decode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert "midiwire 0.1.0" in result.stdout


def test_cli_no_args_shows_help() -> None:
    """Test CLI with no command prints help."""
    result = run_cli()
    assert result.returncode == 0
    assert "usage: midiwire" in result.stdout


def test_cli_decode() -> None:
    """Test decoding messages given as hex."""
    result = run_cli("decode", "90 3c 5a", "ff2f00")
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "NoteOn(channel=0, pitch=60, velocity=90)"
    assert lines[1] == "EndOfTrack()"


def test_cli_decode_unsupported() -> None:
    """Test strict decoding fails on unsupported messages."""
    result = run_cli("decode", "e0 00 40")
    assert result.returncode == 1
    assert "Unsupported MIDI message [e0,0,40]" in result.stderr


def test_cli_decode_lenient() -> None:
    """Test lenient decoding skips unsupported messages."""
    result = run_cli("decode", "--lenient", "e0 00 40", "80 3c 00")
    assert result.returncode == 0
    assert result.stdout.splitlines() == [
        "skipped: [e0,0,40]",
        "NoteOff(channel=0, pitch=60, velocity=0)",
    ]


def test_cli_decode_invalid_hex() -> None:
    """Test invalid hex is reported."""
    result = run_cli("decode", "zz")
    assert result.returncode == 1
    assert "invalid hex" in result.stderr


class TestParseHex:
    """Test hex argument parsing."""

    @pytest.mark.parametrize("text", ["90 3c 5a", "90,3c,5a", "[90,3c,5a]", "903c5a", " 90 3C 5A "])
    def test_formats(self, text: str) -> None:
        """Test accepted spellings."""
        assert parse_hex(text) == b"\x90\x3c\x5a"

    def test_short_groups(self) -> None:
        """Test single-digit groups as printed in error messages."""
        assert parse_hex("[e0,0,40]") == b"\xe0\x00\x40"

    def test_invalid(self) -> None:
        """Test rejecting non-hex text."""
        with pytest.raises(ValueError):
            parse_hex("9g")


def test_main_in_process(capsys: pytest.CaptureFixture[str]) -> None:
    """Test calling main() directly."""
    assert main(["decode", "c1 05"]) == 0
    assert capsys.readouterr().out.strip() == "ProgramChange(channel=1, patch=5)"
