"""Unit tests for OSC-8 hyperlink helpers."""

import io

import pytest

from depthsweep.entrypoints.cli.helpers import hyperlinks

URL = "https://eips.ethereum.org/EIPS/eip-150"

# pylint: disable=too-few-public-methods


class FakeTTY(io.StringIO):
    """StringIO that claims to be a terminal."""

    def isatty(self) -> bool:
        return True


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove terminal-identifying variables."""
    for name in ("TERM_PROGRAM", "WT_SESSION", "VTE_VERSION", "TERM"):
        monkeypatch.delenv(name, raising=False)


def test_non_tty_never_supports_osc8(monkeypatch):
    """Pipes and files get plain URLs."""
    monkeypatch.setenv("TERM_PROGRAM", "vscode")
    assert not hyperlinks.supports_osc8(io.StringIO())


@pytest.mark.parametrize(
    "name, value",
    [
        ("TERM_PROGRAM", "vscode"),
        ("TERM_PROGRAM", "iTerm.app"),
        ("WT_SESSION", "1"),
        ("VTE_VERSION", "7600"),
        ("TERM", "alacritty"),
    ],
)
def test_known_terminals(monkeypatch, name, value):
    """Allow-listed terminals support OSC-8."""
    monkeypatch.setenv(name, value)
    assert hyperlinks.supports_osc8(FakeTTY())


def test_unknown_terminal(monkeypatch):
    """Unknown terminals fall back to plain text."""
    monkeypatch.setenv("TERM", "xterm")
    assert not hyperlinks.supports_osc8(FakeTTY())


def test_hyperlink_plain_fallback(monkeypatch):
    """Without support the URL is returned unchanged."""
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda stream=None: False)
    assert hyperlinks.hyperlink(URL) == URL


def test_hyperlink_osc8(monkeypatch):
    """With support the URL is wrapped in BEL-terminated OSC-8 escapes."""
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda stream=None: True)
    assert hyperlinks.hyperlink(URL) == f"\x1b]8;;{URL}\x07{URL}\x1b]8;;\x07"
