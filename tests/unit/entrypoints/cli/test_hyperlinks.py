"""Unit tests for the OSC-8 hyperlink helpers."""

from __future__ import annotations

import pytest

from kite.entrypoints.cli.helpers import hyperlinks


class FakeTTY:
    """Minimal stream that claims to be an interactive terminal."""

    # pylint: disable=too-few-public-methods

    @staticmethod
    def isatty() -> bool:
        """Pretend to be a terminal so the env heuristics run."""
        return True


@pytest.fixture(autouse=True)
def _clean_osc8_env(monkeypatch):
    """Clear terminal-identifying env vars so only the case under test applies."""
    for k in ("TERM_PROGRAM", "WT_SESSION", "VTE_VERSION", "TERM"):
        monkeypatch.delenv(k, raising=False)


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ({"TERM_PROGRAM": "vscode"}, True),
        ({"TERM_PROGRAM": "Apple_Terminal"}, True),
        ({"TERM_PROGRAM": "iTerm.app"}, True),
        ({"TERM_PROGRAM": "WezTerm"}, True),
        ({"TERM_PROGRAM": "kitty"}, True),
        ({"WT_SESSION": "1"}, True),
        ({"VTE_VERSION": "6000"}, True),
        ({"TERM": "alacritty"}, True),
        ({"TERM": "konsole-256color"}, True),
        ({"TERM": "xterm-256color"}, False),
        ({}, False),
    ],
)
def test_supports_osc8_matrix(monkeypatch, env, expected):
    """The heuristic recognises the known terminal signals."""
    for k, v in env.items():
        monkeypatch.setenv(k, v)
    assert hyperlinks.supports_osc8(stream=FakeTTY()) is expected  # type: ignore[arg-type]


def test_supports_osc8_non_tty(monkeypatch):
    """A non-terminal stream never gets hyperlinks, whatever the env says."""

    class FakeNonTTY:
        # pylint: disable=missing-function-docstring,too-few-public-methods
        @staticmethod
        def isatty() -> bool:
            return False

    monkeypatch.setenv("TERM_PROGRAM", "vscode")
    assert hyperlinks.supports_osc8(stream=FakeNonTTY()) is False  # type: ignore[arg-type]


def test_hyperlink_plain_when_unsupported(monkeypatch):
    """Without OSC-8 support the bare URL is returned, label ignored."""
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda stream=None: False)
    assert hyperlinks.hyperlink("https://example.test", "docs") == "https://example.test"


@pytest.mark.parametrize(
    ("label", "visible"), [(None, "https://example.test"), ("docs", "docs")]
)
def test_hyperlink_osc8_when_supported(monkeypatch, label, visible):
    """With OSC-8 support the URL is wrapped in BEL-terminated sequences."""
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda stream=None: True)
    assert hyperlinks.hyperlink("https://example.test", label) == (
        f"\x1b]8;;https://example.test\x07{visible}\x1b]8;;\x07"
    )
