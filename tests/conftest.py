"""Global pytest fixtures for kite."""

from __future__ import annotations

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
SUITE_MARKERS = ("unit", "integration", "functional", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark every test with the suite (top-level directory) it lives in."""
    for item in items:
        path = item.path.resolve()
        for marker_name in SUITE_MARKERS:
            if TESTS_ROOT / marker_name in path.parents:
                if not any(m.name == marker_name for m in item.iter_markers()):
                    item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture(autouse=True)
def isolated_kite_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point kite's config file at a per-test location and clear API overrides.

    Returns:
        Path: The config file path kite will use during the test.
    """
    config_path = tmp_path / "kite" / "config.json"
    monkeypatch.setenv("KITE_CONFIG_PATH", str(config_path))
    monkeypatch.delenv("KITE_API_URL", raising=False)
    return config_path
