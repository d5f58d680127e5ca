"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from scriptpress.config import ScriptPressSettings, reset_settings, set_settings
from scriptpress.layout import FontSet, LayoutEngine, MonospaceMetrics

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import clean_runner, cli_invoke  # noqa: F401

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "scripts"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test with default settings and no SCRIPTPRESS_ environment.

    Prevents user config files and environment variables from leaking into
    tests, and tests from leaking settings into each other.
    """
    for var in [k for k in os.environ if k.startswith("SCRIPTPRESS_")]:
        monkeypatch.delenv(var, raising=False)

    reset_settings()
    set_settings(ScriptPressSettings(_env_file=None))

    yield

    reset_settings()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample_script_path(tmp_path) -> Path:
    """A copy of the sample script in a temp directory.

    Tests must never write next to the fixture files, so they get a copy.
    """
    target = tmp_path / "the_long_night.script"
    target.write_text(
        (FIXTURES_DIR / "the_long_night.script").read_text(encoding="utf-8"),
        encoding="utf-8",
    )
    return target


@pytest.fixture
def sample_text() -> str:
    return (FIXTURES_DIR / "the_long_night.script").read_text(encoding="utf-8")


@pytest.fixture
def hebrew_text() -> str:
    return (FIXTURES_DIR / "hebrew.script").read_text(encoding="utf-8")


@pytest.fixture
def settings() -> ScriptPressSettings:
    return ScriptPressSettings(_env_file=None)


@pytest.fixture
def engine(settings) -> LayoutEngine:
    """Layout engine with Courier-like metrics (7.2pt per character at 12pt)."""
    return LayoutEngine(settings=settings, fonts=FontSet(MonospaceMetrics()))
