"""Shared test fixtures for the NextStep test suite."""

import json
import os

import pytest

from models import Opportunity

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


def _load_sample_profile():
    with open(os.path.join(FIXTURES_DIR, "sample_profile.json")) as f:
        return json.load(f)


@pytest.fixture(autouse=True)
def mock_profile(monkeypatch, tmp_path):
    """Autouse fixture that injects a known test profile for every test.

    Resets user_profile._profile so get_profile() returns the test data,
    points the store and reports at tmp_path, and calls config.reload()
    to refresh all config globals.
    """
    import config
    import user_profile

    profile = _load_sample_profile()
    profile["store_path"] = str(tmp_path / "nextstep.db")
    profile["reports_dir"] = str(tmp_path / "reports")
    monkeypatch.setattr(user_profile, "_profile", profile)
    config.reload()
    yield profile


@pytest.fixture
def make_opportunity():
    """Factory fixture for creating Opportunity instances with defaults."""

    def _make(**overrides):
        defaults = {
            "id": "opp-1",
            "title": "Summer Software Internship",
            "category": "internship",
            "description": "Build internal tools with the platform team.",
            "external_link": "https://example.com/opp/1",
            "date": "June 15, 2026",
            "time": "9:00 AM",
            "location": "Remote",
            "tags": ("Technology", "Paid"),
        }
        defaults.update(overrides)
        if isinstance(defaults["tags"], list):
            defaults["tags"] = tuple(defaults["tags"])
        return Opportunity(**defaults)

    return _make


@pytest.fixture
def tmp_db(tmp_path):
    """Create a temporary SQLite key-value store."""
    from store import init_db

    db_path = str(tmp_path / "test_store.db")
    init_db(db_path)
    return db_path


@pytest.fixture
def fixture_path():
    """Return the path to the fixtures directory."""
    return FIXTURES_DIR


def load_fixture(filename):
    """Load a fixture file by name."""
    path = os.path.join(FIXTURES_DIR, filename)
    with open(path) as f:
        if filename.endswith(".json"):
            return json.load(f)
        return f.read()
