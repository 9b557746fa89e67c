"""Shared fixtures for CLI tests."""

from argparse import Namespace

import pytest

from corkboard.prefs import Preferences, PrefsStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment out of settings."""
    for name in ("CORKBOARD_HOME", "CORKBOARD_SEED_URL", "CORKBOARD_SEED_TIMEOUT", "CORKBOARD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def home(tmp_path):
    return tmp_path / "home"


@pytest.fixture
def saved_prefs(home):
    """A home directory with stored preferences."""
    PrefsStore(home / "prefs.yaml").save(Preferences(name="Ada", theme="France"))
    return home


def _args(home, **kwargs):
    """Namespace with the common options filled in."""
    base = dict(home=str(home), board=None, seed_url=None, log_level=None, log_file=None, json=False)
    base.update(kwargs)
    return Namespace(**base)
