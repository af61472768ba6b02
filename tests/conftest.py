import os

import pytest

from core.config import AppSettings


class FailingRandom:
    """Random source whose entropy pool is unavailable."""

    def choice(self, seq):
        raise OSError("getrandom() failed")


class FixedRandom:
    """Deterministic source that always picks the first character."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def failing_rng():
    return FailingRandom()


@pytest.fixture
def fixed_rng():
    return FixedRandom()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    # keep developer .env files and PWGEN_* variables out of the tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for var in ("PWGEN_DEFAULT_LENGTH", "PWGEN_OUTPUT_TAGS", "PWGEN_LOG_LEVEL", "PWGEN_MASK_PLAIN"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings():
    return AppSettings()


@pytest.fixture
def clean_env():
    """Snapshot os.environ and restore it after the test."""
    saved = dict(os.environ)
    yield os.environ
    os.environ.clear()
    os.environ.update(saved)
