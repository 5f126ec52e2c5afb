"""Tests for settings and the default random source."""

import pytest
from pydantic import ValidationError

from py_drills.config import Settings
from py_drills.core.random_source import RandomSource
from py_drills.utils import random as default_random


@pytest.fixture(autouse=True)
def fresh_default_source():
    """Reset the default source around each test."""
    default_random.reset_random_source()
    yield
    default_random.reset_random_source()


class TestSettings:
    """Test settings loading and validation."""

    def test_defaults(self):
        settings = Settings()

        assert settings.guess_min == 1
        assert settings.guess_max == 100
        assert settings.max_guesses == 10
        assert settings.gravity == 9.8
        assert settings.drop_seconds == 6
        assert settings.random_seed is None

    def test_environment_override(self, monkeypatch):
        """Test that prefixed environment variables are read."""
        monkeypatch.setenv("PY_DRILLS_MAX_GUESSES", "5")
        monkeypatch.setenv("PY_DRILLS_RANDOM_SEED", "99")

        settings = Settings()

        assert settings.max_guesses == 5
        assert settings.random_seed == 99

    def test_inverted_guess_range(self):
        with pytest.raises(ValidationError):
            Settings(guess_min=10, guess_max=1)

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            Settings(max_guesses=0)
        with pytest.raises(ValidationError):
            Settings(gravity=0)
        with pytest.raises(ValidationError):
            Settings(log_format="xml")

    def test_negative_seed_rejected(self, monkeypatch):
        """Test that a negative seed is rejected at load time."""
        with pytest.raises(ValidationError):
            Settings(random_seed=-1)

        monkeypatch.setenv("PY_DRILLS_RANDOM_SEED", "-1")
        with pytest.raises(ValidationError):
            Settings()


class TestDefaultSource:
    """Test the process-wide default source."""

    def test_created_once(self):
        """Test that the default source is created lazily and reused."""
        source = default_random.get_random_source()
        assert default_random.get_random_source() is source

    def test_reset(self):
        source = default_random.get_random_source()
        default_random.reset_random_source()
        assert default_random.get_random_source() is not source

    def test_set_source(self):
        """Test replacing the default source."""
        source = RandomSource(1)
        default_random.set_random_source(source)

        assert default_random.get_random_source() is source
        default_random.get(1, 6)
        assert source.call_count == 1

    def test_seed_from_settings(self, monkeypatch):
        """Test that a configured seed makes the default source reproducible."""
        monkeypatch.setattr(default_random.settings, "random_seed", 7)

        draws = [default_random.get(1, 1000) for _ in range(10)]
        expected = RandomSource(7)
        assert draws == [expected.get(1, 1000) for _ in range(10)]

    def test_module_get_in_range(self):
        for _ in range(100):
            assert 1 <= default_random.get(1, 6) <= 6

