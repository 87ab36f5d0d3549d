"""Tests for environment-driven defaults."""
import importlib

import pytest

from where4 import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload where4.config under a patched environment, then restore it."""

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


class TestCheckPrecision:
    """check_precision accepts 1..8 integers only."""

    @pytest.mark.parametrize("n", [1, 4, 8])
    def test_in_range(self, n):
        """Values inside the bounds come back unchanged."""
        assert config.check_precision(n) == n

    @pytest.mark.parametrize("n", [0, 9, -1])
    def test_out_of_range(self, n):
        """Values outside the bounds are rejected."""
        with pytest.raises(ValueError, match="1-8"):
            config.check_precision(n)

    @pytest.mark.parametrize("n", [4.0, "4", True])
    def test_not_an_int(self, n):
        """Floats, strings and bools are rejected."""
        with pytest.raises(ValueError, match="integer"):
            config.check_precision(n)


class TestEnvironment:
    """WHERE4_* variables are read and checked at import."""

    def test_default_precision(self):
        """Without overrides the default is four words."""
        assert config.DEFAULT_PRECISION == 4

    def test_precision_override(self, reload_config):
        """A valid WHERE4_PRECISION becomes the default."""
        assert reload_config(WHERE4_PRECISION="6").DEFAULT_PRECISION == 6

    def test_bad_precision_fails_at_import(self, reload_config):
        """An unusable WHERE4_PRECISION stops the import."""
        with pytest.raises(ValueError, match="got 12"):
            reload_config(WHERE4_PRECISION="12")

    def test_snap_epsilon_override(self, reload_config):
        """WHERE4_SNAP_EPSILON is parsed as a float."""
        assert reload_config(WHERE4_SNAP_EPSILON="1e-6").SNAP_EPSILON == 1e-6
