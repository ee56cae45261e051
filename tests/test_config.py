"""Tests for run configuration."""

import pytest
from lifeconsole import config
from lifeconsole.config import LifeConfig


def test_default_constants():
    assert config.BOARD_SIZE == 25
    assert config.TIMEOUT_MS == 750
    assert config.LIFE_DENOMINATOR == 6


class TestLifeConfig:
    """Test LifeConfig defaults, overrides and validation."""

    def test_standard(self):
        cfg = LifeConfig.standard()
        assert (cfg.board_size, cfg.timeout_ms, cfg.life_denominator) == (25, 750, 6)
        assert cfg.timeout_seconds == 0.75

    def test_partial_override(self):
        cfg = LifeConfig(board_size=10)
        assert cfg.board_size == 10
        assert cfg.timeout_ms == 750

    def test_zero_timeout_allowed(self):
        assert LifeConfig(timeout_ms=0).timeout_seconds == 0.0

    @pytest.mark.parametrize("kwargs, message", [
        ({"board_size": 0}, "Board size"),
        ({"timeout_ms": -1}, "Timeout"),
        ({"life_denominator": 0}, "Life denominator"),
    ])
    def test_validation(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            LifeConfig(**kwargs)

    def test_repr(self):
        assert repr(LifeConfig.standard()) == "LifeConfig(board_size=25, timeout_ms=750, life_denominator=6)"
