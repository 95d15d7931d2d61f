"""Tests for LightboxConfig."""

import pytest

from lightbox.lightbox_config import LightboxConfig


class TestLightboxConfig:
    """Tests for LightboxConfig dataclass."""

    def test_defaults(self):
        """Test default values."""
        config = LightboxConfig()

        assert config.swipe_threshold == 50
        assert config.item_selector == '.gallery-item'
        assert config.lightbox_id == 'lightbox'
        assert config.log_level == 'INFO'
        assert config.validate() == []

    def test_from_env(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv('LIGHTBOX_SWIPE_THRESHOLD', '80')
        monkeypatch.setenv('LIGHTBOX_ITEM_SELECTOR', '.photo')
        monkeypatch.setenv('LIGHTBOX_ELEMENT_ID', 'viewer')
        monkeypatch.setenv('LIGHTBOX_LOG_LEVEL', 'debug')

        config = LightboxConfig.from_env()

        assert config.swipe_threshold == 80
        assert config.item_selector == '.photo'
        assert config.lightbox_id == 'viewer'
        assert config.validate() == []

    def test_from_env_defaults(self, monkeypatch):
        """Test defaults apply when nothing is set."""
        for name in ('LIGHTBOX_SWIPE_THRESHOLD', 'LIGHTBOX_ITEM_SELECTOR',
                     'LIGHTBOX_ELEMENT_ID', 'LIGHTBOX_LOG_LEVEL'):
            monkeypatch.delenv(name, raising=False)

        assert LightboxConfig.from_env() == LightboxConfig()

    def test_from_env_bad_threshold(self, monkeypatch):
        """Test a non-numeric threshold is rejected."""
        monkeypatch.setenv('LIGHTBOX_SWIPE_THRESHOLD', 'wide')

        with pytest.raises(ValueError):
            LightboxConfig.from_env()

    def test_validate_errors(self):
        """Test every invalid field is reported."""
        config = LightboxConfig(
            swipe_threshold=-1,
            item_selector=' ',
            lightbox_id='',
            log_level='LOUD',
        )

        errors = config.validate()

        assert len(errors) == 4
        assert any('Swipe threshold' in e for e in errors)
        assert any('LOUD' in e for e in errors)
