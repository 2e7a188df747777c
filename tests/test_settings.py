"""
Settings tests - environment-driven configuration
"""

import pytest
from pydantic import ValidationError

from directive_mdx.config import AppSettings
from directive_mdx.models.casing import Casing


class TestAppSettings:
    """Test AppSettings defaults and environment overrides"""

    def test_defaults(self):
        """Defaults match the plugin's documented behaviour"""
        settings = AppSettings()

        assert settings.skip_transformed is True
        assert settings.normalize_names is False
        assert settings.tag_casing is Casing.PASCAL
        assert settings.attribute_casing is Casing.CAMEL
        assert settings.class_name is False
        assert settings.label_slot is False
        assert settings.verbosity == 1

    def test_environment_overrides(self, monkeypatch):
        """DIRECTIVE_MDX_ variables override defaults, case-insensitively"""
        monkeypatch.setenv('DIRECTIVE_MDX_TAG_CASING', 'kebab')
        monkeypatch.setenv('DIRECTIVE_MDX_SKIP_TRANSFORMED', 'false')
        monkeypatch.setenv('directive_mdx_class_name', 'true')

        settings = AppSettings()

        assert settings.tag_casing is Casing.KEBAB
        assert settings.skip_transformed is False
        assert settings.class_name is True

    def test_invalid_casing_rejected(self, monkeypatch):
        """An unknown casing name fails validation"""
        monkeypatch.setenv('DIRECTIVE_MDX_ATTRIBUTE_CASING', 'shouty')

        with pytest.raises(ValidationError):
            AppSettings()

    def test_negative_verbosity_rejected(self):
        """Verbosity may not be negative"""
        with pytest.raises(ValidationError):
            AppSettings(verbosity=-1)
