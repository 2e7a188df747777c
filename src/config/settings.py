"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use DIRECTIVE_MDX_ prefix (e.g., DIRECTIVE_MDX_TAG_CASING=kebab).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.casing import Casing


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use DIRECTIVE_MDX_ prefix.

    Examples:
        DIRECTIVE_MDX_SKIP_TRANSFORMED=false
        DIRECTIVE_MDX_NORMALIZE_NAMES=true
        DIRECTIVE_MDX_ATTRIBUTE_CASING=snake
        DIRECTIVE_MDX_VERBOSITY=3
    """

    model_config = SettingsConfigDict(
        env_prefix="DIRECTIVE_MDX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Traversal configuration
    skip_transformed: bool = Field(
        default=True,
        description="Skip directives another pass already lowered (data.hName set)",
    )

    # Name normalization
    normalize_names: bool = Field(
        default=False,
        description="Install tag/attribute casing normalizers built from the settings below",
    )

    tag_casing: Casing = Field(
        default=Casing.PASCAL,
        description="Casing for non-HTML tag names when normalize_names is on",
    )

    attribute_casing: Casing = Field(
        default=Casing.CAMEL,
        description="Casing for attribute names when normalize_names is on",
    )

    class_name: bool = Field(
        default=False,
        description="Rename a 'class' attribute to 'className' when normalize_names is on",
    )

    # Label handling
    label_slot: bool = Field(
        default=False,
        description="Append container labels as <Fragment slot=\"label\"> instead of discarding them",
    )

    # Logging
    verbosity: int = Field(
        default=1,
        ge=0,
        description="Default logging verbosity for Processor runs (0-3)",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
