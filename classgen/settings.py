"""Configuration settings for class generation.

Settings are loaded from environment variables with .env file support via
pydantic-settings.

Environment variables:
    CLASSGEN_DEFAULT_OUTPUT_DIR: Output directory for classes that do not set
        one and whose input file has no default-output attribute
    CLASSGEN_FILE_EXTENSION: Suffix of generated files (default ".php")

Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values

Example:
    >>> from classgen.settings import settings
    >>> print(settings.file_extension)
    .php

Note:
    Layout conventions (4-space indent, 80-column wrapping) are part of the
    output format and live as module constants in classgen.formatting.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the generator.

    Attributes:
        default_output_dir: Fallback output directory. Empty means unset.
        file_extension: Suffix appended to the class name for each output file.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLASSGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    default_output_dir: str = ""
    file_extension: str = ".php"


settings = Settings()
"""Global settings instance, created at import."""
