"""ScriptPress configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptpress.exceptions import ConfigurationError, check_config_keys


class ScriptPressSettings(BaseSettings):
    """ScriptPress configuration settings.

    Settings are loaded with the following precedence (highest to lowest):
    1. CLI arguments (when provided via command flags)
       Example: scriptpress export draft.script --regular-font ./Font.ttf

    2. Config file values (YAML, TOML, or JSON)
       Example: scriptpress --config layout.yaml export draft.script

    3. Environment variables (prefixed with SCRIPTPRESS_)
       Example: export SCRIPTPRESS_MARGIN=54

    4. .env file (in current directory or specified path)

    5. Default values (defined in field declarations below)

    All lengths are PDF points (1/72 inch).
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTPRESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Page geometry (US letter, one inch margins)
    page_width: float = Field(default=612.0, description="Page width", gt=0)
    page_height: float = Field(default=792.0, description="Page height", gt=0)
    margin: float = Field(default=72.0, description="Margin on every side", ge=0)
    line_spacing: float = Field(
        default=18.0,
        description="Vertical advance between two text lines",
        gt=0,
    )
    scene_spacing: float = Field(
        default=30.0,
        description="Extra vertical space taken before each scene heading",
        ge=0,
    )

    # Typography
    default_font_size: float = Field(default=12.0, gt=0)
    title_font_size: float = Field(default=36.0, gt=0)
    subtitle_font_size: float = Field(default=14.0, gt=0)
    regular_font_path: Path | None = Field(
        default=None,
        description="TrueType font for body text (built-in Helvetica if unset)",
    )
    bold_font_path: Path | None = Field(
        default=None,
        description="TrueType font for headings (built-in Helvetica-Bold if unset)",
    )

    # Element layout
    dialogue_width: float = Field(
        default=200.0,
        description="Width of the centred dialogue block",
        gt=0,
    )
    scene_number_padding: float = Field(
        default=10.0,
        description="Gap between a scene number and the text column",
        ge=0,
    )
    scene_numbers_both_margins: bool = Field(
        default=True,
        description=(
            "Draw scene numbers in both gutters; when false only the leading "
            "gutter for the reading direction is used"
        ),
    )
    center_quoted_dialogue: bool = Field(
        default=False,
        description=(
            'Centre dialogue whose text starts with a literal quote ("" sigil '
            "followed by a quote) and drop that quote"
        ),
    )

    # Localisation
    default_language: str = Field(
        default="en",
        description="Fallback language for captions when detection finds nothing",
    )

    # Debug settings
    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(?i)(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(?i)(console|json|structured)$",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    @field_validator("regular_font_path", "bold_font_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and ``~`` in path fields."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            return Path(os.path.expandvars(v)).expanduser().resolve()
        if isinstance(v, Path):
            return v.resolve()
        raise ValueError(
            f"Path fields must be str or Path, got {type(v).__name__}: {v!r}"
        )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.upper()
        raise ValueError(f"log_level must be a string, got {type(v).__name__}")

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> str:
        """Normalize log format to lowercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.lower()
        raise ValueError(f"log_format must be a string, got {type(v).__name__}")

    @field_validator("default_language", mode="before")
    @classmethod
    def normalize_language(cls, v: Any) -> str:
        """Normalize language codes such as ``HE`` or ``he-IL`` to ``he``."""
        if isinstance(v, str):
            return v.strip().lower().split("-")[0].split("_")[0] or "en"
        raise ValueError(
            f"default_language must be a string, got {type(v).__name__}"
        )

    @model_validator(mode="after")
    def check_page_fits_a_line(self) -> ScriptPressSettings:
        """Reject geometries that leave no room for a single line of text."""
        if self.page_height - 2 * self.margin < 0:
            raise ValueError(
                "margin is larger than half the page height; "
                "no line of text would fit"
            )
        if self.page_width - 2 * self.margin <= 0:
            raise ValueError("margin leaves no horizontal room for text")
        return self

    @property
    def text_width(self) -> float:
        """Width of the text column between the two margins."""
        return self.page_width - 2 * self.margin

    @property
    def top_y(self) -> float:
        """Cursor position of the first line on a fresh page."""
        return self.page_height - self.margin

    @classmethod
    def from_env(cls) -> ScriptPressSettings:
        """Create settings from environment variables."""
        return cls()

    @classmethod
    def from_file(cls, config_path: Path | str) -> ScriptPressSettings:
        """Load settings from a configuration file.

        Args:
            config_path: Path to configuration file (YAML, TOML, or JSON).

        Returns:
            Settings loaded from the file.

        Raises:
            ConfigurationError: If file format is not supported.
            FileNotFoundError: If config file doesn't exist.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()

        if suffix in {".yml", ".yaml"}:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".toml":
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        elif suffix == ".json":
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {suffix}",
                hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
                details={
                    "file": str(config_path),
                    "detected_format": suffix,
                    "supported_formats": [".yml", ".yaml", ".toml", ".json"],
                },
            )

        check_config_keys(data)

        return cls(**data)

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> ScriptPressSettings:
        """Load settings with proper precedence from multiple sources.

        Precedence (highest to lowest):
        1. CLI arguments
        2. Config files (last file wins)
        3. Environment variables
        4. .env file
        5. Default values

        Args:
            config_files: List of config files to load (later files override earlier).
            env_file: Path to .env file (default: .env in current directory).
            cli_args: Dictionary of CLI arguments.

        Returns:
            Merged settings from all sources.
        """
        data: dict[str, Any] = {}

        if config_files:
            for config_file in config_files:
                try:
                    file_settings = cls.from_file(config_file)
                    data.update(file_settings.model_dump(exclude_unset=True))
                except FileNotFoundError:
                    from scriptpress.config.logging import get_logger as _get_logger

                    _get_logger("scriptpress.config.settings").warning(
                        "Configuration file not found, using defaults",
                        config_file=str(config_file),
                    )

        if env_file:
            settings = cast(
                "ScriptPressSettings", cast(Any, cls)(_env_file=env_file, **data)
            )
        else:
            settings = cls(**data)

        if cli_args:
            cli_data = {k: v for k, v in cli_args.items() if v is not None}
            if cli_data:
                updated_data = settings.model_dump()
                updated_data.update(cli_data)
                settings = cls(**updated_data)

        return settings


# Global settings instance
_settings: ScriptPressSettings | None = None
# Cache for config file paths that exist
_config_paths_cache: list[Path | str] | None = None


def _get_config_paths() -> list[Path | str]:
    """Get list of config file paths to check.

    Returns paths in priority order (later files override earlier).
    """
    global _config_paths_cache

    if _config_paths_cache is not None:
        return _config_paths_cache

    potential_paths = [
        Path.home() / ".config" / "scriptpress" / "config.yaml",
        Path.home() / ".config" / "scriptpress" / "config.json",
        Path.home() / ".config" / "scriptpress" / "config.toml",
        Path.cwd() / "scriptpress.yaml",
        Path.cwd() / "scriptpress.json",
        Path.cwd() / "scriptpress.toml",
    ]

    existing_paths: list[Path | str] = []
    for path in potential_paths:
        try:
            if path.is_file():
                existing_paths.append(path)
        except OSError:
            continue

    _config_paths_cache = existing_paths
    return existing_paths


def get_settings() -> ScriptPressSettings:
    """Get the global settings instance.

    Returns:
        Global ScriptPressSettings instance.
    """
    global _settings
    if _settings is None:
        config_paths = _get_config_paths()
        if config_paths:
            _settings = ScriptPressSettings.from_multiple_sources(
                config_files=config_paths
            )
        else:
            _settings = ScriptPressSettings.from_env()
    return _settings


def set_settings(settings: ScriptPressSettings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Clear the global settings cache.

    Forces get_settings() to re-read environment variables and
    configuration files on the next call.
    """
    global _settings, _config_paths_cache
    _settings = None
    _config_paths_cache = None


def reset_settings() -> None:
    """Reset the global settings instance."""
    clear_settings_cache()


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ScriptPressSettings:
    """Get settings for CLI commands with consistent precedence.

    Args:
        config_file: Optional specific config file to load. If not provided,
                    uses standard config locations.
        cli_overrides: Dictionary of CLI argument overrides (e.g. font paths).
                      Only non-None values are applied.

    Returns:
        ScriptPressSettings instance with all sources merged.

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist.
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        return ScriptPressSettings.from_multiple_sources(
            config_files=[config_file],
            cli_args=cli_overrides,
        )

    settings = get_settings()
    if cli_overrides:
        filtered_overrides = {k: v for k, v in cli_overrides.items() if v is not None}
        if filtered_overrides:
            data = settings.model_dump()
            data.update(filtered_overrides)
            settings = ScriptPressSettings(**data)

    return settings
