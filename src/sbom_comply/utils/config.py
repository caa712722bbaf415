"""Configuration file support for sbom-comply."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from sbom_comply.utils.errors import ConfigurationError

CONFIG_FILE_NAMES = (".sbom-comply.yaml", ".sbom-comply.yml", "sbom-comply.yaml")


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: str = Field(default="detailed", description="Default report format")
    color: bool = Field(default=False, description="Colorize the detailed table")

    @field_validator("default_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "basic", "detailed"):
            raise ValueError(f"unsupported output format: {value}")
        return value


class ComplianceConfig(BaseModel):
    """Compliance run configuration."""

    default_standard: str = Field(default="ntia", description="Standard used when none is given")
    fail_under: float | None = Field(
        default=None,
        description="Exit with an error when the total score is below this value",
    )


class SbomComplyConfig(BaseModel):
    """Main configuration for sbom-comply."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    compliance: ComplianceConfig = Field(default_factory=ComplianceConfig)


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths, most specific first."""
    paths = [Path.cwd() / name for name in CONFIG_FILE_NAMES]

    home = Path.home()
    paths.append(home / ".sbom-comply.yaml")
    paths.append(home / ".config" / "sbom-comply" / "config.yaml")

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "sbom-comply" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> SbomComplyConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If an explicit path is missing or a file is invalid
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise ConfigurationError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return SbomComplyConfig()


def _load_config_file(path: Path) -> SbomComplyConfig:
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return SbomComplyConfig()

    try:
        return SbomComplyConfig.model_validate(data)
    except ValueError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e


def save_config(config: SbomComplyConfig, config_path: Path | str | None = None) -> Path:
    """Save configuration to file.

    Args:
        config: Configuration to save
        config_path: Path to save to. Defaults to ~/.config/sbom-comply/config.yaml

    Returns:
        Path where config was saved
    """
    if config_path is None:
        config_path = Path.home() / ".config" / "sbom-comply" / "config.yaml"
    else:
        config_path = Path(config_path)

    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude_defaults=True)
    config_path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))

    return config_path


# Global config instance
_config: SbomComplyConfig | None = None


def get_config() -> SbomComplyConfig:
    """Get the global configuration instance, loading it on first call."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: SbomComplyConfig | None) -> None:
    """Set (or with None, reset) the global configuration instance."""
    global _config
    _config = config
