"""Configuration file support for light-stemcell."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from light_stemcell.utils.errors import ConfigurationError

LIGHT_STEMCELL_PREFIX = "bosh-light-stemcell"
STEMCELL_CONTAINER = "stemcell"

# Environment variable -> AzureConfig field
ENV_OVERRIDES = {
    "AZURE_SUBSCRIPTION_ID": "subscription_id",
    "AZURE_RESOURCE_GROUP": "resource_group",
    "AZURE_TENANT_ID": "tenant_id",
    "AZURE_CLIENT_ID": "client_id",
    "AZURE_CLIENT_SECRET": "client_secret",
    "AZURE_STORAGE_ACCOUNT": "storage_account_name",
    "AZURE_LOCATION": "location",
}


class AzureConfig(BaseModel):
    """Azure account settings."""

    subscription_id: str | None = Field(default=None, description="Azure subscription ID")
    resource_group: str | None = Field(default=None, description="Resource group holding galleries and storage")
    tenant_id: str | None = Field(default=None, description="Azure AD tenant ID")
    client_id: str | None = Field(default=None, description="Service principal client ID")
    client_secret: str | None = Field(default=None, description="Service principal secret")
    storage_account_name: str | None = Field(default=None, description="Default storage account")
    location: str | None = Field(default=None, description="Default storage account location")
    blob_endpoint_suffix: str = Field(
        default="blob.core.windows.net",
        description="Blob endpoint suffix for the Azure environment",
    )


class StemcellConfig(BaseModel):
    """Light stemcell settings."""

    container: str = Field(default=STEMCELL_CONTAINER, description="Blob container for stemcell metadata")
    prefix: str = Field(default=LIGHT_STEMCELL_PREFIX, description="Prefix for generated stemcell names")
    strict_location: bool = Field(
        default=False,
        description="Treat an image version recorded in another location as not found",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(default="INFO", description="Log level")
    structured: bool = Field(default=False, description="Use structured log format")


class LightStemcellConfig(BaseModel):
    """Main configuration for light-stemcell."""

    azure: AzureConfig = Field(default_factory=AzureConfig)
    stemcell: StemcellConfig = Field(default_factory=StemcellConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths.

    Returns:
        List of paths to check for configuration files
    """
    paths = []

    # Current directory
    paths.append(Path.cwd() / ".light-stemcell.yaml")
    paths.append(Path.cwd() / "light-stemcell.yaml")

    # Home directory
    home = Path.home()
    paths.append(home / ".light-stemcell.yaml")
    paths.append(home / ".config" / "light-stemcell" / "config.yaml")

    # XDG config directory
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "light-stemcell" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> LightStemcellConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If the file is missing, not YAML, or fails validation
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise ConfigurationError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return LightStemcellConfig()


def _load_config_file(path: Path) -> LightStemcellConfig:
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return LightStemcellConfig()
    try:
        return LightStemcellConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e


def save_config(config: LightStemcellConfig, config_path: Path | str | None = None) -> Path:
    """Save configuration to file.

    Args:
        config: Configuration to save
        config_path: Path to save to. Defaults to ~/.config/light-stemcell/config.yaml

    Returns:
        Path where config was saved
    """
    if config_path is None:
        config_path = Path.home() / ".config" / "light-stemcell" / "config.yaml"
    else:
        config_path = Path(config_path)

    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude_defaults=True)
    config_path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))

    return config_path


def apply_env_overrides(config: LightStemcellConfig) -> LightStemcellConfig:
    """Return a copy of config with AZURE_* environment variables applied.

    Args:
        config: Base configuration

    Returns:
        Configuration with overrides
    """
    overrides = {
        field: os.environ[var]
        for var, field in ENV_OVERRIDES.items()
        if os.environ.get(var)
    }
    if not overrides:
        return config
    azure = config.azure.model_copy(update=overrides)
    return config.model_copy(update={"azure": azure})


# Process-wide config for the CLI only
_config: LightStemcellConfig | None = None


def get_config() -> LightStemcellConfig:
    """Get the CLI configuration, loading it on first call."""
    global _config
    if _config is None:
        _config = apply_env_overrides(load_config())
    return _config


def set_config(config: LightStemcellConfig) -> None:
    """Set the CLI configuration."""
    global _config
    _config = config
