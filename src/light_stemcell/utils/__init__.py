"""Utility functions for light-stemcell."""

from light_stemcell.utils.logging import configure_logging, get_logger, get_logger_with_context
from light_stemcell.utils.errors import (
    CloudError,
    ConfigurationError,
    ImageNotFoundError,
    InvalidImageError,
    StemcellNotFoundError,
    StorageError,
    cloud_error,
)
from light_stemcell.utils.config import (
    AzureConfig,
    LightStemcellConfig,
    LoggingConfig,
    StemcellConfig,
    apply_env_overrides,
    get_config,
    load_config,
    save_config,
    set_config,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    # Errors
    "CloudError",
    "ConfigurationError",
    "ImageNotFoundError",
    "InvalidImageError",
    "StemcellNotFoundError",
    "StorageError",
    "cloud_error",
    # Config
    "AzureConfig",
    "LightStemcellConfig",
    "LoggingConfig",
    "StemcellConfig",
    "apply_env_overrides",
    "get_config",
    "load_config",
    "save_config",
    "set_config",
]
