"""Catalog configuration schema and loading.

Public API:
    - CatalogConfiguration: Root configuration model
    - CabinetTypeConfig: Cabinet tile entry
    - RatioConfig: Predefined ratio entry
    - load_catalog_config: Load configuration from a JSON file
    - load_catalog_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_cabinet_types: Convert config cabinets to domain objects
    - config_to_ratios: Convert config ratios to domain objects

Example:
    >>> from pathlib import Path
    >>> from ledwall.application.config import load_catalog_config, ConfigError
    >>>
    >>> try:
    ...     config = load_catalog_config(Path("catalog.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from ledwall.application.config.adapter import (
    config_to_cabinet_types,
    config_to_ratios,
)
from ledwall.application.config.loader import (
    ConfigError,
    load_catalog_config,
    load_catalog_config_from_dict,
)
from ledwall.application.config.schema import (
    CabinetTypeConfig,
    CatalogConfiguration,
    RatioConfig,
    SUPPORTED_VERSIONS,
)

__all__ = [
    "CabinetTypeConfig",
    "CatalogConfiguration",
    "ConfigError",
    "RatioConfig",
    "SUPPORTED_VERSIONS",
    "config_to_cabinet_types",
    "config_to_ratios",
    "load_catalog_config",
    "load_catalog_config_from_dict",
]
