"""Settings and catalogue loading for the configurator.

Public API:
    - ConfiguratorSettings: Root settings model
    - PricingSettings: Authoritative pricing service settings
    - TabletopDefaultsConfig: Starting configuration model
    - CatalogueMaterialConfig: Catalogue record model
    - load_settings / load_settings_from_dict: Load settings
    - load_catalogue: Load a catalogue JSON file
    - ConfigError: Exception for configuration errors
    - config_to_tabletop / config_to_catalogue / settings_to_estimator:
      Convert models to domain objects and services

Example:
    >>> from pathlib import Path
    >>> from tabletops.application.config import load_settings, ConfigError
    >>>
    >>> try:
    ...     settings = load_settings(Path("configurator.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from .adapter import config_to_catalogue, config_to_tabletop, settings_to_estimator
from .loader import ConfigError, load_catalogue, load_settings, load_settings_from_dict
from .schema import (
    SUPPORTED_VERSIONS,
    CatalogueMaterialConfig,
    ConfiguratorSettings,
    PricingSettings,
    TabletopDefaultsConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CatalogueMaterialConfig",
    "ConfigError",
    "ConfiguratorSettings",
    "PricingSettings",
    "TabletopDefaultsConfig",
    "config_to_catalogue",
    "config_to_tabletop",
    "load_catalogue",
    "load_settings",
    "load_settings_from_dict",
    "settings_to_estimator",
]
