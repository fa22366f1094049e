"""Configuration utilities for genobreed."""
from .schema import (
    ConfigSchema,
    breeder_settings_from_config,
    killer_settings_from_config,
    load_config,
    load_default_config,
    mutator_settings_from_config,
)

__all__ = [
    "ConfigSchema",
    "load_config",
    "load_default_config",
    "breeder_settings_from_config",
    "mutator_settings_from_config",
    "killer_settings_from_config",
]
