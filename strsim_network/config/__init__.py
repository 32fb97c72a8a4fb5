"""Network build configuration with frozen, serializable dataclasses."""

from strsim_network.config.defaults import DEFAULT_CONFIG
from strsim_network.config.network import OUTPUT_FORMATS, NetworkConfig
from strsim_network.config.serialization import (
    config_from_json,
    config_to_json,
    load_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "NetworkConfig",
    "OUTPUT_FORMATS",
    "config_from_json",
    "config_to_json",
    "load_config",
]
