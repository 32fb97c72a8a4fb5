"""Default configuration, single source of truth for CLI defaults."""

from strsim_network.config.network import NetworkConfig

# levenshtein, bounds [1, 1], pretty GML, auto-detected workers
DEFAULT_CONFIG = NetworkConfig()
