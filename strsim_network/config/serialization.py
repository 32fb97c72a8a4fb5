"""JSON serialization and deserialization for network configs."""

import json
from dataclasses import asdict
from pathlib import Path

from dacite import Config as DaciteConfig
from dacite import from_dict

from strsim_network.config.network import NetworkConfig


def config_to_json(config: NetworkConfig) -> str:
    """Serialize a NetworkConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> NetworkConfig:
    """Deserialize a JSON string to a NetworkConfig.

    Uses dacite with strict=True to reject unknown keys (catches typos in
    hand-written config files).
    """
    data = json.loads(json_str)
    return from_dict(
        data_class=NetworkConfig,
        data=data,
        config=DaciteConfig(check_types=True, strict=True),
    )


def load_config(path: Path) -> NetworkConfig:
    """Read a NetworkConfig from a JSON file."""
    return config_from_json(Path(path).read_text())
