"""Tests for the network configuration system."""

import json
from dataclasses import FrozenInstanceError, replace

import pytest
from dacite import DaciteError

from strsim_network.config import (
    DEFAULT_CONFIG,
    OUTPUT_FORMATS,
    NetworkConfig,
    config_from_json,
    config_to_json,
    load_config,
)
from strsim_network.oracle import BoundsError, UnknownAlgorithmError


class TestDefaults:
    """DEFAULT_CONFIG has the documented values."""

    def test_default_config(self):
        assert DEFAULT_CONFIG.algorithm == "levenshtein"
        assert DEFAULT_CONFIG.min_distance == 1
        assert DEFAULT_CONFIG.max_distance == 1
        assert DEFAULT_CONFIG.output_format == "gml"
        assert DEFAULT_CONFIG.n_workers is None
        assert DEFAULT_CONFIG.chunk_rows == 64
        assert DEFAULT_CONFIG.show_progress is True
        assert DEFAULT_CONFIG.accelerated is False

    def test_output_formats(self):
        assert OUTPUT_FORMATS == ("gml", "gml_compact", "json", "csr")


class TestImmutability:
    """Frozen dataclasses prevent mutation."""

    def test_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.algorithm = "jaro"  # type: ignore[misc]


class TestBoundsNormalization:
    """Bounds are parsed against the algorithm's family at construction."""

    def test_integer_strings_parsed(self):
        cfg = NetworkConfig(min_distance="0", max_distance="2")
        assert (cfg.min_distance, cfg.max_distance) == (0, 2)

    def test_unit_strings_parsed(self):
        cfg = NetworkConfig(algorithm="jaro", min_distance="0.5", max_distance="1")
        assert (cfg.min_distance, cfg.max_distance) == (0.5, 1.0)

    def test_replace_revalidates(self):
        cfg = replace(DEFAULT_CONFIG, algorithm="jaro_winkler")
        assert cfg.max_distance == 1.0
        with pytest.raises(BoundsError):
            replace(DEFAULT_CONFIG, algorithm="jaro", max_distance="2")

    def test_min_greater_than_max(self):
        with pytest.raises(BoundsError):
            NetworkConfig(min_distance=3, max_distance=1)


class TestValidation:
    """Cross-parameter validation in __post_init__."""

    def test_unknown_algorithm(self):
        with pytest.raises(UnknownAlgorithmError):
            NetworkConfig(algorithm="soundex")

    def test_unknown_output_format(self):
        with pytest.raises(ValueError, match="output_format") as exc:
            NetworkConfig(output_format="graphml")
        assert not isinstance(exc.value, UnknownAlgorithmError)

    @pytest.mark.parametrize("n_workers", [0, -2])
    def test_invalid_workers(self, n_workers):
        with pytest.raises(ValueError, match="n_workers"):
            NetworkConfig(n_workers=n_workers)

    def test_invalid_chunk_rows(self):
        with pytest.raises(ValueError, match="chunk_rows"):
            NetworkConfig(chunk_rows=0)

    def test_accelerated_requires_levenshtein(self):
        with pytest.raises(ValueError, match="levenshtein"):
            NetworkConfig(
                algorithm="jaro", min_distance=0.5, max_distance=1.0, accelerated=True
            )

    def test_accelerated_levenshtein_ok(self):
        assert NetworkConfig(accelerated=True, max_distance=2).accelerated


class TestRoundTrip:
    """JSON serialization round-trip preserves identity."""

    def test_default_round_trip(self):
        assert config_from_json(config_to_json(DEFAULT_CONFIG)) == DEFAULT_CONFIG

    def test_unit_round_trip(self):
        cfg = NetworkConfig(
            algorithm="normalized_levenshtein",
            min_distance=0.25,
            max_distance=0.75,
            output_format="csr",
            n_workers=4,
        )
        assert config_from_json(config_to_json(cfg)) == cfg

    def test_json_sorted_keys(self):
        keys = list(json.loads(config_to_json(DEFAULT_CONFIG)).keys())
        assert keys == sorted(keys)

    def test_partial_document_uses_defaults(self):
        cfg = config_from_json('{"algorithm": "jaro", "min_distance": 0.9}')
        assert cfg.algorithm == "jaro"
        assert cfg.min_distance == 0.9
        assert cfg.max_distance == 1.0
        assert cfg.output_format == "gml"

    def test_unknown_key_rejected(self):
        with pytest.raises(DaciteError):
            config_from_json('{"algoritm": "jaro"}')

    def test_wrong_type_rejected(self):
        with pytest.raises(DaciteError):
            config_from_json('{"chunk_rows": "many"}')

    def test_load_config(self, tmp_path):
        path = tmp_path / "network.json"
        path.write_text('{"output_format": "json", "max_distance": 2}')
        cfg = load_config(path)
        assert cfg.output_format == "json"
        assert cfg.max_distance == 2
