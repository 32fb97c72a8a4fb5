"""End-to-end network build: strings + config -> one serialized document."""

import logging
from typing import IO, Sequence

from strsim_network.config.network import NetworkConfig
from strsim_network.graph import (
    coo_to_graph,
    write_gml,
    write_gml_pretty,
    write_node_link_json,
)
from strsim_network.matrix import (
    CooMatrix,
    build_coo_matrix,
    build_coo_matrix_levenshtein,
    coo_to_csr,
    write_csr_json,
)
from strsim_network.oracle import get_algorithm

log = logging.getLogger(__name__)

GRAPH_WRITERS = {
    "gml": write_gml_pretty,
    "gml_compact": write_gml,
    "json": write_node_link_json,
}


def build_matrix(strings: Sequence[str], config: NetworkConfig) -> CooMatrix:
    """Build the COO matrix for ``strings`` using the configured algorithm."""
    if config.accelerated:
        log.info(
            "Trie-accelerated levenshtein build, bounds [%s, %s]",
            config.min_distance,
            config.max_distance,
        )
        return build_coo_matrix_levenshtein(
            strings,
            config.max_distance,
            config.min_distance,
            n_workers=config.n_workers,
            chunk_rows=config.chunk_rows,
            show_progress=config.show_progress,
        )

    algorithm = get_algorithm(config.algorithm)
    log.info(
        "Brute-force %s build, bounds [%s, %s]",
        algorithm.name,
        config.min_distance,
        config.max_distance,
    )
    return build_coo_matrix(
        strings,
        config.min_distance,
        config.max_distance,
        algorithm.oracle,
        n_workers=config.n_workers,
        chunk_rows=config.chunk_rows,
        show_progress=config.show_progress,
    )


def write_matrix(
    coo: CooMatrix,
    strings: Sequence[str],
    output_format: str,
    sink: IO[str],
) -> None:
    """Convert ``coo`` to the form ``output_format`` needs and write it."""
    if output_format == "csr":
        write_csr_json(coo_to_csr(coo, len(strings)), sink)
        return

    try:
        writer = GRAPH_WRITERS[output_format]
    except KeyError:
        raise ValueError(f"Unknown output format {output_format!r}") from None
    writer(coo_to_graph(coo, strings), sink)


def run(strings: Sequence[str], config: NetworkConfig, sink: IO[str]) -> CooMatrix:
    """Build the matrix for ``strings`` and write it to ``sink``."""
    coo = build_matrix(strings, config)
    write_matrix(coo, strings, config.output_format, sink)
    return coo
