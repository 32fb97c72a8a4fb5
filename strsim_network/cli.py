"""Command-line entry point: network a list of strings by string similarity.

Usage:
    strsim-network names.txt -a levenshtein -m 1 -M 2 -f gml
    cat names.txt | strsim-network - -a jaro_winkler -m 0.9 -M 1.0 -f json
    strsim-network names.txt --config network.json --dry-run
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional

from dacite import DaciteError

from strsim_network.config import (
    DEFAULT_CONFIG,
    OUTPUT_FORMATS,
    NetworkConfig,
    config_to_json,
    load_config,
)
from strsim_network.oracle import ALGORITHMS
from strsim_network.pipeline import build_matrix, write_matrix

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strsim-network",
        description="Build a network of strings linked by string similarity",
    )
    parser.add_argument(
        "strings",
        help="Line separated list of strings to network. Use - for STDIN",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=sorted(ALGORITHMS),
        help="String similarity algorithm to use",
    )
    parser.add_argument(
        "-m",
        "--min-distance",
        help="Nodes must be >= THIS distance to be considered a link",
    )
    parser.add_argument(
        "-M",
        "--max-distance",
        help="Nodes must be <= THIS distance to be considered a link",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        help="Output file format (default: gml)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write output to this file instead of STDOUT",
    )
    parser.add_argument(
        "--config",
        help="Path to a network config JSON file; flags override its values",
    )
    parser.add_argument(
        "--workers",
        dest="n_workers",
        type=int,
        help="Worker processes (default: number of CPUs minus one)",
    )
    parser.add_argument(
        "--chunk-rows",
        type=int,
        help="Rows per worker task",
    )
    parser.add_argument(
        "--accelerated",
        action="store_true",
        default=None,
        help="Use the trie index (levenshtein with small max distance only)",
    )
    parser.add_argument(
        "--no-progress",
        dest="show_progress",
        action="store_false",
        default=None,
        help="Disable the progress bar",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the resolved config and exit without building",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> NetworkConfig:
    """Merge the optional config file with command-line overrides."""
    base = load_config(Path(args.config)) if args.config else DEFAULT_CONFIG
    fields = (
        "algorithm",
        "min_distance",
        "max_distance",
        "output_format",
        "n_workers",
        "chunk_rows",
        "accelerated",
        "show_progress",
    )
    overrides: dict[str, Any] = {
        name: getattr(args, name)
        for name in fields
        if getattr(args, name) is not None
    }
    return replace(base, **overrides)


def read_strings(source: str) -> list[str]:
    """Read newline separated strings from a file, or STDIN for ``-``."""
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    return text.splitlines()


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
    except (OSError, ValueError, DaciteError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.dry_run:
        print(config_to_json(config))
        return

    try:
        strings = read_strings(args.strings)
    except OSError as e:
        print(f"error: Could not read strings. {e}", file=sys.stderr)
        sys.exit(1)
    log.info("Read %d strings from %s", len(strings), args.strings)

    try:
        coo = build_matrix(strings, config)
    except Exception as e:
        log.debug("Matrix build failed", exc_info=True)
        print(f"error: Could not build matrix. {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.output:
            with open(args.output, "w", encoding="utf-8") as sink:
                write_matrix(coo, strings, config.output_format, sink)
        else:
            write_matrix(coo, strings, config.output_format, sys.stdout)
            sys.stdout.flush()
    except OSError as e:
        print(
            f"error: Encountered a problem while saving graph. {e}",
            file=sys.stderr,
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
