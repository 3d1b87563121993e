"""
structmeta Command Line

Usage:
    structmeta [-o OUT] [-kind KIND] [--debug] FILE.go [FILE.go ...]

Extracts struct and interface metadata from the given Go files and writes
one JSON document. "-o -" writes to stdout; without -o a single input
writes next to itself with a .json extension.
"""

import argparse
from pathlib import Path
from typing import Optional, Sequence

from structmeta.configs.logging import get_logger, setup_logging
from structmeta.configs.runtime import get_full_config
from structmeta.document import build_document, default_output_path, write_document
from structmeta.exceptions import StructMetaError

logger = get_logger("cli")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="structmeta",
        description="Extract Go struct and interface metadata as JSON for code generators",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="Go source files")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help='output file ("-" for stdout; default: input with .json extension)',
    )
    parser.add_argument(
        "-kind",
        "--kind",
        dest="kind",
        default=None,
        help="value of the document's kind field (default: go)",
    )
    parser.add_argument("--config", type=Path, default=None, help="path to .structmeta.yaml")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    parser.add_argument("--debug", action="store_true", default=None, help="enable debug logging")
    return parser


def run(args: argparse.Namespace) -> int:
    """Run one extraction batch. Returns the process exit status."""
    try:
        config = get_full_config(args.config)
    except StructMetaError as e:
        setup_logging(debug=bool(args.debug), log_file=args.log_file)
        logger.error(f"Invalid configuration: {e}")
        return 1

    # Command-line options win over config and environment
    if args.kind is not None:
        config["kind"] = args.kind
    if args.debug is not None:
        config["debug"] = args.debug
    if args.log_file is not None:
        config["log_file"] = args.log_file

    setup_logging(debug=config["debug"], log_file=config["log_file"])

    try:
        output = args.output or default_output_path(args.files, config["output_ext"])
        document = build_document(args.files, kind=config["kind"])
        write_document(document, output, indent=config["indent"])
    except StructMetaError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    return run(args)
