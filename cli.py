"""Command line interface for the twin field chunking codec.

Examples:
    twin-chunks encode --name createOptions options.json
    twin-chunks decode --name createOptions fields.json
"""

import argparse
import json
import sys
from typing import List, Optional

from chunking import (
    ChunkCodecError,
    ChunkLimit,
    InvalidBaseName,
    decode_value,
    encode_value,
    validate_base_name,
)
from common.config import Config, default_config
from common.logging_setup import setup_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CODEC_ERROR = 1
EXIT_USAGE = 2


def read_input(path: str) -> str:
    """Read the whole input file, or stdin when path is '-'."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def run_encode(config: Config, limit: ChunkLimit, text: str) -> int:
    """Encode ``text`` and print the fields as a JSON object."""
    fields = encode_value(config.base_name, text, limit)
    logger.info(f"Encoded '{config.base_name}' into {len(fields)} field(s)")
    # ensure_ascii keeps partial characters as \udcXX escapes
    sys.stdout.write(json.dumps(fields, indent=2) + "\n")
    return EXIT_OK


def run_decode(config: Config, limit: ChunkLimit, text: str) -> int:
    """Decode the JSON object of fields in ``text`` and print the value."""
    try:
        fields = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Input is not valid JSON: {e}")
        return EXIT_USAGE
    if not isinstance(fields, dict):
        logger.error("Input must be a JSON object of field names to values")
        return EXIT_USAGE

    value = decode_value(
        fields, config.base_name, limit, config.case_insensitive_names
    )
    if value is None:
        logger.info(f"No value configured for '{config.base_name}'")
        return EXIT_OK

    sys.stdout.write(value)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for twin-chunks."""
    parser = argparse.ArgumentParser(
        prog="twin-chunks",
        description="Split and join size-limited twin document fields",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "command",
        choices=["encode", "decode"],
        help="encode a value into fields, or decode fields into a value",
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input file ('-' for stdin)",
    )

    parser.add_argument(
        "--name",
        default=default_config.base_name,
        help="Base field name",
    )

    parser.add_argument(
        "--case-insensitive",
        action="store_true",
        help="Match field names ignoring case when decoding",
    )

    parser.add_argument(
        "--log-level",
        default=default_config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    parser.add_argument(
        "--log-file",
        help="Log file path (optional)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for twin-chunks."""
    args = build_parser().parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    config = Config(
        base_name=args.name,
        case_insensitive_names=args.case_insensitive,
        log_level=args.log_level,
        log_file=args.log_file,
    )

    try:
        validate_base_name(config.base_name)
    except InvalidBaseName as e:
        logger.error(str(e))
        return EXIT_USAGE

    try:
        text = read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return EXIT_USAGE

    try:
        limit = config.limit()
        if args.command == "encode":
            return run_encode(config, limit, text)
        return run_decode(config, limit, text)
    except (ChunkCodecError, ValueError, TypeError) as e:
        logger.error(f"{args.command} failed: {e}")
        return EXIT_CODEC_ERROR


if __name__ == "__main__":
    sys.exit(main())
