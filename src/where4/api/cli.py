"""
Command-line interface for Where4.

Usage:
    where4 encode "49.7977543° N 18.2567507° E"
    where4 decode "ROBI SEME NERU RODI"
    where4 syllables

Environment:
    WHERE4_PRECISION      Default number of words (default: 4)
    WHERE4_SNAP_EPSILON   Decode snap tolerance (default: 1e-9)
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from ..codec.convert import coordinates_to_words, words_to_coordinates
from ..codec.trace import ProcessingTrace
from ..config import DEFAULT_PRECISION, MAX_PRECISION, MIN_PRECISION
from ..core.syllables import SYLLABLES


def print_trace(trace: ProcessingTrace) -> None:
    """Print each recorded stage on its own line."""
    print("\n--- Trace ---")
    for key, value in trace.to_dict().items():
        if isinstance(value, (list, dict)):
            value = json.dumps(value, ensure_ascii=False)
        print(f"  {key}: {value}")


def _report(result, payload: str, args: argparse.Namespace, trace: ProcessingTrace | None) -> int:
    if args.json:
        data = result.to_dict()
        if trace is not None:
            data["trace"] = trace.to_dict()
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        if result.ok:
            print(payload)
        else:
            print(result.error, file=sys.stderr)
        if trace is not None:
            print_trace(trace)
    return 0 if result.ok else 1


def cmd_encode(args: argparse.Namespace) -> int:
    """Encode coordinates into words."""
    trace = ProcessingTrace() if args.trace else None
    result = coordinates_to_words(args.coordinates, trace, precision=args.precision)
    return _report(result, result.words, args, trace)


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode words into coordinates."""
    trace = ProcessingTrace() if args.trace else None
    result = words_to_coordinates(args.words, trace, precision=args.precision)
    return _report(result, result.dd_string, args, trace)


def cmd_syllables(args: argparse.Namespace) -> int:
    """Print the digit -> syllable table."""
    for row in range(0, len(SYLLABLES), 10):
        print("  ".join(f"{i:2d}={SYLLABLES[i]}" for i in range(row, row + 10)))
    return 0


def _precision(value: str) -> int:
    n = int(value)
    if not MIN_PRECISION <= n <= MAX_PRECISION:
        raise argparse.ArgumentTypeError(
            f"precision must be {MIN_PRECISION}-{MAX_PRECISION}, got {n}"
        )
    return n


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="where4",
        description="Where4 - Convert coordinates to pronounceable words and back",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-p", "--precision",
        type=_precision,
        default=DEFAULT_PRECISION,
        help=f"Number of words (default: {DEFAULT_PRECISION})",
    )
    common.add_argument("--trace", action="store_true", help="Show every processing stage")
    common.add_argument("--json", action="store_true", help="Print the result as JSON")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    encode_parser = subparsers.add_parser("encode", parents=[common], help="Coordinates to words")
    encode_parser.add_argument("coordinates", help="Coordinates in DD, DM or DMS notation")
    encode_parser.set_defaults(func=cmd_encode)

    decode_parser = subparsers.add_parser("decode", parents=[common], help="Words to coordinates")
    decode_parser.add_argument("words", help="Word address, e.g. \"ROBI SEME NERU RODI\"")
    decode_parser.set_defaults(func=cmd_decode)

    syllables_parser = subparsers.add_parser("syllables", help="Show the syllable table")
    syllables_parser.set_defaults(func=cmd_syllables)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 2

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
