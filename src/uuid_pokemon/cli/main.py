"""Command line entry point for uuid-to-pokemon."""

import argparse
import logging
import os
import sys
import uuid
from typing import List, Optional, Tuple

from uuid_pokemon.encoding import pokemon_from_text, uuid_to_pokemon
from uuid_pokemon.label import LabelNotFoundError

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "UUID_POKEMON_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def parse_uuids(args: List[str]) -> Tuple[List[uuid.UUID], List[str]]:
    """
    Split arguments into parsed UUIDs and the arguments that failed.

    Returns:
        (uuids, errors) lists, both in argument order
    """
    uuids = []
    errors = []
    for arg in args:
        try:
            uuids.append(uuid.UUID(arg))
        except ValueError:
            errors.append(arg)
    return uuids, errors


def run(args: List[str]) -> int:
    """
    Print "<uuid>\\t<label>" for each UUID argument.

    With no arguments a random UUID is used. If any argument is not a
    valid UUID, every bad argument is reported on stderr and nothing is
    printed to stdout.

    Returns:
        Exit code (0 on success, 1 if any argument was invalid)
    """
    uuids, errors = parse_uuids(args)

    if not uuids and not errors:
        generated = uuid.uuid4()
        logger.debug(f"No arguments, generated {generated}")
        uuids.append(generated)

    if errors:
        for arg in errors:
            print(f"{arg} is not a valid UUID", file=sys.stderr)
        return 1

    for value in uuids:
        print(f"{value}\t{uuid_to_pokemon(value)}")
    return 0


def run_decode(labels: List[str]) -> int:
    """
    Check each argument is a known label and print it back.

    Returns:
        Exit code (0 if every label is known, 1 otherwise)
    """
    found = []
    errors = []
    for text in labels:
        try:
            found.append(pokemon_from_text(text))
        except LabelNotFoundError as e:
            errors.append(e)

    if errors:
        for e in errors:
            print(e, file=sys.stderr)
        return 1

    for label in found:
        print(label)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for uuid-to-pokemon command."""
    parser = argparse.ArgumentParser(
        description="Translate UUIDs into pokemon names"
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="UUID",
        help="UUIDs to translate (default: a random one)",
    )
    parser.add_argument(
        "--decode",
        action="store_true",
        help="Treat arguments as labels and check they are known "
             "(at least one label is required)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Log level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )

    # Unknown dash-prefixed tokens are bad UUIDs or labels, not usage errors.
    args, extra = parser.parse_known_args(argv)
    values = args.values + extra

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.decode:
        if not values:
            parser.error("--decode requires at least one label")
        return run_decode(values)
    return run(values)


if __name__ == "__main__":
    sys.exit(main())
