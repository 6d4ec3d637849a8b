# -*- coding: utf-8 -*-
"""
Command line interface.

Example
    riprocess image-list path/to/config.toml > image_list.txt

Each output line is ``<timestamp>;<image path>`` with the timestamp fixed to
six decimals, ready for import into the processing project.

Docstring style: Google Style
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .alignment import Image, image_list
from .core import Config, RiprocessError
from .core.logging import configure_logging

__all__ = ["build_parser", "format_image", "main"]


logger = logging.getLogger(__name__)


def format_image(image: Image) -> str:
    """Return the output line for *image*, without a newline."""
    return f"{image.timestamp:.6f};{image.path}"


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser.

    ``-v/--verbose`` is accepted before or after the subcommand.
    """
    # SUPPRESS keeps the subcommand from resetting a flag given before it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="log progress to stderr",
    )

    parser = argparse.ArgumentParser(
        prog="riprocess",
        description="Query and/or generate material for RiPROCESS projects.",
        parents=[common],
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    image_list_parser = subparsers.add_parser(
        "image-list",
        help="print timestamp;path pairs for the configured images",
        parents=[common],
    )
    image_list_parser.add_argument("config", help="TOML configuration file")
    image_list_parser.set_defaults(func=_image_list)
    return parser


def _image_list(args: argparse.Namespace, out: TextIO) -> None:
    config = Config.from_path(args.config)
    for image in image_list(config):
        out.write(format_image(image) + "\n")


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    """Command line entry point.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.
        out: Stream for the image list. Defaults to ``sys.stdout``.

    Returns:
        Process exit status: 0 on success, 1 on failure.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    verbose = getattr(args, "verbose", False)
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        args.func(args, out if out is not None else sys.stdout)
    except (RiprocessError, OSError) as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
