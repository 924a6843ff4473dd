#!/usr/bin/env python3
"""Print the exact ratio behind binary64 float literals."""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .rational import Ratio

logger = logging.getLogger(__name__)


def parse_value(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Not a float literal: {text!r}") from None


def describe(text: str, *, reduce: bool, show_float: bool, strict: bool) -> str:
    ratio = Ratio.from_float(parse_value(text), strict=strict)
    if reduce:
        ratio = ratio.reduced()
    line = f"{text} = {ratio}"
    if show_float:
        line += f" ~ {ratio.to_float()!r}"
    return line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exactratio",
        description="Print the exact numerator/denominator of binary64 values.",
    )
    parser.add_argument(
        "values",
        nargs="+",
        help="Float literals such as 0.1 or -2.5e-3; put -- before literals like -inf",
    )
    parser.add_argument("--reduce", action="store_true", help="Print the reduced form")
    parser.add_argument(
        "--float",
        dest="show_float",
        action="store_true",
        help="Also print the ratio converted back to a float",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Decode zero and subnormals exactly and reject inf/nan",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log decoded bit fields")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    lines: List[str] = []
    for text in args.values:
        lines.append(
            describe(text, reduce=args.reduce, show_float=args.show_float, strict=args.strict)
        )
    logger.debug("converted %d value(s)", len(lines))
    print("\n".join(lines))
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
