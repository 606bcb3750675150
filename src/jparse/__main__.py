"""
Command-line driver: parse a JSON file and print the resulting value.

Exit status is 0 on success and 1 when the file cannot be read or does
not parse; argparse exits with 2 on usage errors.
"""

import argparse
import logging
import pprint
import sys
from pathlib import Path

from . import DEFAULT_MAX_DEPTH
from . import JSONDecodeError
from . import parse

logger = logging.getLogger("jparse")


def _build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="jparse", description="Parse a JSON file and print its value"
    )
    ap.add_argument("file", help="path of the JSON document")
    ap.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help="maximum array/object nesting (default: %(default)s)",
    )
    ap.add_argument(
        "--no-max-depth",
        action="store_true",
        help="lift the nesting limit; overrides --max-depth",
    )
    ap.add_argument(
        "--allow-trailing-data",
        action="store_true",
        help="ignore anything after the first complete value",
    )
    ap.add_argument(
        "--non-strict",
        action="store_true",
        help="accept raw control characters inside strings",
    )
    ap.add_argument(
        "-v", "--verbose", action="store_true", help="log each step"
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
    )

    path = Path(args.file)
    logger.debug(f"reading {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"cannot read {path}: {e}", file=sys.stderr)
        return 1

    logger.debug(f"parsing {len(content)} characters")
    try:
        value = parse(
            content,
            strict=not args.non_strict,
            allow_trailing_data=args.allow_trailing_data,
            max_depth=None if args.no_max_depth else args.max_depth,
        )
    except JSONDecodeError as e:
        print(e, file=sys.stderr)
        return 1
    except ValueError as e:
        # Rejected option values, e.g. --max-depth 0
        print(e, file=sys.stderr)
        return 2

    print(pprint.pformat(value))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
