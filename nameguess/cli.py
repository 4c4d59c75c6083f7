"""
Command line entry point: parse names, one per line, into JSON lines.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from nameguess.parser import NameParser
from nameguess.types import NameParserConfig


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Parse free-form names into structured JSON records.")
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="File with one name per line (default: stdin).",
    )
    parser.add_argument("--skip-failures", action="store_true", help="Do not emit null for unparseable names.")
    parser.add_argument("--data-dir", default=None, help="Directory holding first_names.csv and diminutives.csv.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log shape matches to stderr.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, out=None) -> int:
    args = _parse_args(argv)
    out = out or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = NameParserConfig.create_default().with_data_dir(args.data_dir)
    name_parser = NameParser(config)

    failures = 0
    try:
        for line in args.input:
            raw = line.rstrip("\n")
            if not raw.strip():
                continue
            result = name_parser.guess(raw)
            if result is None:
                failures += 1
                if args.skip_failures:
                    continue
            out.write(json.dumps(result.to_dict() if result is not None else None) + "\n")
    finally:
        if args.input is not sys.stdin:
            args.input.close()

    if failures:
        logging.getLogger("nameguess").info(f"{failures} name(s) could not be parsed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
