"""Check that the entities of a library are covered by its XML doc comments file.

Each entity listed in the manifest is converted to its doc comment identifier
and looked up in the doc comments file; the summary of each one is printed,
with cross-references collapsed to readable text.
"""

import argparse
import logging
from pathlib import Path

from xmldoc_help.run_check import run_check


def main(argv: list[str] | None = None) -> int:
    """Run the documentation check."""
    ap = argparse.ArgumentParser(
        description="Resolve documented entities against an XML doc comments file.",
    )
    ap.add_argument(
        "doc_xml",
        type=Path,
        help="XML doc comments file produced by the compiler",
    )
    ap.add_argument(
        "manifest",
        type=Path,
        help="YAML manifest listing the types and members to look up",
    )
    ap.add_argument(
        "--config",
        action="append",
        help="Path to configuration file; may be repeated, later files win",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as errors",
    )
    ap.add_argument(
        "--ignore-missing",
        action="store_true",
        help="Do not warn about entities without doc comments",
    )
    ap.add_argument(
        "--no-cache",
        action="store_true",
        help="Look up every request in the doc comments file again",
    )
    ap.add_argument(
        "--no-rewrite",
        action="store_true",
        help="Leave <see cref> elements untouched",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_check(args)


if __name__ == "__main__":
    raise SystemExit(main())
