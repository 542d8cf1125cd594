#!/usr/bin/env python3
"""Export the scarcentral catalogue to JSON or Markdown.

Builds the curated catalogue, validating every process and scar, and
writes it to disk.

Usage:
    python scripts/export_catalogue.py [--output PATH] [--format json|markdown] [--overwrite]

Options:
    --output PATH        Destination file (default: settings.export_json_path,
                         or scarcentral.md next to it for Markdown)
    --format FORMAT      json or markdown (default: json)
    --overwrite          Replace the destination if it already exists
    --log-level LEVEL    Logging level (default: settings.LOG_LEVEL)
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import settings
from scarcentral.catalogue import build_catalogue
from scarcentral.export import export_markdown, write_json


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Export the scarcentral catalogue"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Destination file",
    )
    parser.add_argument(
        "--format",
        choices=("json", "markdown"),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace the destination if it already exists",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help=f"Logging level (default: {settings.LOG_LEVEL})",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 60)
    print("scarcentral -- Catalogue Export")
    print("=" * 60)

    catalogue = build_catalogue()
    print(f"  {len(catalogue)} processes, {sum(p.scar_count for p in catalogue)} scars")

    if args.format == "json":
        try:
            path = write_json(args.output, overwrite=args.overwrite, catalogue=catalogue)
        except FileExistsError as exc:
            print(f"ERROR: {exc}")
            return 1
    else:
        path = args.output or settings.export_json_path.with_suffix(".md")
        if path.exists() and not args.overwrite:
            print(f"ERROR: File [{path}] already exists. To overwrite pass --overwrite")
            return 1
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(export_markdown(catalogue), encoding="utf-8")

    print(f"\nDONE: wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
