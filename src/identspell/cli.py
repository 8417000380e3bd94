"""
identspell command line

Usage:
    identspell app.js                          # Check single file
    identspell src/ --recursive                # Check all .js files
    identspell src/ -r --config .jscsrc        # Explicit config file
    identspell app.js --json                   # JSONL output
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from identspell.config import load_config
from identspell.errors import ConfigurationError
from identspell.linter import Linter
from identspell.reporting import Reporter, render_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identspell",
        description="Spell-check JavaScript identifiers and property names",
    )
    parser.add_argument("paths", nargs="+", type=Path,
                        help="Files or directories to check")
    parser.add_argument("--config", "-c", type=Path, default=None,
                        help="YAML/JSON config file (default: search .identspell.yaml, .jscsrc)")
    parser.add_argument("--recursive", "-r", action="store_true",
                        help="Recurse into directories")
    parser.add_argument("--pattern", default="*.js",
                        help="File pattern for directories (default: *.js)")
    parser.add_argument("--module", action="store_true",
                        help="Parse sources as ES modules")
    parser.add_argument("--json", action="store_true", dest="json_output",
                        help="Output findings as JSONL")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    linter = Linter(module=args.module)
    try:
        linter.configure(load_config(args.config))
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    reporters: List[Reporter] = []
    missing = False
    for path in args.paths:
        if path.is_file():
            reporters.append(linter.check_file(path))
        elif path.is_dir():
            results = linter.check_directory(path, pattern=args.pattern,
                                             recursive=args.recursive)
            reporters.extend(results.values())
        else:
            print(f"Error: {path} not found", file=sys.stderr)
            missing = True

    reporters = [r for r in reporters if not r.is_empty()]

    if args.json_output:
        for reporter in reporters:
            print(reporter.to_jsonl())
    else:
        for reporter in reporters:
            print(reporter.render_human())
            print()
        print(render_summary(reporters))

    if missing:
        return 2
    return 1 if reporters else 0


if __name__ == "__main__":
    raise SystemExit(main())
