# File: biotoolbox/app/cli/aa_convert_cli.py
# Version: v0.1.0
"""
CLI for protein variant notation conversion (three-letter <-> one-letter).

- One variant per line; blank lines are kept as blank lines.
- Reads stdin unless --input is given; writes stdout unless --output is given.
- If the input has more lines than --max-lines, nothing is written and the
  command exits with status 2.

Usage:
    python -m biotoolbox.app.cli.aa_convert_cli \
        --input variants.txt --output converted.txt \
        [--to-one | --to-three] [--stop {Ter,*,X}] [--max-lines 1000]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from biotoolbox.app.core.aminoacid.batch import convert_batch
from biotoolbox.app.core.aminoacid.converter import ConversionDirection
from biotoolbox.app.core.aminoacid.tables import STOP_ALIASES
from biotoolbox.app.core.config import settings


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Convert protein variants between three-letter and one-letter notation")
    p.add_argument("--input", type=Path, help="Input text file (default: stdin)")
    p.add_argument("--output", type=Path, help="Output text file (default: stdout)")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--to-one", dest="direction", action="store_const", const=ConversionDirection.TO_ONE,
                      help="Three-letter -> one-letter (default)")
    mode.add_argument("--to-three", dest="direction", action="store_const", const=ConversionDirection.TO_THREE,
                      help="One-letter -> three-letter")
    p.set_defaults(direction=ConversionDirection.TO_ONE)
    p.add_argument("--stop", choices=list(STOP_ALIASES), default=settings.AA_DEFAULT_STOP_SYMBOL.value,
                   help="Stop codon rendering (default: %(default)s)")
    p.add_argument("--max-lines", type=int, default=settings.AA_MAX_LINES,
                   help="Maximum number of input lines (default: %(default)s)")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))
    log = logging.getLogger("aa_convert_cli")

    try:
        if args.input:
            text = args.input.read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()

        # Drop the single trailing newline of a text file so it is not counted as a line.
        if text.endswith("\n"):
            text = text[:-1]

        result = convert_batch(text, args.direction, args.stop, args.max_lines)
    except (OSError, ValueError) as ex:
        print(f"[ERROR] {ex}", file=sys.stderr)
        return 2

    if result.over_limit:
        log.error("Input has %d lines; the limit is %d. Nothing converted.", result.line_count, result.max_lines)
        return 2

    out = (result.output or "") + "\n"
    if args.output:
        args.output.write_text(out, encoding="utf-8")
        log.info("Wrote %d lines to %s", result.line_count, args.output)
    else:
        sys.stdout.write(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
