# File: biotoolbox/app/core/aminoacid/batch.py
# Version: v0.1.0
"""
Batch driver for the variant notation converter.

Every line of the input is converted independently, in order. When the input
has more lines than `max_lines`, nothing is converted and the result carries
the LINE_LIMIT_EXCEEDED status instead of output (all-or-nothing).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .converter import ConversionDirection, StopSymbolLike, get_converter
from .tables import StopCodonSymbol

logger = logging.getLogger(__name__)

DEFAULT_MAX_LINES = 1000


class BatchStatus(str, Enum):
    OK = "ok"
    LINE_LIMIT_EXCEEDED = "line_limit_exceeded"


@dataclass(frozen=True)
class BatchResult:
    status: BatchStatus
    output: Optional[str]
    line_count: int
    max_lines: int

    @property
    def over_limit(self) -> bool:
        return self.status is BatchStatus.LINE_LIMIT_EXCEEDED


def count_lines(text: str) -> int:
    """Number of newline-separated lines; blank (whitespace-only) input counts as 0."""
    if not text.strip():
        return 0
    return len(text.split("\n"))


def convert_batch(
    text: str,
    direction: Union[ConversionDirection, str],
    stop_symbol: StopSymbolLike = StopCodonSymbol.TER,
    max_lines: int = DEFAULT_MAX_LINES,
) -> BatchResult:
    """
    Convert `text` line by line.

    Args:
        text: multi-line input; each line is one candidate variant.
        direction: ConversionDirection.TO_ONE (three->one) or TO_THREE (one->three).
        stop_symbol: stop rendering (Ter, * or X).
        max_lines: maximum accepted line count (>= 1).

    Returns:
        BatchResult with the joined output, or status LINE_LIMIT_EXCEEDED and no output.
    """
    if max_lines < 1:
        raise ValueError(f"max_lines must be >= 1, got {max_lines}")

    convert = get_converter(direction)
    symbol = StopCodonSymbol(stop_symbol)

    line_count = count_lines(text)
    if line_count > max_lines:
        logger.info("Variant batch rejected: %d lines exceeds limit of %d", line_count, max_lines)
        return BatchResult(
            status=BatchStatus.LINE_LIMIT_EXCEEDED,
            output=None,
            line_count=line_count,
            max_lines=max_lines,
        )

    output = "\n".join(convert(line, symbol) for line in text.split("\n"))
    logger.debug("Converted %d variant lines (%s, stop=%s)", line_count, direction, symbol.value)
    return BatchResult(status=BatchStatus.OK, output=output, line_count=line_count, max_lines=max_lines)
