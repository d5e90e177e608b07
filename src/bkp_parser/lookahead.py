#!/usr/bin/env python3
"""
Lookahead merging for article lines.
An article record may continue on the next one or two lines with its quantity/unit or dimensions.
"""

import logging
import re
from typing import List, Optional

from .line_classifier import match_quantity
from .models import CostItem

logger = logging.getLogger(__name__)

MAX_LOOKAHEAD = 2
MAX_DIMENSION_LENGTH = 30

LOOSE_DIMENSION_PATTERN = re.compile(r'^[0-9\s×xX,.-]+(?:\s*mm|\s*cm|\s*m)?\s*$')
RECORD_BOUNDARY_PATTERNS = [
    re.compile(r'^[0-9]{5,6}\.[0-9]{2,3}'),  # Next article
    re.compile(r'^Total'),
    re.compile(r'^[0-9]+\s+[A-Z]'),  # Next section header
]


class LineCursor:
    """Read position over a list of lines."""

    def __init__(self, lines: List[str]):
        self.lines = lines
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.lines)

    @property
    def current(self) -> str:
        return self.lines[self.position]

    def peek(self, offset: int) -> Optional[str]:
        """Return the line `offset` positions ahead, or None past the end."""
        index = self.position + offset
        if index < len(self.lines):
            return self.lines[index]
        return None

    def advance(self, count: int = 1) -> None:
        self.position += count


def is_record_boundary(line: str) -> bool:
    return any(pattern.match(line) for pattern in RECORD_BOUNDARY_PATTERNS)


def merge_article_continuation(cursor: LineCursor, item: CostItem) -> int:
    """
    Complete an article item from the lines that follow it.

    Scans at most two lines ahead of the cursor. The first quantity line or
    short dimension line found is merged into the item.

    Args:
        cursor: Cursor positioned on the article line
        item: Article item to complete in place

    Returns:
        Offset of the merged line (its lines are consumed up to there), or 0
        if nothing was merged
    """
    for offset in range(1, MAX_LOOKAHEAD + 1):
        next_line = cursor.peek(offset)
        if next_line is None:
            break

        quantity = match_quantity(next_line)
        if quantity:
            item.quantity, item.unit = quantity
            logger.debug(f"Found quantity for {item.article_number}: {item.quantity} {item.unit}")
            return offset

        if LOOSE_DIMENSION_PATTERN.match(next_line) and len(next_line) < MAX_DIMENSION_LENGTH:
            item.description += ', ' + next_line
            logger.debug(f"Added dimensions to {item.article_number}: {next_line}")
            return offset

        if is_record_boundary(next_line):
            break

    return 0
