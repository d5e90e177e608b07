#!/usr/bin/env python3
"""
Line Classifier for BKP Quote Documents
Assigns every text line of a quote exactly one intent using an ordered set of rules.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .normalizer import ARTICLE_NUMBER_PATTERN, normalize_text, split_multi_article

# Noise fragments matched case-insensitively
SKIP_FRAGMENTS = ['übertrag', 'projekt-nr:', 'seite:', 'datum:', 'kostenzusammenstellung']
TABLE_HEADER_PHRASE = 'Artikel Text Menge ME'
TABLE_HEADER_KEYWORDS = ['artikel', 'text', 'menge', 'me', 'preis', 'betrag']
PAGE_INFO_FRAGMENTS = ['Seite:', 'Projekt-Nr:', 'Datum:']

SECTION_HEADER_PATTERN = re.compile(r'^([0-9]{1,3}(?:\.[0-9]{1,2})?)\s+(.+)')
HEADER_LETTER_PATTERN = re.compile(r'[A-Za-zÄÖÜäöüß]')
ARTICLE_LINE_PATTERN = re.compile(r'^([0-9]{5,6}\.[0-9]{2,3})\s+(.+)')
QUANTITY_PATTERN = re.compile(
    r'^([0-9]+(?:\.[0-9]+)?)\s+(Stk|m|mm|cm|kg|g|l|ml|Stück|Meter|%|Fr\.)\s*$',
    re.IGNORECASE,
)
DIMENSION_PATTERN = re.compile(
    r'^([0-9\s×xX,.-]+(?:\s*mm|\s*cm|\s*m|\s*x\s*[0-9]+|\s*×\s*[0-9]+)?)\s*$'
)

TOTAL_PREFIX = 'Total '
MAX_TOTAL_LENGTH = 80
MIN_GENERIC_LENGTH = 10
MIN_DESCRIPTION_LENGTH = 5


class LineIntent:
    """Base class for the closed set of line intents."""


@dataclass(frozen=True)
class Skip(LineIntent):
    """Page furniture and other noise."""


@dataclass(frozen=True)
class SectionHeader(LineIntent):
    code: str
    label: str


@dataclass(frozen=True)
class TotalLine(LineIntent):
    text: str


@dataclass(frozen=True)
class TableHeader(LineIntent):
    """Column header row of the item table."""


@dataclass(frozen=True)
class ArticleLine(LineIntent):
    article_number: str
    description: str


@dataclass(frozen=True)
class MultiArticle(LineIntent):
    articles: Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class StandaloneQuantity(LineIntent):
    quantity: str
    unit: str


@dataclass(frozen=True)
class StandaloneDimension(LineIntent):
    text: str


@dataclass(frozen=True)
class GenericText(LineIntent):
    text: str


@dataclass(frozen=True)
class Unmatched(LineIntent):
    """No rule applies; the line is dropped."""


def should_skip_line(line: str) -> bool:
    """Check if a line is page furniture or a dot-leader filler."""
    line_lower = line.lower()
    return (
        any(fragment in line_lower for fragment in SKIP_FRAGMENTS)
        or re.match(r'^\.{3,}', line) is not None
        or re.search(r'\.{5,}', line) is not None
        or line == TABLE_HEADER_PHRASE
        or ('(CHF)' in line and len(line) < 20)
    )


def parse_section_header(line: str) -> Optional[SectionHeader]:
    """Match headers like "24 Heizung" or "241.2 Soleleitungen im Gebäude"."""
    match = SECTION_HEADER_PATTERN.match(line)
    if not match:
        return None

    description = match.group(2)
    if not 2 < len(description) < 60:
        return None
    if not HEADER_LETTER_PATTERN.search(description):
        return None

    return SectionHeader(code=match.group(1), label=description.strip())


def is_total_line(line: str) -> bool:
    return line.startswith(TOTAL_PREFIX) and len(line) < MAX_TOTAL_LENGTH


def is_table_header(line: str) -> bool:
    line_lower = line.lower()
    hits = [keyword for keyword in TABLE_HEADER_KEYWORDS if keyword in line_lower]
    return len(hits) >= 3


def is_page_info(line: str) -> bool:
    return any(fragment in line for fragment in PAGE_INFO_FRAGMENTS) or len(line) < 3


def match_quantity(line: str) -> Optional[Tuple[str, str]]:
    """Return (quantity, unit) for lines like "6 Stk" or "15 m"."""
    match = QUANTITY_PATTERN.match(line)
    if match:
        return match.group(1), match.group(2)
    return None


def classify_line(line: str) -> LineIntent:
    """
    Classify a trimmed, non-empty line.

    Rules are evaluated in a fixed order and the first match wins. Rule order
    matters: e.g. a line starting with an article number is an ArticleLine
    even when further article numbers follow on the same line.

    Args:
        line: Trimmed quote line

    Returns:
        Exactly one LineIntent variant carrying its captured fields
    """
    if should_skip_line(line):
        return Skip()

    header = parse_section_header(line)
    if header:
        return header

    if is_total_line(line):
        return TotalLine(text=line)

    if is_table_header(line):
        return TableHeader()

    article_match = ARTICLE_LINE_PATTERN.match(line)
    if article_match:
        return ArticleLine(
            article_number=article_match.group(1),
            description=article_match.group(2).strip(),
        )

    if len(ARTICLE_NUMBER_PATTERN.findall(line)) > 1:
        return MultiArticle(articles=tuple(split_multi_article(line)))

    quantity = match_quantity(line)
    if quantity:
        return StandaloneQuantity(quantity=quantity[0], unit=quantity[1])

    dimension_match = DIMENSION_PATTERN.match(line)
    if dimension_match:
        return StandaloneDimension(text=dimension_match.group(1).strip())

    if len(line) > MIN_GENERIC_LENGTH and not is_page_info(line):
        cleaned = normalize_text(line)
        if len(cleaned) > MIN_DESCRIPTION_LENGTH:
            return GenericText(text=cleaned)

    return Unmatched()
