#!/usr/bin/env python3
"""
BKP Quote Parser
Extracts cost positions grouped by BKP code from the text of a construction quote.
"""

import logging
import os
import time
from pathlib import Path
from typing import Callable, List, Optional, Union

from .bkp_codes import validate_bkp_code
from .line_classifier import (
    ArticleLine,
    GenericText,
    LineIntent,
    MultiArticle,
    SectionHeader,
    StandaloneDimension,
    StandaloneQuantity,
    TotalLine,
    classify_line,
)
from .lookahead import LineCursor, merge_article_continuation
from .models import CostItem, ExtractionMetadata, ExtractionResult, Section
from .normalizer import normalize_text
from .pdf_extractor import read_source_text
from .section_builder import SectionBuilder

logger = logging.getLogger(__name__)

TraceHook = Callable[[int, str, LineIntent], None]


class BKPQuoteParser:
    """Main parser class for turning quote text into BKP sections."""

    def __init__(self, trace: Optional[TraceHook] = None):
        self.trace = trace

    def extract_sections(self, text: str) -> List[Section]:
        """
        Scan the text once and group its cost positions into sections.

        Never raises on unexpected content: lines that fit no rule are
        dropped and a document without headers gives an empty list.

        Args:
            text: Newline-delimited document text

        Returns:
            Sections in document order
        """
        # A leading byte-order mark survives str.strip()
        lines = [line.strip() for line in text.lstrip('\ufeff').split('\n')]
        cursor = LineCursor([line for line in lines if line])
        builder = SectionBuilder()

        while not cursor.exhausted:
            line = cursor.current
            intent = classify_line(line)
            logger.debug(f"Line {cursor.position}: {type(intent).__name__}: {line[:60]}")
            if self.trace is not None:
                self.trace(cursor.position, line, intent)

            consumed = 0
            if isinstance(intent, SectionHeader):
                builder.open_section(intent.code, intent.label)
            elif isinstance(intent, TotalLine):
                builder.add_total(intent.text)
            elif isinstance(intent, ArticleLine):
                if builder.is_open:
                    item = CostItem(
                        article_number=intent.article_number,
                        description=intent.description,
                    )
                    consumed = merge_article_continuation(cursor, item)
                    item.description = normalize_text(item.description)
                    builder.add_item(item)
            elif isinstance(intent, MultiArticle):
                builder.add_items(
                    CostItem(article_number=number, description=description)
                    for number, description in intent.articles
                )
            elif isinstance(intent, StandaloneQuantity):
                builder.backfill_quantity(intent.quantity, intent.unit)
            elif isinstance(intent, StandaloneDimension):
                builder.append_dimension(intent.text)
            elif isinstance(intent, GenericText):
                builder.add_item(CostItem(description=intent.text))

            cursor.advance(1 + consumed)

        sections = builder.finish()
        logger.debug(f"Found {len(sections)} BKP sections")
        return sections

    def parse_text(self, text: str, source_name: str = "<text>",
                   source_size: Optional[int] = None) -> ExtractionResult:
        """
        Extract sections from text and attach run metadata.

        Args:
            text: Document text
            source_name: Name reported in the metadata
            source_size: Size of the source in bytes (defaults to the UTF-8 size of the text)

        Returns:
            Sections plus metadata
        """
        start = time.perf_counter()
        sections = self.extract_sections(text)
        elapsed_ms = round((time.perf_counter() - start) * 1000, 3)

        if source_size is None:
            source_size = len(text.encode('utf-8'))

        metadata = ExtractionMetadata(
            file_name=source_name,
            file_size=source_size,
            processing_time_ms=elapsed_ms,
            total_items=sum(len(section.items) for section in sections),
            section_count=len(sections),
            canonical_codes=sum(1 for section in sections if validate_bkp_code(section.code)),
        )
        logger.info(f"Found {metadata.section_count} sections with {metadata.total_items} items in {source_name}")
        return ExtractionResult(sections=sections, metadata=metadata)

    def parse_file(self, path: Union[str, Path], encoding: str = 'utf-8-sig') -> ExtractionResult:
        """
        Read a PDF or text file and extract its sections.

        Raises:
            ExtractionError: if the file cannot be read or decoded
        """
        logger.info(f"Parsing quote from: {path}")
        start = time.perf_counter()
        text = read_source_text(path, encoding)
        logger.info(f"Extracted {len(text)} characters from {path}")

        result = self.parse_text(text, source_name=Path(path).name, source_size=os.path.getsize(path))
        result.metadata.processing_time_ms = round((time.perf_counter() - start) * 1000, 3)
        return result


def extract_sections(text: str, trace: Optional[TraceHook] = None) -> List[Section]:
    """Convenience function to extract BKP sections from text."""
    return BKPQuoteParser(trace=trace).extract_sections(text)
