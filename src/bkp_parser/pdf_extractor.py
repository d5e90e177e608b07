#!/usr/bin/env python3
"""
Text extraction for quote documents.
Decodes PDFs with pdfplumber (pdftotext as fallback) and reads already-decoded text files.
"""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional, Union

import pdfplumber

from .errors import ExtractionError

logger = logging.getLogger(__name__)


class QuoteTextExtractor:
    """
    PDF text extractor with multiple extraction strategies.

    Each strategy returns the text on success (possibly empty), None when its
    tool is not available, and raises when decoding fails.
    """

    def __init__(self):
        self.extraction_methods = [
            self._extract_with_pdfplumber,
            self._extract_with_pdftotext,
        ]

    def extract_text(self, pdf_path: Union[str, Path]) -> str:
        """
        Extract text from a PDF, keeping the original reading order.

        Args:
            pdf_path: Path to the PDF file

        Returns:
            Newline-delimited text of all pages

        Raises:
            ExtractionError: if every available method failed
        """
        last_error: Optional[BaseException] = None

        for method in self.extraction_methods:
            try:
                text = method(str(pdf_path))
            except Exception as e:
                logger.warning(f"Method {method.__name__} failed: {e}")
                last_error = e
                continue

            if text is None:
                continue

            logger.info(f"Extracted {len(text)} characters using {method.__name__}")
            return text

        raise ExtractionError(f"Could not read PDF {pdf_path}: {last_error}", last_error) from last_error

    def _extract_with_pdfplumber(self, pdf_path: str) -> str:
        """Extract text using pdfplumber, one block per page."""
        with pdfplumber.open(pdf_path) as pdf:
            pages = []
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    pages.append(page_text)
            return "\n".join(pages)

    def _extract_with_pdftotext(self, pdf_path: str) -> Optional[str]:
        """Extract text using the pdftotext command-line tool."""
        if shutil.which('pdftotext') is None:
            logger.debug("pdftotext not available")
            return None

        result = subprocess.run(
            ['pdftotext', '-raw', pdf_path, '-'],
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            raise RuntimeError(f"pdftotext exited with {result.returncode}: {result.stderr.strip()}")
        return result.stdout


def read_source_text(path: Union[str, Path], encoding: str = 'utf-8-sig') -> str:
    """
    Obtain the text of a quote document.

    PDFs are decoded; any other file is read as text in the given encoding.

    Args:
        path: Path to the source document
        encoding: Encoding of non-PDF files (the default drops a UTF-8 byte-order mark)

    Returns:
        Document text

    Raises:
        ExtractionError: if the document cannot be read or decoded
    """
    path = Path(path)
    if path.suffix.lower() == '.pdf':
        return QuoteTextExtractor().extract_text(path)

    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise ExtractionError(f"Could not read {path}: {e}", e) from e
