"""
BKP Quote Parser

Extracts construction-quote cost positions, grouped by Swiss BKP code, from quote documents.
"""

__version__ = "1.0.0"

from .errors import ExtractionError
from .models import CostItem, ExtractionMetadata, ExtractionResult, Section
from .parser import BKPQuoteParser, extract_sections

__all__ = [
    "BKPQuoteParser",
    "CostItem",
    "ExtractionError",
    "ExtractionMetadata",
    "ExtractionResult",
    "Section",
    "extract_sections",
]
