"""
Data models for the BKP Quote Parser.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class CostItem:
    """Represents a single cost position (article item) in a quote."""
    description: str
    article_number: Optional[str] = None
    quantity: str = ""
    unit: str = ""
    unit_price: str = ""
    amount: str = ""
    is_section_marker: bool = False

    @classmethod
    def marker(cls, text: str) -> "CostItem":
        """Section header or total line, kept verbatim."""
        return cls(description=text, is_section_marker=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "articleNumber": self.article_number,
            "description": self.description,
            "quantity": self.quantity,
            "unit": self.unit,
            "unitPrice": self.unit_price,
            "amount": self.amount,
            "isSectionMarker": self.is_section_marker,
        }


@dataclass
class Section:
    """Represents the cost positions under one BKP classification header."""
    code: str
    label: str
    items: List[CostItem] = field(default_factory=list)

    @property
    def article_count(self) -> int:
        return sum(1 for item in self.items if item.article_number)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "label": self.label,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass
class ExtractionMetadata:
    """Caller-side facts about one extraction run."""
    file_name: str
    file_size: int
    processing_time_ms: float
    total_items: int
    section_count: int
    canonical_codes: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fileName": self.file_name,
            "fileSize": self.file_size,
            "processingTime": self.processing_time_ms,
            "totalItems": self.total_items,
            "sectionCount": self.section_count,
            "canonicalCodes": self.canonical_codes,
        }


@dataclass
class ExtractionResult:
    """Sections found in a document plus the metadata computed around them."""
    sections: List[Section]
    metadata: ExtractionMetadata

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sections": [section.to_dict() for section in self.sections],
            "metadata": self.metadata.to_dict(),
        }
