#!/usr/bin/env python3
"""
Section Builder
Collects cost items into BKP sections while the document is scanned top to bottom.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional

from .models import CostItem, Section

logger = logging.getLogger(__name__)


class BuilderState(Enum):
    NO_OPEN_SECTION = "no_open_section"
    OPEN_SECTION = "open_section"


class SectionBuilder:
    """
    State machine holding the currently open section.

    Items arriving while no section is open are dropped, so anything above
    the first recognised header never reaches the result.
    """

    def __init__(self):
        self.sections: List[Section] = []
        self.current: Optional[Section] = None

    @property
    def state(self) -> BuilderState:
        if self.current is None:
            return BuilderState.NO_OPEN_SECTION
        return BuilderState.OPEN_SECTION

    @property
    def is_open(self) -> bool:
        return self.current is not None

    def _last_item(self) -> Optional[CostItem]:
        if self.current is None or not self.current.items:
            return None
        return self.current.items[-1]

    def _seal(self) -> None:
        if self.current is not None:
            self.sections.append(self.current)
            logger.debug(f"Sealed section {self.current.code} with {len(self.current.items)} items")
            self.current = None

    def open_section(self, code: str, label: str) -> Section:
        """Seal the open section and start a new one headed by its marker item."""
        self._seal()
        self.current = Section(code=code, label=label)
        self.current.items.append(CostItem.marker(f"{code} {label}"))
        return self.current

    def add_total(self, text: str) -> None:
        if self.current is not None:
            self.current.items.append(CostItem.marker(text))

    def add_item(self, item: CostItem) -> None:
        if self.current is not None:
            self.current.items.append(item)

    def add_items(self, items: Iterable[CostItem]) -> None:
        for item in items:
            self.add_item(item)

    def backfill_quantity(self, quantity: str, unit: str) -> bool:
        """Set quantity/unit on the last article item if it has none yet."""
        last_item = self._last_item()
        if last_item is None or last_item.is_section_marker or last_item.quantity:
            return False

        last_item.quantity = quantity
        last_item.unit = unit
        return True

    def append_dimension(self, text: str) -> bool:
        """Append dimension text to the last item's description."""
        last_item = self._last_item()
        if last_item is None or last_item.is_section_marker or not last_item.description:
            return False

        last_item.description += ', ' + text
        return True

    def finish(self) -> List[Section]:
        """Seal the open section and return all sections in document order."""
        self._seal()
        return self.sections
