# extractors/base_extractor.py
"""
Base data extraction utilities with common extraction methods.
Provides reusable extraction functionality for all record types.
"""

import re
from typing import List, Optional

from bs4 import Tag

from exceptions import InsufficientDataError, ParsingError

from .extraction_config import ExtractionConfig


class BaseDataExtractor:
    """
    Base class providing common data extraction methods.

    This class contains reusable extraction methods that can be used
    by specialized extractors for different record types.
    """

    def __init__(self):
        """
        Initialize the base extractor with configuration
        """
        self.config = ExtractionConfig()
        self._time_like = re.compile(self.config.TIME_LIKE_PATTERN)

    def extract_text_from_cell(self, cell: Optional[Tag]) -> str:
        """
        Extract clean text content from a cell.

        Args:
            cell: BeautifulSoup Tag containing text data

        Returns:
            Clean text string or empty string if the cell is missing
        """
        if not isinstance(cell, Tag):
            return ""
        return cell.get_text(strip=True)

    def extract_normalized_text(self, cell: Optional[Tag]) -> str:
        """
        Extract text with every whitespace run collapsed to a single space.
        Keeps the gap between names that sit in separate child nodes.
        """
        if not isinstance(cell, Tag):
            return ""
        return " ".join(cell.get_text(" ", strip=True).split())

    def text_or_default(self, cell: Optional[Tag]) -> str:
        return self.extract_text_from_cell(cell) or self.config.EMPTY_VALUE

    def link_text_or_cell_text(self, cell: Optional[Tag]) -> str:
        """
        Prefer the text of the first link inside the cell, then the cell text.
        """
        if not isinstance(cell, Tag):
            return self.config.EMPTY_VALUE
        link = cell.find(self.config.LINK_TAG)
        link_text = self.extract_text_from_cell(link) if link else ""
        return link_text or self.text_or_default(cell)

    def is_time_like(self, text: str) -> bool:
        return bool(text) and self._time_like.search(text) is not None

    def get_slots(self, node: Tag) -> List[Tag]:
        """
        Return the span slots of a `.lists` node's `.data` block.

        Direct children are used when there are enough of them so nested
        spans inside an event cell do not shift the slot positions.
        """
        if not isinstance(node, Tag):
            return []
        data_block = node.select_one(self.config.DATA_SLOT_SELECTOR)
        if data_block is None:
            return []
        slots = data_block.find_all(self.config.SLOT_TAG, recursive=False)
        if len(slots) < self.config.MIN_SLOTS:
            slots = data_block.find_all(self.config.SLOT_TAG)
        return slots

    def validate_cell_count(
        self, cells: list, required_count: int, context: str = ""
    ) -> bool:
        """
        Validate that the cell list has the required number of cells.

        Args:
            cells: List of cells
            required_count: Minimum required number of cells
            context: Context information for error reporting

        Returns:
            True if validation passes

        Raises:
            ParsingError: If cells is not a list
            InsufficientDataError: If there are too few cells
        """
        if not isinstance(cells, list):
            raise ParsingError(self.config.ERROR_MESSAGES["invalid_cell"])
        if len(cells) < required_count:
            raise InsufficientDataError(
                f"cells in {context}" if context else "cells",
                required_count,
                len(cells),
            )

        return True
