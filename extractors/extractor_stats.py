# extractors/extractor_stats.py
"""
Technical statistics row extraction.
"""

from typing import Optional

from bs4 import Tag

from exceptions import ParsingError
from logger import StatItem

from .base_extractor import BaseDataExtractor


class StatRowExtractor(BaseDataExtractor):
    """
    Reads home value, stat name and away value from a three-slot row.
    """

    def extract_stat(self, node: Tag) -> Optional[StatItem]:
        """
        Returns:
            StatItem, or None for short rows, blank names and rows whose name
            slot holds a time stamp (timeline rows sharing the container)
        """
        slots = self.get_slots(node)
        if len(slots) < self.config.MIN_SLOTS:
            return None

        name = self.extract_text_from_cell(slots[self.config.MIDDLE_SLOT_IDX])
        if not name or self.is_time_like(name):
            return None

        try:
            return StatItem(
                name=name,
                home_value=self.extract_text_from_cell(
                    slots[self.config.HOME_SLOT_IDX]
                ),
                away_value=self.extract_text_from_cell(
                    slots[self.config.AWAY_SLOT_IDX]
                ),
            )
        except (AttributeError, IndexError, TypeError) as error:
            raise ParsingError(
                self.config.ERROR_MESSAGES["stat_extraction"].format(error), error
            )
