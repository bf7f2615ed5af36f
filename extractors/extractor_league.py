# extractors/extractor_league.py
"""
League listing entry extraction.
"""

import re
from typing import Optional

from bs4 import Tag

from logger import LeagueRecord

from .base_extractor import BaseDataExtractor


class LeagueEntryExtractor(BaseDataExtractor):
    """
    Reads one `name[count]` league filter entry.
    """

    def __init__(self):
        super().__init__()
        self._pattern = re.compile(self.config.LEAGUE_TEXT_PATTERN)

    def extract_league(self, node: Tag) -> Optional[LeagueRecord]:
        """
        Args:
            node: Element carrying the league filter click handler

        Returns:
            LeagueRecord, or None when the text is not in `name[count]` form
        """
        match = self._pattern.match(self.extract_text_from_cell(node))
        if not match:
            return None
        name = match.group(1).strip()
        if not name:
            return None
        return LeagueRecord(name=name, match_count=int(match.group(2)))
