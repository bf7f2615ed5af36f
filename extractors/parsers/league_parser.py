# extractors/parsers/league_parser.py
"""
League listing parser.
"""

from typing import Dict, List

from exceptions import CategoryNotFoundError
from extractors.extractor_league import LeagueEntryExtractor
from logger import LeagueRecord

from .base_parser import BaseParser


class LeagueListParser(BaseParser):
    """
    Collects league filter entries, de-duplicated by name and sorted by name.
    """

    def __init__(self, cache=None):
        super().__init__(cache)
        self.entry_extractor = LeagueEntryExtractor()

    def parse_leagues(self, raw_text: str) -> List[LeagueRecord]:
        """
        Raises:
            CategoryNotFoundError: If no league entry is present
        """
        document, key = self._load_document(raw_text)
        return list(
            self.cache.get_or_compute(
                document, key, self.config.LEAGUES,
                lambda: tuple(self._collect(document, key)),
            )
        )

    def _collect(self, document, key) -> List[LeagueRecord]:
        nodes = self._select(document, key, self.config.LEAGUE_SELECTOR)

        # First occurrence of a name wins
        seen: Dict[str, LeagueRecord] = {}
        for node in nodes:
            record = self.entry_extractor.extract_league(node)
            if record is not None and record.name not in seen:
                seen[record.name] = record

        if not seen:
            raise CategoryNotFoundError(self.config.LEAGUES)

        return sorted(seen.values(), key=lambda record: record.name)
