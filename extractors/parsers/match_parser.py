# extractors/parsers/match_parser.py
"""
Match detail parser: header block, technical statistics and timeline events.
"""

from typing import List, Optional

from exceptions import CategoryNotFoundError
from extractors.extractor_event import EventContentClassifier, EventRowExtractor
from extractors.extractor_header import MatchHeaderExtractor
from extractors.extractor_stats import StatRowExtractor
from logger import EventRecord, MatchHeader, StatItem

from .base_parser import BaseParser


class MatchDetailParser(BaseParser):
    """
    Reads the three sections of a match detail page through their
    selector fallback chains.
    """

    def __init__(self, cache=None, classifier: EventContentClassifier = None):
        super().__init__(cache)
        self.header_extractor = MatchHeaderExtractor()
        self.stat_extractor = StatRowExtractor()
        self.event_extractor = EventRowExtractor(classifier)

    def parse_header(
        self,
        raw_text: str,
        use_team_title: bool = False,
        key: Optional[int] = None,
    ) -> MatchHeader:
        """
        Args:
            raw_text: Match page markup
            use_team_title: Fall back to the events-section team title when the
                header block yields no team names
            key: Precomputed fingerprint of raw_text

        Returns:
            MatchHeader; empty (no teams) when neither source is present
        """
        document, key = self._load_document(raw_text, key)
        selection = self.resolver.resolve(
            document, key, self.config.HEADER_RULES, self.config.HEADER
        )
        header = self.header_extractor.extract_header(
            selection.nodes[0] if selection.found else None
        )
        if header.has_teams or not use_team_title:
            return header

        title = self._select_one(document, key, self.config.TEAM_TITLE_SELECTOR)
        fallback = self.header_extractor.extract_team_title(title)
        return fallback if fallback.has_teams else header

    def parse_stats(
        self, raw_text: str, key: Optional[int] = None
    ) -> List[StatItem]:
        """
        Raises:
            CategoryNotFoundError: If no statistics row could be read
        """
        document, key = self._load_document(raw_text, key)
        return list(
            self.cache.get_or_compute(
                document, key, self.config.STATS,
                lambda: tuple(self._collect_stats(document, key)),
            )
        )

    def parse_events(
        self, raw_text: str, key: Optional[int] = None
    ) -> List[EventRecord]:
        """
        Raises:
            CategoryNotFoundError: If no timeline row could be read
        """
        document, key = self._load_document(raw_text, key)
        return list(
            self.cache.get_or_compute(
                document, key, self.config.EVENTS,
                lambda: tuple(self._collect_events(document, key)),
            )
        )

    def _collect_stats(self, document, key) -> List[StatItem]:
        selection = self.resolver.resolve(
            document, key, self.config.STATS_RULES, self.config.STATS
        )
        items = [
            item
            for item in map(self.stat_extractor.extract_stat, selection.nodes)
            if item is not None
        ]
        if not items:
            raise CategoryNotFoundError(self.config.STATS)
        return items

    def _collect_events(self, document, key) -> List[EventRecord]:
        selection = self.resolver.resolve(
            document, key, self.config.EVENT_RULES, self.config.EVENTS
        )
        events = [
            event
            for event in map(self.event_extractor.extract_event, selection.nodes)
            if event is not None
        ]
        if not events:
            raise CategoryNotFoundError(self.config.EVENTS)
        return events
