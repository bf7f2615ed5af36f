# extractors/parsers/html_parser.py
"""
Main markup parsing module.
Provides a simplified interface to the specialized parser components,
with DataFrame views of their records.
"""

from dataclasses import asdict
from typing import Iterable, List, Optional, Union

import pandas as pd

from caching import ParseCache
from configurations import BatchConfig
from exceptions import CategoryNotFoundError

from .fixture_parser import FixtureTableParser
from .league_parser import LeagueListParser
from .match_parser import MatchDetailParser
from .parser_config import ParserConfig


class HTMLParser:
    """
    Facade over the league, fixture and match parsers sharing one parse cache.
    """

    def __init__(
        self,
        cache: Optional[ParseCache] = None,
        batch_config: Optional[BatchConfig] = None,
    ):
        """
        Args:
            cache: Parse cache shared by every parser
            batch_config: Batch sizing policy for fixture tables
        """
        self.cache = cache if cache is not None else ParseCache()
        self.league_parser = LeagueListParser(self.cache)
        self.fixture_parser = FixtureTableParser(self.cache, batch_config)
        self.match_parser = MatchDetailParser(self.cache)

    @staticmethod
    def _frame(records: List, columns: List[str]) -> pd.DataFrame:
        if not records:
            return pd.DataFrame(columns=columns)
        rows = [{name: asdict(record)[name] for name in columns} for record in records]
        return pd.DataFrame(rows, columns=columns)

    def parse_league_table(self, raw_text: str) -> pd.DataFrame:
        """
        Returns:
            DataFrame with name and match_count; empty when no leagues exist
        """
        try:
            records = self.league_parser.parse_leagues(raw_text)
        except CategoryNotFoundError:
            records = []
        return self._frame(records, ParserConfig.LEAGUE_COLUMNS)

    def parse_fixture_table(
        self,
        raw_text: str,
        league_filter: Union[None, str, Iterable[str]] = None,
    ) -> pd.DataFrame:
        try:
            records = self.fixture_parser.parse_fixtures(raw_text, league_filter).fixtures
        except CategoryNotFoundError:
            records = []
        return self._frame(records, ParserConfig.FIXTURE_COLUMNS)

    def parse_stats_table(self, raw_text: str) -> pd.DataFrame:
        try:
            records = self.match_parser.parse_stats(raw_text)
        except CategoryNotFoundError:
            records = []
        return self._frame(records, ParserConfig.STATS_COLUMNS)

    def parse_event_table(self, raw_text: str) -> pd.DataFrame:
        try:
            records = self.match_parser.parse_events(raw_text)
        except CategoryNotFoundError:
            records = []
        return self._frame(records, ParserConfig.EVENT_COLUMNS)
