# extractors/parsers/fixture_parser.py
"""
Fixture table parser.
Rows are processed in slices through the batch runner so very large pages
report progress while they are being read.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from bs4 import Tag

from configurations import BatchConfig
from coordination import BatchRunner
from coordination.batch_runner import ProgressCallback
from exceptions import BatchProcessingError, CategoryNotFoundError
from extractors.extractor_fixture import (
    FixtureRowExtractor,
    matches_league_filter,
    normalize_filter_terms,
)
from logger import FixtureRecord

from .base_parser import BaseParser


@dataclass(frozen=True)
class FixtureParseOutcome:
    fixtures: List[FixtureRecord]
    total_rows: int
    filter_terms: List[str] = field(default_factory=list)
    error: Optional[BatchProcessingError] = None

    @property
    def filtered(self) -> bool:
        return bool(self.filter_terms)


class FixtureTableParser(BaseParser):
    """
    Fixture rows to FixtureRecords, with an optional league-name filter.
    """

    def __init__(self, cache=None, batch_config: Optional[BatchConfig] = None):
        super().__init__(cache)
        self.row_extractor = FixtureRowExtractor()
        self.batch_runner = BatchRunner(batch_config)

    def find_rows(self, raw_text: str) -> List[Tag]:
        """
        Raises:
            CategoryNotFoundError: If the page has no fixture rows
        """
        document, key = self._load_document(raw_text)
        rows = self._select(document, key, self.config.FIXTURE_ROW_SELECTOR)
        if not rows:
            raise CategoryNotFoundError(self.config.FIXTURES)
        return rows

    def parse_fixtures(
        self,
        raw_text: str,
        league_filter: Union[None, str, Iterable[str]] = None,
        batch_size: Optional[int] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> FixtureParseOutcome:
        """
        Args:
            raw_text: Fixture listing markup
            league_filter: Newline-separated string or list of league terms
            batch_size: Slice size; picked from the row count when omitted
            on_progress: Called as on_progress(done, total) after each slice

        Returns:
            FixtureParseOutcome; a row fault ends the run early and is carried
            in outcome.error with the rows read before it

        Raises:
            CategoryNotFoundError: If the page has no fixture rows
        """
        rows = self.find_rows(raw_text)
        terms = normalize_filter_terms(league_filter)

        def process(row: Tag, index: int) -> Optional[FixtureRecord]:
            return self._process_row(row, terms)

        final = self.batch_runner.run(
            rows, process, batch_size=batch_size, on_progress=on_progress
        )
        return FixtureParseOutcome(
            fixtures=list(final.results),
            total_rows=len(rows),
            filter_terms=terms,
            error=final.error,
        )

    def _process_row(self, row: Tag, terms: List[str]) -> Optional[FixtureRecord]:
        record = self.row_extractor.extract_fixture(row)
        if record is None:
            return None
        if not matches_league_filter(record.league, terms):
            return None
        return record
