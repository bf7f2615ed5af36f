# extractors/extractor_fixture.py
"""
Fixture row extraction and league-name filtering.
"""

from typing import Dict, Iterable, List, Optional, Union

from bs4 import Tag

from exceptions import InsufficientDataError, ParsingError
from logger import FixtureRecord

from .base_extractor import BaseDataExtractor
from .extraction_config import ExtractionConfig


class FixtureRowExtractor(BaseDataExtractor):
    """
    Maps a fixture table row to a FixtureRecord.

    Two row layouts exist: eight cells with a leading marker cell, or the
    same seven data cells without it.
    """

    FULL_LAYOUT: Dict[str, int] = {
        "league": 1,
        "time": 2,
        "status": 3,
        "home_team": 4,
        "score": 5,
        "away_team": 6,
        "half_time": 7,
    }
    LINKED_FIELDS = ("home_team", "away_team")

    def column_mapping(self, cell_count: int) -> Dict[str, int]:
        if cell_count >= self.config.FULL_FIXTURE_CELLS:
            return dict(self.FULL_LAYOUT)
        return {name: index - 1 for name, index in self.FULL_LAYOUT.items()}

    def extract_fixture(self, row: Tag) -> Optional[FixtureRecord]:
        """
        Args:
            row: Table row element

        Returns:
            FixtureRecord, or None when the row has too few cells

        Raises:
            ParsingError: If the row cannot be read
        """
        if not isinstance(row, Tag):
            return None

        cells = row.find_all(self.config.FIXTURE_CELL_TAG)
        try:
            self.validate_cell_count(
                cells, self.config.MIN_FIXTURE_CELLS, "fixture row"
            )
        except InsufficientDataError:
            return None

        try:
            values = {}
            for name, index in self.column_mapping(len(cells)).items():
                cell = cells[index] if index < len(cells) else None
                if name in self.LINKED_FIELDS:
                    values[name] = self.link_text_or_cell_text(cell)
                else:
                    values[name] = self.text_or_default(cell)
            return FixtureRecord(**values)
        except (AttributeError, IndexError, TypeError) as error:
            raise ParsingError(
                self.config.ERROR_MESSAGES["fixture_extraction"].format(error), error
            )


def normalize_filter_terms(
    league_filter: Union[None, str, Iterable[str]]
) -> List[str]:
    """
    Accept a newline-separated string or an iterable of terms; trim and drop blanks.
    """
    if not league_filter:
        return []
    if isinstance(league_filter, str):
        league_filter = league_filter.splitlines()
    return [term.strip() for term in league_filter if term and term.strip()]


def matches_league_filter(league: str, terms: List[str]) -> bool:
    """
    A fixture passes when its league equals or contains a term, or is contained
    in one. The empty-cell placeholder is never treated as contained in a term.
    No terms means no filtering.
    """
    if not terms:
        return True
    league = league.strip()
    placeholder = league == ExtractionConfig.EMPTY_VALUE
    return any(
        term == league or term in league or (not placeholder and league in term)
        for term in terms
    )
