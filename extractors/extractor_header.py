# extractors/extractor_header.py
"""
Match header extraction from the analysis head block.
"""

import copy
from typing import Dict, Optional, Tuple

from bs4 import Tag

from logger import MatchHeader

from .base_extractor import BaseDataExtractor


class MatchHeaderExtractor(BaseDataExtractor):
    """
    Builds a MatchHeader from the `.analyhead` block, with the events-section
    team title as a fallback source for team names and scores.
    """

    def extract_header(self, block: Optional[Tag]) -> MatchHeader:
        """
        Args:
            block: The `.analyhead` element, or None

        Returns:
            MatchHeader; an empty one when block is None
        """
        if not isinstance(block, Tag):
            return MatchHeader()

        values: Dict[str, Optional[str]] = {
            "home_team": self._anchor_text(block, self.config.HOME_BLOCK_SELECTOR),
            "away_team": self._anchor_text(block, self.config.GUEST_BLOCK_SELECTOR),
        }

        vs_block = block.select_one(self.config.VS_BLOCK_SELECTOR)
        if vs_block is not None:
            values.update(self._extract_vs_block(vs_block))

        return MatchHeader(**values)

    def extract_team_title(self, title: Optional[Tag]) -> MatchHeader:
        """
        Read `.homeTN` / `.guestTN` spans, where a nested <i> holds the score.
        """
        if not isinstance(title, Tag):
            return MatchHeader()

        home_team, home_score = self._split_team_score(
            title.select_one(self.config.HOME_TITLE_SELECTOR)
        )
        away_team, away_score = self._split_team_score(
            title.select_one(self.config.GUEST_TITLE_SELECTOR)
        )
        return MatchHeader(
            home_team=home_team,
            away_team=away_team,
            home_score=home_score,
            away_score=away_score,
        )

    def _anchor_text(self, block: Tag, selector: str) -> str:
        side = block.select_one(selector)
        if side is None:
            return ""
        return self.extract_text_from_cell(side.find(self.config.LINK_TAG))

    def _optional_text(self, block: Tag, selector: str) -> Optional[str]:
        return self.extract_text_from_cell(block.select_one(selector)) or None

    def _extract_vs_block(self, vs_block: Tag) -> Dict[str, Optional[str]]:
        values: Dict[str, Optional[str]] = {
            "league": self._optional_text(vs_block, self.config.LEAGUE_NAME_SELECTOR),
            "match_time": self._optional_text(vs_block, self.config.MATCH_TIME_SELECTOR),
            "venue": self._optional_text(vs_block, self.config.VENUE_SELECTOR),
            "current_time": self._optional_text(
                vs_block, self.config.CURRENT_TIME_SELECTOR
            ),
        }

        scores = vs_block.select(self.config.SCORE_SELECTOR)
        if len(scores) >= 2:
            values["home_score"] = self.extract_text_from_cell(scores[0]) or "0"
            values["away_score"] = self.extract_text_from_cell(scores[1]) or "0"

        for label in vs_block.find_all(self.config.LABEL_TAG):
            text = self.extract_normalized_text(label)
            weather = self._strip_prefix(text, self.config.WEATHER_PREFIXES)
            if weather is not None:
                values["weather"] = weather or None
                continue
            temperature = self._strip_prefix(text, self.config.TEMPERATURE_PREFIXES)
            if temperature is not None:
                values["temperature"] = temperature or None

        return values

    @staticmethod
    def _strip_prefix(text: str, prefixes: Tuple[str, ...]) -> Optional[str]:
        lowered = text.lower()
        for prefix in prefixes:
            if lowered.startswith(prefix):
                return text[len(prefix):].strip()
        return None

    def _split_team_score(self, span: Optional[Tag]) -> Tuple[str, str]:
        if span is None:
            return "", "0"
        score_tag = span.find(self.config.TITLE_SCORE_TAG)
        if score_tag is None:
            return self.extract_normalized_text(span), "0"

        score = self.extract_text_from_cell(score_tag) or "0"
        # Work on a copy; cached documents are never mutated
        detached = copy.copy(span)
        detached_score = detached.find(self.config.TITLE_SCORE_TAG)
        if detached_score is not None:
            detached_score.decompose()
        return self.extract_normalized_text(detached), score
