# extractors/parsers/parser_config.py
"""
Configuration module for markup parser settings.
Contains selector chains and category names used across parsers.
"""

from typing import Any, Dict, List

from extractors.extraction_config import ExtractionConfig
from extractors.selector_resolver import (
    EVENT_RULES,
    HEADER_RULES,
    STATS_RULES,
    SelectorRule,
)


class ParserConfig:
    """
    Configuration class containing all parser-related constants and settings.
    """

    # Category names, used in messages and results
    LEAGUES = "leagues"
    FIXTURES = "fixtures"
    STATS = "technical statistics"
    EVENTS = "timeline events"
    HEADER = "match header"
    REPORT = "match report"

    # Direct selectors
    LEAGUE_SELECTOR = ExtractionConfig.LEAGUE_SELECTOR
    FIXTURE_ROW_SELECTOR = ExtractionConfig.FIXTURE_ROW_SELECTOR
    TEAM_TITLE_SELECTOR = ExtractionConfig.TEAM_TITLE_SELECTOR

    # Fallback chains, most specific first
    STATS_RULES: List[SelectorRule] = STATS_RULES
    EVENT_RULES: List[SelectorRule] = EVENT_RULES
    HEADER_RULES: List[SelectorRule] = HEADER_RULES

    # DataFrame columns per category
    LEAGUE_COLUMNS = ["name", "match_count"]
    FIXTURE_COLUMNS = [
        "time",
        "league",
        "status",
        "home_team",
        "score",
        "away_team",
        "half_time",
    ]
    STATS_COLUMNS = ["name", "home_value", "away_value"]
    EVENT_COLUMNS = ["time", "home_event", "away_event"]

    @classmethod
    def get_all_config(cls) -> Dict[str, Any]:
        """
        Get all configuration values as a dictionary.
        """
        return {
            "league_selector": cls.LEAGUE_SELECTOR,
            "fixture_row_selector": cls.FIXTURE_ROW_SELECTOR,
            "team_title_selector": cls.TEAM_TITLE_SELECTOR,
            "stats_selectors": [rule.selector for rule in cls.STATS_RULES],
            "event_selectors": [rule.selector for rule in cls.EVENT_RULES],
            "header_selectors": [rule.selector for rule in cls.HEADER_RULES],
        }
