from .base_extractor import BaseDataExtractor
from .extraction_config import ExtractionConfig
from .extractor_event import EventContentClassifier, EventRowExtractor
from .extractor_fixture import (
    FixtureRowExtractor,
    matches_league_filter,
    normalize_filter_terms,
)
from .extractor_header import MatchHeaderExtractor
from .extractor_league import LeagueEntryExtractor
from .extractor_stats import StatRowExtractor
from .selector_resolver import (
    EVENT_RULES,
    HEADER_RULES,
    STATS_RULES,
    ResolvedSelection,
    SelectorFallbackResolver,
    SelectorRule,
)
from .parsers import (
    FixtureParseOutcome,
    FixtureTableParser,
    HTMLParser,
    LeagueListParser,
    MatchDetailParser,
)

__all__ = [
    "BaseDataExtractor",
    "ExtractionConfig",
    "EventContentClassifier",
    "EventRowExtractor",
    "FixtureRowExtractor",
    "normalize_filter_terms",
    "matches_league_filter",
    "MatchHeaderExtractor",
    "LeagueEntryExtractor",
    "StatRowExtractor",
    "SelectorRule",
    "ResolvedSelection",
    "SelectorFallbackResolver",
    "STATS_RULES",
    "EVENT_RULES",
    "HEADER_RULES",
    "HTMLParser",
    "LeagueListParser",
    "FixtureTableParser",
    "FixtureParseOutcome",
    "MatchDetailParser",
]
