from .base_parser import BaseParser
from .fixture_parser import FixtureParseOutcome, FixtureTableParser
from .html_parser import HTMLParser
from .league_parser import LeagueListParser
from .match_parser import MatchDetailParser
from .parser_config import ParserConfig

__all__ = [
    "ParserConfig",
    "BaseParser",
    "LeagueListParser",
    "FixtureTableParser",
    "FixtureParseOutcome",
    "MatchDetailParser",
    "HTMLParser",
]
