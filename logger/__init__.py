from .constants import LoggingConstants, MarkdownConstants
from .constants_match import (
    ClassifiedEvent,
    EventKind,
    EventLabels,
    EventRecord,
    ExtractionResult,
    ExtractionStatus,
    FixtureRecord,
    LeagueRecord,
    MatchHeader,
    StatItem,
)
from .logger import (
    console_handler,
    daily_file_handler,
    session_file_handler,
    setup_smart_logger,
    share_handlers,
    size_file_handler,
)

__all__ = [
    "LoggingConstants",
    "MarkdownConstants",
    "EventKind",
    "EventLabels",
    "LeagueRecord",
    "FixtureRecord",
    "MatchHeader",
    "StatItem",
    "ClassifiedEvent",
    "EventRecord",
    "ExtractionStatus",
    "ExtractionResult",
    "console_handler",
    "daily_file_handler",
    "size_file_handler",
    "session_file_handler",
    "setup_smart_logger",
    "share_handlers",
]
