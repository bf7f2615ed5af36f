# pipelines/orchestrator_config.py
"""
Configuration constants for the extraction orchestrator.
Centralizes message templates and category keys.
"""

from typing import Dict

from extractors.parsers import ParserConfig


class OrchestratorConfig:
    """
    Configuration constants for orchestrator operations.
    """

    # ***> Category keys accepted by MatchDataOrchestrator.extract <***
    CATEGORY_KEYS: Dict[str, str] = {
        "leagues": ParserConfig.LEAGUES,
        "fixtures": ParserConfig.FIXTURES,
        "stats": ParserConfig.STATS,
        "events": ParserConfig.EVENTS,
        "report": ParserConfig.REPORT,
    }

    # ***> Result message templates <***
    EMPTY_INPUT_MESSAGE: str = "Empty input for {}"
    FOUND_MESSAGE: str = "Extracted {} {}"
    FILTERED_MESSAGE: str = "filtered {} of {} fixtures"
    UNFILTERED_MESSAGE: str = "{} of {} fixture rows"
    FILTER_EMPTY_MESSAGE: str = "No fixtures matched the league filter ({} rows read)"
    PARTIAL_MESSAGE: str = "; stopped early at row {}: {}"
    FAILURE_MESSAGE: str = "{} extraction failed: {}"
    UNKNOWN_CATEGORY_MESSAGE: str = "Unknown category: {}"
    BAD_ARGUMENTS_MESSAGE: str = "Invalid arguments for {}: {}"
