# pipelines/match_data_orchestrator.py
"""
Top-level extraction entry points.

Every public method returns an ExtractionResult. A missing category or empty
input becomes NO_DATA; anything else that goes wrong is logged and becomes
FAILED with the error message. Nothing raises past this boundary.
"""

import inspect
import logging
from typing import Callable, Iterable, Optional, Union

from caching import ParseCache, fingerprint
from configurations import ConfigFactory, ParserSettings
from exceptions import CategoryNotFoundError, ConfigurationError
from extractors.parsers import HTMLParser, ParserConfig
from logger import ExtractionResult, ExtractionStatus
from predictors import EventStatsAggregate, StoppageTimePredictor
from renderers import MarkdownRenderer

from .orchestrator_config import OrchestratorConfig

logger = logging.getLogger(__name__)


class MatchDataOrchestrator:
    """
    Wires the parse cache, parsers, predictor and renderer together.
    """

    def __init__(
        self,
        settings: Optional[ParserSettings] = None,
        cache: Optional[ParseCache] = None,
    ):
        """
        Args:
            settings: Engine settings (uses development if None)
            cache: Parse cache to share with other callers; built from
                settings when omitted

        Raises:
            ConfigurationError: If settings are invalid
        """
        # ***> Initialize configuration using factory pattern <***
        self.settings = settings or ConfigFactory.development()
        self._validate_configuration()

        # ***> Set up core components <***
        self.cache = cache if cache is not None else ParseCache(
            self.settings.parser_features, self.settings.cache.enabled
        )
        self.html_parser = HTMLParser(self.cache, self.settings.batch)
        self.predictor = StoppageTimePredictor(self.settings.stoppage)
        self.renderer = MarkdownRenderer()

    def _validate_configuration(self) -> None:
        try:
            self.settings.validate()
        except ConfigurationError:
            raise
        except Exception as error:
            raise ConfigurationError(f"Invalid configuration: {error}")

    # ***> Generic entry point <***
    def extract(self, category: str, raw_text: str, **kwargs) -> ExtractionResult:
        """
        Dispatch by category key: leagues, fixtures, stats, events or report.
        """
        handlers = {
            "leagues": self.extract_leagues,
            "fixtures": self.extract_fixtures,
            "stats": self.extract_stats,
            "events": self.extract_events,
            "report": self.extract_match_report,
        }
        handler = handlers.get(category)
        if handler is None:
            return ExtractionResult.failure(
                category, OrchestratorConfig.UNKNOWN_CATEGORY_MESSAGE.format(category)
            )
        try:
            inspect.signature(handler).bind(raw_text, **kwargs)
        except TypeError as error:
            logger.warning(f"Rejected {category} arguments: {error}")
            return ExtractionResult.failure(
                category, OrchestratorConfig.BAD_ARGUMENTS_MESSAGE.format(category, error)
            )
        return handler(raw_text, **kwargs)

    def extract_leagues(self, raw_text: str) -> ExtractionResult:
        def action() -> ExtractionResult:
            leagues = self.html_parser.league_parser.parse_leagues(raw_text)
            return ExtractionResult(
                status=ExtractionStatus.SUCCESS,
                category=ParserConfig.LEAGUES,
                markdown=self.renderer.render_leagues(leagues),
                records=tuple(leagues),
                message=OrchestratorConfig.FOUND_MESSAGE.format(
                    len(leagues), ParserConfig.LEAGUES
                ),
                total_candidates=len(leagues),
            )

        return self._guarded(ParserConfig.LEAGUES, raw_text, action)

    def extract_fixtures(
        self,
        raw_text: str,
        league_filter: Union[None, str, Iterable[str]] = None,
        on_progress: Optional[Callable[[int, int], None]] = None,
    ) -> ExtractionResult:
        """
        Args:
            raw_text: Fixture listing markup
            league_filter: League terms, newline-separated or as a list
            on_progress: Called as on_progress(done, total) between row slices
        """

        def action() -> ExtractionResult:
            outcome = self.html_parser.fixture_parser.parse_fixtures(
                raw_text, league_filter, on_progress=on_progress
            )
            count = len(outcome.fixtures)

            if outcome.filtered:
                message = OrchestratorConfig.FILTERED_MESSAGE.format(
                    count, outcome.total_rows
                )
            else:
                message = OrchestratorConfig.UNFILTERED_MESSAGE.format(
                    count, outcome.total_rows
                )
            if outcome.error is not None:
                message += OrchestratorConfig.PARTIAL_MESSAGE.format(
                    outcome.error.index, outcome.error.original_error
                )

            if not outcome.fixtures:
                return ExtractionResult(
                    status=ExtractionStatus.NO_DATA,
                    category=ParserConfig.FIXTURES,
                    message=(
                        OrchestratorConfig.FILTER_EMPTY_MESSAGE.format(outcome.total_rows)
                        if outcome.filtered
                        else message
                    ),
                    total_candidates=outcome.total_rows,
                )

            return ExtractionResult(
                status=ExtractionStatus.SUCCESS,
                category=ParserConfig.FIXTURES,
                markdown=self.renderer.render_fixtures(
                    outcome.fixtures, outcome.filter_terms
                ),
                records=tuple(outcome.fixtures),
                message=message,
                total_candidates=outcome.total_rows,
                extras={
                    "filter_terms": list(outcome.filter_terms),
                    "partial": outcome.error is not None,
                },
            )

        return self._guarded(ParserConfig.FIXTURES, raw_text, action)

    def extract_stats(
        self, raw_text: str, key: Optional[int] = None
    ) -> ExtractionResult:
        def action() -> ExtractionResult:
            parser = self.html_parser.match_parser
            doc_key = fingerprint(raw_text) if key is None else key
            stats = parser.parse_stats(raw_text, key=doc_key)
            header = parser.parse_header(raw_text, key=doc_key)
            return ExtractionResult(
                status=ExtractionStatus.SUCCESS,
                category=ParserConfig.STATS,
                markdown=self.renderer.render_stats_section(header, stats),
                records=tuple(stats),
                message=OrchestratorConfig.FOUND_MESSAGE.format(
                    len(stats), ParserConfig.STATS
                ),
                total_candidates=len(stats),
                extras={"header": header},
            )

        return self._guarded(ParserConfig.STATS, raw_text, action)

    def extract_events(
        self, raw_text: str, key: Optional[int] = None
    ) -> ExtractionResult:
        """
        Timeline rows plus the added-time prediction block.

        Args:
            raw_text: Match page or events fragment markup
            key: Precomputed fingerprint of raw_text
        """

        def action() -> ExtractionResult:
            parser = self.html_parser.match_parser
            doc_key = fingerprint(raw_text) if key is None else key
            events = parser.parse_events(raw_text, key=doc_key)
            header = parser.parse_header(raw_text, use_team_title=True, key=doc_key)

            aggregate = EventStatsAggregate.from_records(events)
            base_minutes = self.settings.stoppage.base_minutes
            seconds = self.predictor.event_seconds(aggregate)
            prediction = self.predictor.predict(aggregate, base_minutes)

            return ExtractionResult(
                status=ExtractionStatus.SUCCESS,
                category=ParserConfig.EVENTS,
                markdown=self.renderer.render_events_section(
                    header,
                    events,
                    prediction=prediction,
                    tallies=aggregate.counts(),
                    event_seconds=seconds,
                    base_minutes=base_minutes,
                ),
                records=tuple(events),
                message=OrchestratorConfig.FOUND_MESSAGE.format(
                    len(events), ParserConfig.EVENTS
                ),
                total_candidates=len(events),
                stoppage_prediction=prediction,
                extras={
                    "header": header,
                    "tallies": aggregate.counts(),
                    "event_seconds": seconds,
                },
            )

        return self._guarded(ParserConfig.EVENTS, raw_text, action)

    def extract_match_report(
        self, raw_text: str, events_text: Optional[str] = None
    ) -> ExtractionResult:
        """
        Statistics and events sections joined into one report.

        Args:
            raw_text: Full match page, or the statistics fragment alone
            events_text: Separate events fragment; raw_text is used when omitted
        """
        # One fingerprint pass per distinct input
        page_key = fingerprint(raw_text) if raw_text and raw_text.strip() else None
        stats = self.extract_stats(raw_text, key=page_key)
        if events_text:
            events = self.extract_events(events_text)
        else:
            events = self.extract_events(raw_text, key=page_key)
        sections = [result for result in (stats, events) if result.success]

        if not sections:
            failed = [
                result
                for result in (stats, events)
                if result.status is ExtractionStatus.FAILED
            ]
            if failed:
                return ExtractionResult.failure(
                    ParserConfig.REPORT, "; ".join(r.message for r in failed)
                )
            return ExtractionResult.no_data(ParserConfig.REPORT)

        return ExtractionResult(
            status=ExtractionStatus.SUCCESS,
            category=ParserConfig.REPORT,
            markdown=self.renderer.render_report([r.markdown for r in sections]),
            records=stats.records + events.records,
            message="; ".join(r.message for r in (stats, events)),
            total_candidates=stats.total_candidates + events.total_candidates,
            stoppage_prediction=events.stoppage_prediction,
            extras={"stats": stats, "events": events},
        )

    def clear_cache(self) -> None:
        self.cache.clear()

    def _guarded(
        self,
        category: str,
        raw_text: Optional[str],
        action: Callable[[], ExtractionResult],
    ) -> ExtractionResult:
        if raw_text is None or not str(raw_text).strip():
            return ExtractionResult.no_data(
                category, OrchestratorConfig.EMPTY_INPUT_MESSAGE.format(category)
            )
        try:
            return action()
        except CategoryNotFoundError as error:
            logger.info(error.message)
            return ExtractionResult.no_data(category, error.message)
        except Exception as error:
            logger.exception(f"{category} extraction failed")
            return ExtractionResult.failure(
                category, OrchestratorConfig.FAILURE_MESSAGE.format(category, error)
            )
