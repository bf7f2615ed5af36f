# renderers/markdown_renderer.py
"""
Fixed-format Markdown output for extracted records.
"""

from typing import Iterable, List, Optional, Sequence

from logger import (
    EventRecord,
    FixtureRecord,
    LeagueRecord,
    MarkdownConstants,
    MatchHeader,
    StatItem,
)


class MarkdownRenderer:
    """
    Turns typed records into titled, pipe-delimited tables.
    """

    def __init__(self, constants: Optional[MarkdownConstants] = None):
        self.constants = constants or MarkdownConstants()

    @staticmethod
    def table(columns: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
        lines = [
            "| " + " | ".join(columns) + " |",
            "|" + "|".join("------" for _ in columns) + "|",
        ]
        for row in rows:
            lines.append("| " + " | ".join(MarkdownRenderer.cell(v) for v in row) + " |")
        return "\n".join(lines) + "\n"

    @staticmethod
    def cell(value: Optional[str]) -> str:
        # A bare pipe would split the cell
        text = "-" if value is None or value == "" else str(value)
        return text.replace("|", "\\|").replace("\n", " ")

    def render_leagues(self, leagues: List[LeagueRecord]) -> str:
        c = self.constants
        return (
            f"{c.LEAGUE_TITLE}\n\n"
            + self.table(c.LEAGUE_COLUMNS, [[league.name] for league in leagues])
        )

    def render_fixtures(
        self, fixtures: List[FixtureRecord], filter_terms: Optional[List[str]] = None
    ) -> str:
        c = self.constants
        markdown = f"{c.FIXTURE_TITLE}\n\n"
        if filter_terms:
            markdown += c.FILTER_HEADER.format(", ".join(filter_terms)) + "\n\n"
        return markdown + self.table(
            c.FIXTURE_COLUMNS, [fixture.as_row() for fixture in fixtures]
        )

    def render_header(self, header: MatchHeader) -> str:
        """
        Score line plus the optional info lines; empty when team names are missing.
        """
        if not header.has_teams:
            return ""
        c = self.constants
        markdown = (
            f"### {header.home_team} {header.home_score} - "
            f"{header.away_score} {header.away_team}\n\n"
        )

        basic = self._info_line(
            [
                (c.LEAGUE_LABEL, header.league),
                (c.TIME_LABEL, header.match_time),
                (c.VENUE_LABEL, header.venue),
            ]
        )
        if basic:
            markdown += basic + "\n\n"

        status = self._info_line(
            [
                (c.CURRENT_TIME_LABEL, header.current_time),
                (c.WEATHER_LABEL, header.weather),
                (c.TEMPERATURE_LABEL, header.temperature),
            ]
        )
        if status:
            markdown += status + "\n\n"
        return markdown

    def _info_line(self, pairs) -> str:
        return self.constants.INFO_SEPARATOR.join(
            f"**{label}**: {value}" for label, value in pairs if value
        )

    def render_stats_section(self, header: MatchHeader, stats: List[StatItem]) -> str:
        c = self.constants
        return (
            f"{c.STATS_SECTION}\n\n"
            + self.render_header(header)
            + self.table(
                c.STATS_COLUMNS,
                [[item.name, item.home_value, item.away_value] for item in stats],
            )
        )

    def render_events_section(
        self,
        header: MatchHeader,
        events: List[EventRecord],
        prediction: Optional[int] = None,
        tallies: Optional[dict] = None,
        event_seconds: Optional[int] = None,
        base_minutes: Optional[int] = None,
    ) -> str:
        c = self.constants
        markdown = (
            f"{c.EVENTS_SECTION}\n\n"
            + self._score_line(header)
            + self.table(
                c.EVENT_COLUMNS,
                [[event.time, event.home_event, event.away_event] for event in events],
            )
        )
        if prediction is not None:
            markdown += "\n" + self.render_stoppage_block(
                prediction, tallies or {}, event_seconds, base_minutes
            )
        return markdown

    def _score_line(self, header: MatchHeader) -> str:
        if not header.has_teams:
            return ""
        return (
            f"### {header.home_team} {header.home_score} - "
            f"{header.away_score} {header.away_team}\n\n"
        )

    def render_stoppage_block(
        self,
        prediction: int,
        tallies: dict,
        event_seconds: Optional[int] = None,
        base_minutes: Optional[int] = None,
    ) -> str:
        c = self.constants
        markdown = f"{c.STOPPAGE_SECTION}\n\n{c.PREDICTION_LINE.format(prediction)}\n\n"
        if base_minutes is not None and event_seconds is not None:
            markdown += c.BASE_LINE.format(base_minutes, event_seconds) + "\n\n"

        rows = [
            [c.TALLY_LABELS.get(category, category), str(count)]
            for category, count in tallies.items()
            if count
        ]
        if rows:
            markdown += self.table(c.TALLY_COLUMNS, rows)
        return markdown

    def render_report(self, sections: List[str]) -> str:
        c = self.constants
        return f"{c.REPORT_TITLE}\n\n" + c.SECTION_RULE.join(
            section for section in sections if section
        )
