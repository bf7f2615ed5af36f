"""Unit tests for the document-level parsers and the DataFrame facade."""
import pytest

from caching import ParseCache
from exceptions import CategoryNotFoundError
from extractors.parsers import (
    FixtureTableParser,
    HTMLParser,
    LeagueListParser,
    MatchDetailParser,
)
from logger import LeagueRecord


class TestLeagueListParser:
    def test_deduplicated_and_sorted(self, league_html):
        leagues = LeagueListParser().parse_leagues(league_html)
        assert leagues == [
            LeagueRecord("La Liga", 8),
            LeagueRecord("Premier League", 10),
        ]

    def test_no_leagues(self):
        with pytest.raises(CategoryNotFoundError):
            LeagueListParser().parse_leagues("<div></div>")


class TestFixtureTableParser:
    def test_every_valid_row_without_filter(self, fixture_html):
        outcome = FixtureTableParser().parse_fixtures(fixture_html)
        assert [f.home_team for f in outcome.fixtures] == ["Arsenal", "Real Madrid", "Leeds"]
        assert outcome.total_rows == 4
        assert outcome.error is None
        assert not outcome.filtered

    def test_filter_string(self, fixture_html):
        outcome = FixtureTableParser().parse_fixtures(fixture_html, "Premier League\n")
        assert [f.league for f in outcome.fixtures] == ["Premier League", "Premier League 2"]
        assert outcome.filter_terms == ["Premier League"]

    def test_progress_callback(self, fixture_html):
        progress = []
        FixtureTableParser().parse_fixtures(
            fixture_html, batch_size=2, on_progress=lambda d, t: progress.append((d, t))
        )
        assert progress == [(2, 4), (4, 4)]

    def test_no_rows(self):
        with pytest.raises(CategoryNotFoundError):
            FixtureTableParser().parse_fixtures("<table></table>")


class TestMatchDetailParser:
    def test_stats(self, match_html):
        stats = MatchDetailParser().parse_stats(match_html)
        assert [(s.name, s.home_value, s.away_value) for s in stats] == [
            ("射门", "12", "8"),
            ("控球率", "60%", "40%"),
        ]

    def test_events_skip_rows_without_time(self, match_html):
        events = MatchDetailParser().parse_events(match_html)
        assert [e.time for e in events] == ["12'", "30'", "60'"]
        assert events[0].home_event == "⚽进球 PlayerA (助攻: PlayerC)"
        assert events[1].away_event == "李四 🟨黄牌"
        assert events[2].home_event == "🔄换人 ↑Saka ↓Martinelli"

    def test_generic_container(self, generic_html):
        parser = MatchDetailParser()
        assert [s.name for s in parser.parse_stats(generic_html)] == ["射门", "控球率"]
        assert [e.time for e in parser.parse_events(generic_html)] == ["23'", "90+2'"]

    def test_missing_sections(self):
        parser = MatchDetailParser()
        with pytest.raises(CategoryNotFoundError):
            parser.parse_stats("<div></div>")
        with pytest.raises(CategoryNotFoundError):
            parser.parse_events("<div></div>")

    def test_header_team_title_fallback(self, events_fragment_html):
        parser = MatchDetailParser()
        assert not parser.parse_header(events_fragment_html).has_teams
        header = parser.parse_header(events_fragment_html, use_team_title=True)
        assert (header.home_team, header.away_team) == ("Leeds", "Hull")

    def test_cached_results_are_reused(self, match_html):
        cache = ParseCache()
        parser = MatchDetailParser(cache)
        first = parser.parse_events(match_html)
        second = parser.parse_events(match_html)
        assert first == second
        assert cache.hits >= 1


class TestHTMLParser:
    def test_league_table(self, league_html):
        frame = HTMLParser().parse_league_table(league_html)
        assert list(frame.columns) == ["name", "match_count"]
        assert frame["name"].tolist() == ["La Liga", "Premier League"]

    def test_fixture_table(self, fixture_html):
        frame = HTMLParser().parse_fixture_table(fixture_html, ["La Liga"])
        assert len(frame) == 1
        assert frame.iloc[0]["away_team"] == "Barcelona"

    def test_event_table(self, match_html):
        frame = HTMLParser().parse_event_table(match_html)
        assert list(frame.columns) == ["time", "home_event", "away_event"]
        assert len(frame) == 3

    def test_missing_category_gives_empty_frame(self):
        frame = HTMLParser().parse_stats_table("<div></div>")
        assert frame.empty
        assert list(frame.columns) == ["name", "home_value", "away_value"]


class TestParserConfig:
    def test_fallback_chains_are_most_specific_first(self):
        from extractors.parsers import ParserConfig

        config = ParserConfig.get_all_config()
        assert config["stats_selectors"] == [
            "#teamTechDiv .lists",
            ".teamTechDiv .lists",
            ".lists",
        ]
        assert config["event_selectors"][0] == "#teamEventDiv .lists"
        assert config["header_selectors"] == [".analyhead"]
