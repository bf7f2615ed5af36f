"""Unit tests for the row-level extractors."""
from bs4 import BeautifulSoup

from extractors import (
    FixtureRowExtractor,
    LeagueEntryExtractor,
    MatchHeaderExtractor,
    StatRowExtractor,
    matches_league_filter,
    normalize_filter_terms,
)
from logger import FixtureRecord, LeagueRecord, MatchHeader, StatItem


def _first(markup, selector):
    return BeautifulSoup(markup, "html.parser").select_one(selector)


class TestLeagueEntryExtractor:
    def test_name_and_count(self):
        node = _first('<span onclick="CheckLeague(1)">英超[10]</span>', "span")
        assert LeagueEntryExtractor().extract_league(node) == LeagueRecord("英超", 10)

    def test_text_without_count_is_skipped(self):
        node = _first('<span onclick="CheckLeague(1)">英超</span>', "span")
        assert LeagueEntryExtractor().extract_league(node) is None


class TestFixtureRowExtractor:
    def test_full_layout_prefers_link_text(self, fixture_html):
        row = _first(fixture_html, "#tr1_1")
        assert FixtureRowExtractor().extract_fixture(row) == FixtureRecord(
            time="20:00",
            league="Premier League",
            status="完",
            home_team="Arsenal",
            score="2-1",
            away_team="Chelsea",
            half_time="1-0",
        )

    def test_empty_cells_default_to_dash(self, fixture_html):
        record = FixtureRowExtractor().extract_fixture(_first(fixture_html, "#tr1_2"))
        assert record.score == "-"
        assert record.half_time == "-"
        assert record.home_team == "Real Madrid"

    def test_seven_cell_layout(self, fixture_html):
        record = FixtureRowExtractor().extract_fixture(_first(fixture_html, "#tr1_3"))
        assert record.league == "Premier League 2"
        assert record.time == "22:00"
        assert record.away_team == "Hull"
        assert record.half_time == "0-0"

    def test_short_row_is_skipped(self, fixture_html):
        assert FixtureRowExtractor().extract_fixture(_first(fixture_html, "#tr1_4")) is None


class TestLeagueFilter:
    def test_newline_separated_terms(self):
        assert normalize_filter_terms("英超\n  西甲 \n\n") == ["英超", "西甲"]

    def test_list_terms(self):
        assert normalize_filter_terms([" 英超 ", "", "  "]) == ["英超"]

    def test_no_terms(self):
        assert normalize_filter_terms(None) == []
        assert matches_league_filter("Anything", [])

    def test_exact_substring_and_superset(self):
        assert matches_league_filter("Premier League", ["Premier League"])
        assert matches_league_filter("Premier League 2", ["Premier League"])
        assert matches_league_filter("Premier League", ["Premier League Cup"])

    def test_case_sensitive(self):
        assert not matches_league_filter("premier league", ["Premier League"])
        assert not matches_league_filter("Serie A", ["Premier"])

    def test_placeholder_league_is_not_inside_hyphenated_terms(self):
        assert not matches_league_filter("-", ["U-21"])
        assert matches_league_filter("U-21 League", ["U-21"])


class TestMatchHeaderExtractor:
    def test_full_header(self, match_html):
        header = MatchHeaderExtractor().extract_header(_first(match_html, ".analyhead"))
        assert header == MatchHeader(
            home_team="Arsenal",
            away_team="Chelsea",
            home_score="2",
            away_score="1",
            league="Premier League",
            match_time="2024-05-01 20:00",
            venue="Emirates",
            current_time="90'",
            weather="晴",
            temperature="18℃",
        )

    def test_english_prefixes(self):
        block = _first(
            '<div class="analyhead"><div class="vs">'
            "<label>Weather: Rain</label><label>Temperature: 9°C</label>"
            "</div></div>",
            ".analyhead",
        )
        header = MatchHeaderExtractor().extract_header(block)
        assert header.weather == "Rain"
        assert header.temperature == "9°C"
        assert header.home_score == "0"
        assert not header.has_teams

    def test_missing_block(self):
        assert MatchHeaderExtractor().extract_header(None) == MatchHeader()

    def test_team_title_fallback_leaves_document_intact(self, events_fragment_html):
        title = _first(events_fragment_html, ".teamtit .data")
        header = MatchHeaderExtractor().extract_team_title(title)

        assert (header.home_team, header.home_score) == ("Leeds", "2")
        assert (header.away_team, header.away_score) == ("Hull", "1")
        assert title.select_one(".homeTN i").get_text() == "2"


class TestStatRowExtractor:
    def test_three_slots(self, match_html):
        node = _first(match_html, "#teamTechDiv .lists")
        assert StatRowExtractor().extract_stat(node) == StatItem("射门", "12", "8")

    def test_time_like_name_is_rejected(self):
        node = _first(
            '<div class="lists"><div class="data">'
            "<span>a</span><span>45'</span><span>b</span></div></div>",
            ".lists",
        )
        assert StatRowExtractor().extract_stat(node) is None

    def test_minutes_word_is_rejected(self):
        node = _first(
            '<div class="lists"><div class="data">'
            "<span>a</span><span>第12分钟</span><span>b</span></div></div>",
            ".lists",
        )
        assert StatRowExtractor().extract_stat(node) is None
