"""Unit tests for timeline cell classification."""
import pytest
from bs4 import BeautifulSoup

from extractors import EventContentClassifier, EventRowExtractor
from logger import EventKind

GOAL = '<img src="/images/bf_img2/1.png"/>'
RED = '<img src="/images/bf_img2/2.png"/>'
YELLOW = '<img src="/images/bf_img2/3.png"/>'
SUB = '<img src="/images/bf_img2/11.png"/>'


@pytest.fixture
def classifier():
    return EventContentClassifier()


class TestEventContentClassifier:
    def test_goal_with_two_scorers_and_assist(self, classifier, make_cell):
        cell = make_cell(
            f"<span>{GOAL}<a>PlayerA</a><a>PlayerB</a><a>(助攻:PlayerC)</a></span>"
        )
        event = classifier.classify(cell)

        assert event.kind is EventKind.GOAL
        assert event.display == "⚽进球 PlayerA PlayerB (助攻: PlayerC)"
        assert event.participants == ("PlayerA", "PlayerB")
        assert event.assist == "PlayerC"
        assert event.tally_category == "goals"

    def test_substitution_in_and_out(self, classifier, make_cell):
        event = classifier.classify(make_cell(f"<span>{SUB}<a>Saka</a><a>Martinelli</a></span>"))
        assert event.display == "🔄换人 ↑Saka ↓Martinelli"

    def test_substitution_single_player(self, classifier, make_cell):
        event = classifier.classify(make_cell(f"<span>{SUB}<a>Saka</a></span>"))
        assert event.display == "🔄换人 Saka"

    def test_card_names_precede_label(self, classifier, make_cell):
        event = classifier.classify(make_cell(f"<span>{YELLOW}<a>张三</a></span>"))
        assert event.display == "张三 🟨黄牌"
        assert event.tally_category is None

    def test_plain_text_player_name(self, classifier, make_cell):
        event = classifier.classify(
            make_cell('<span><img src="bf_img2/3.png" title="黄牌"/>张三</span>')
        )
        assert event.display == "🟨黄牌 张三"
        assert event.participants == ("张三",)

    def test_marker_without_text(self, classifier, make_cell):
        assert classifier.classify(make_cell(f"<span>{RED}</span>")).display == "🟥红牌"

    def test_unrecognized_cell_falls_back_to_text(self, classifier, make_cell):
        event = classifier.classify(make_cell("<span>  Kick  off </span>"))
        assert event.kind is None
        assert event.display == "Kick off"

    def test_empty_cell(self, classifier, make_cell):
        assert classifier.classify(make_cell("<span></span>")).display == "-"
        assert classifier.classify(None).display == "-"

    def test_marker_title_lookup(self, classifier, make_cell):
        event = classifier.classify(make_cell('<span><img title="点球"/><a>Kane</a></span>'))
        assert event.kind is EventKind.PENALTY
        assert event.display == "⚽点球 Kane"

    def test_unknown_title_becomes_other(self, classifier, make_cell):
        event = classifier.classify(make_cell('<span><img title="Offside"/></span>'))
        assert event.kind is EventKind.OTHER
        assert event.display == "[Offside]"
        assert event.tally_category is None

    def test_priority_does_not_depend_on_marker_order(self, classifier, make_cell):
        first = classifier.classify(make_cell(f"<span>{YELLOW}{RED}<a>X</a></span>"))
        second = classifier.classify(make_cell(f"<span>{RED}{YELLOW}<a>X</a></span>"))
        assert first.kind is second.kind is EventKind.RED_CARD
        assert first.display == "X 🟥红牌"

    def test_var_marker_upgrades_goal(self, classifier, make_cell):
        event = classifier.classify(make_cell(f'<span>{GOAL}<img title="VAR"/><a>Kane</a></span>'))
        assert event.kind is EventKind.GOAL_VAR
        assert event.display == "⚽进球(VAR) Kane"
        assert event.tally_category == "goals_var"

    def test_var_alone_is_a_review(self, classifier, make_cell):
        event = classifier.classify(make_cell('<span><img title="VAR"/></span>'))
        assert event.kind is EventKind.VAR_REVIEW
        assert event.tally_category == "var_reviews"

    @pytest.mark.parametrize(
        "title, kind, display, tally",
        [
            ("受伤", EventKind.INJURY_MINOR, "🩹受伤 X", "minor_injuries"),
            ("重伤", EventKind.INJURY_SERIOUS, "🚑重伤 X", "serious_injuries"),
            ("补水", EventKind.COOLING_BREAK, "💧补水暂停 X", "cooling_breaks"),
            ("拖延时间", EventKind.TIME_WASTING, "⏱拖延时间 X", "time_wasting"),
            ("点球(VAR)", EventKind.PENALTY_VAR, "⚽点球(VAR) X", "penalties_var"),
            ("点球（VAR）", EventKind.PENALTY_VAR, "⚽点球(VAR) X", "penalties_var"),
            ("两黄变红", EventKind.RED_CARD, "X 🟥红牌", "red_cards"),
            ("Cooling Break", EventKind.COOLING_BREAK, "💧补水暂停 X", "cooling_breaks"),
        ],
    )
    def test_title_table(self, classifier, make_cell, title, kind, display, tally):
        event = classifier.classify(make_cell(f'<span><img title="{title}"/><a>X</a></span>'))
        assert event.kind is kind
        assert event.display == display
        assert event.tally_category == tally

    def test_var_marker_upgrades_penalty(self, classifier, make_cell):
        event = classifier.classify(
            make_cell('<span><img title="点球"/><img title="VAR"/><a>Kane</a></span>')
        )
        assert event.kind is EventKind.PENALTY_VAR

    def test_pure_function(self, classifier, make_cell):
        markup = f"<span>{GOAL}<a>PlayerA</a></span>"
        assert classifier.classify(make_cell(markup)) == classifier.classify(make_cell(markup))


class TestEventRowExtractor:
    def test_row_with_time(self):
        node = BeautifulSoup(
            '<div class="lists"><div class="data">'
            f"<span>{GOAL}<a>PlayerA</a></span><span>23'</span><span></span>"
            "</div></div>",
            "html.parser",
        ).find("div")
        record = EventRowExtractor().extract_event(node)

        assert record.time == "23'"
        assert record.home_event == "⚽进球 PlayerA"
        assert record.away_event == "-"
        assert record.home_detail.kind is EventKind.GOAL

    def test_row_without_time_is_skipped(self):
        node = BeautifulSoup(
            '<div class="lists"><div class="data">'
            "<span>a</span><span>  </span><span>b</span></div></div>",
            "html.parser",
        ).find("div")
        assert EventRowExtractor().extract_event(node) is None
