from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class EventKind(Enum):
    GOAL = "goal"
    GOAL_VAR = "goal_var"
    PENALTY = "penalty"
    PENALTY_VAR = "penalty_var"
    YELLOW_CARD = "yellow_card"
    RED_CARD = "red_card"
    SUBSTITUTION = "substitution"
    VAR_REVIEW = "var_review"
    INJURY_MINOR = "injury_minor"
    INJURY_SERIOUS = "injury_serious"
    COOLING_BREAK = "cooling_break"
    TIME_WASTING = "time_wasting"
    OTHER = "other"


class EventLabels:
    # Display labels per kind
    LABELS = {
        EventKind.GOAL: "⚽进球",
        EventKind.GOAL_VAR: "⚽进球(VAR)",
        EventKind.PENALTY: "⚽点球",
        EventKind.PENALTY_VAR: "⚽点球(VAR)",
        EventKind.YELLOW_CARD: "🟨黄牌",
        EventKind.RED_CARD: "🟥红牌",
        EventKind.SUBSTITUTION: "🔄换人",
        EventKind.VAR_REVIEW: "📺VAR",
        EventKind.INJURY_MINOR: "🩹受伤",
        EventKind.INJURY_SERIOUS: "🚑重伤",
        EventKind.COOLING_BREAK: "💧补水暂停",
        EventKind.TIME_WASTING: "⏱拖延时间",
    }

    # Tally category per kind; kinds absent here do not add stoppage time
    TALLY_CATEGORIES = {
        EventKind.GOAL: "goals",
        EventKind.GOAL_VAR: "goals_var",
        EventKind.PENALTY: "penalties",
        EventKind.PENALTY_VAR: "penalties_var",
        EventKind.SUBSTITUTION: "substitutions",
        EventKind.INJURY_MINOR: "minor_injuries",
        EventKind.INJURY_SERIOUS: "serious_injuries",
        EventKind.VAR_REVIEW: "var_reviews",
        EventKind.RED_CARD: "red_cards",
        EventKind.COOLING_BREAK: "cooling_breaks",
        EventKind.TIME_WASTING: "time_wasting",
    }

    GOAL_KINDS = (
        EventKind.GOAL,
        EventKind.GOAL_VAR,
        EventKind.PENALTY,
        EventKind.PENALTY_VAR,
    )
    CARD_KINDS = (EventKind.YELLOW_CARD, EventKind.RED_CARD)

    ASSIST_TEMPLATE = "(助攻: {})"
    SUB_TEMPLATE = "↑{} ↓{}"
    OTHER_TEMPLATE = "[{}]"
    EMPTY = "-"

    @classmethod
    def label_for(cls, kind: "EventKind", title: str = "") -> str:
        if kind is EventKind.OTHER:
            return cls.OTHER_TEMPLATE.format(title)
        return cls.LABELS[kind]


@dataclass(frozen=True)
class LeagueRecord:
    name: str
    match_count: Optional[int] = None


@dataclass(frozen=True)
class FixtureRecord:
    time: str = "-"
    league: str = "-"
    status: str = "-"
    home_team: str = "-"
    score: str = "-"
    away_team: str = "-"
    half_time: str = "-"

    def as_row(self) -> List[str]:
        return [
            self.time,
            self.league,
            self.status,
            self.home_team,
            self.score,
            self.away_team,
            self.half_time,
        ]


@dataclass(frozen=True)
class MatchHeader:
    home_team: str = ""
    away_team: str = ""
    home_score: str = "0"
    away_score: str = "0"
    league: Optional[str] = None
    match_time: Optional[str] = None
    venue: Optional[str] = None
    current_time: Optional[str] = None
    weather: Optional[str] = None
    temperature: Optional[str] = None

    @property
    def has_teams(self) -> bool:
        return bool(self.home_team and self.away_team)


@dataclass(frozen=True)
class StatItem:
    name: str
    home_value: str
    away_value: str


@dataclass(frozen=True)
class ClassifiedEvent:
    """
    One side of one timeline row after classification
    """

    kind: Optional[EventKind]
    display: str
    label: str = ""
    participants: Tuple[str, ...] = ()
    assist: Optional[str] = None

    @property
    def tally_category(self) -> Optional[str]:
        if self.kind is None:
            return None
        return EventLabels.TALLY_CATEGORIES.get(self.kind)


@dataclass(frozen=True)
class EventRecord:
    time: str
    home_event: str
    away_event: str
    home_detail: Optional[ClassifiedEvent] = field(default=None, compare=False)
    away_detail: Optional[ClassifiedEvent] = field(default=None, compare=False)


class ExtractionStatus(Enum):
    SUCCESS = "success"
    NO_DATA = "no_data"
    FAILED = "failed"


@dataclass(frozen=True)
class ExtractionResult:
    """
    Structured outcome of one extraction call
    """

    status: ExtractionStatus
    category: str
    markdown: str = ""
    records: Tuple[Any, ...] = ()
    message: str = ""
    total_candidates: int = 0
    stoppage_prediction: Optional[int] = None
    extras: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def success(self) -> bool:
        return self.status is ExtractionStatus.SUCCESS

    @classmethod
    def no_data(cls, category: str, message: str = "") -> "ExtractionResult":
        return cls(
            status=ExtractionStatus.NO_DATA,
            category=category,
            message=message or f"No {category} found",
        )

    @classmethod
    def failure(cls, category: str, message: str) -> "ExtractionResult":
        return cls(status=ExtractionStatus.FAILED, category=category, message=message)
