# extractors/extraction_config.py
"""
Configuration module for data extraction utilities.
"""

from typing import Dict, List, Tuple

from logger import EventKind


class ExtractionConfig:
    """
    Configuration class for data extraction settings.
    """

    # League listing
    LEAGUE_SELECTOR = 'span[onclick*="CheckLeague"]'
    LEAGUE_TEXT_PATTERN = r"^(.+?)\[(\d+)\]$"

    # Fixture listing
    FIXTURE_ROW_SELECTOR = 'tr[id^="tr1_"]'
    FIXTURE_CELL_TAG = "td"
    LINK_TAG = "a"
    MIN_FIXTURE_CELLS = 7
    FULL_FIXTURE_CELLS = 8

    # Three-slot rows shared by technical stats and timeline events
    DATA_SLOT_SELECTOR = ".data"
    SLOT_TAG = "span"
    MIN_SLOTS = 3
    HOME_SLOT_IDX = 0
    MIDDLE_SLOT_IDX = 1
    AWAY_SLOT_IDX = 2

    # Time stamps: 45', 90+3', 12 分钟
    TIME_LIKE_PATTERN = r"\d+\s*(?:\+\s*\d+\s*)?['’]|分钟"
    TIME_SLOT_PATTERN = r"['’]|\d"

    # Header block
    HEADER_SELECTOR = ".analyhead"
    HOME_BLOCK_SELECTOR = ".home"
    GUEST_BLOCK_SELECTOR = ".guest"
    VS_BLOCK_SELECTOR = ".vs"
    LEAGUE_NAME_SELECTOR = ".LName"
    MATCH_TIME_SELECTOR = ".time"
    VENUE_SELECTOR = ".place"
    SCORE_SELECTOR = ".score"
    CURRENT_TIME_SELECTOR = "#mState"
    LABEL_TAG = "label"
    WEATHER_PREFIXES: Tuple[str, ...] = ("天气：", "天气:", "weather:")
    TEMPERATURE_PREFIXES: Tuple[str, ...] = ("温度：", "温度:", "temperature:")

    # Events-section team title (fallback for the header block)
    TEAM_TITLE_SELECTOR = ".teamtit .data"
    HOME_TITLE_SELECTOR = ".homeTN"
    GUEST_TITLE_SELECTOR = ".guestTN"
    TITLE_SCORE_TAG = "i"

    # Event markers
    MARKER_TAG = "img"
    SRC_ATTR = "src"
    TITLE_ATTR = "title"
    ALT_ATTR = "alt"

    MARKER_IMAGE_PATHS: Dict[str, EventKind] = {
        "bf_img2/1.png": EventKind.GOAL,
        "bf_img2/2.png": EventKind.RED_CARD,
        "bf_img2/3.png": EventKind.YELLOW_CARD,
        "bf_img2/11.png": EventKind.SUBSTITUTION,
    }

    # Keys are compared lower-cased
    MARKER_TITLES: Dict[str, EventKind] = {
        "入球": EventKind.GOAL,
        "进球": EventKind.GOAL,
        "goal": EventKind.GOAL,
        "入球(var)": EventKind.GOAL_VAR,
        "进球(var)": EventKind.GOAL_VAR,
        "点球": EventKind.PENALTY,
        "點球": EventKind.PENALTY,
        "penalty": EventKind.PENALTY,
        "点球(var)": EventKind.PENALTY_VAR,
        "黄牌": EventKind.YELLOW_CARD,
        "黃牌": EventKind.YELLOW_CARD,
        "yellow card": EventKind.YELLOW_CARD,
        "红牌": EventKind.RED_CARD,
        "紅牌": EventKind.RED_CARD,
        "两黄变红": EventKind.RED_CARD,
        "red card": EventKind.RED_CARD,
        "换人": EventKind.SUBSTITUTION,
        "換人": EventKind.SUBSTITUTION,
        "substitution": EventKind.SUBSTITUTION,
        "var": EventKind.VAR_REVIEW,
        "视频助理裁判": EventKind.VAR_REVIEW,
        "受伤": EventKind.INJURY_MINOR,
        "伤停": EventKind.INJURY_MINOR,
        "injury": EventKind.INJURY_MINOR,
        "重伤": EventKind.INJURY_SERIOUS,
        "担架": EventKind.INJURY_SERIOUS,
        "serious injury": EventKind.INJURY_SERIOUS,
        "补水": EventKind.COOLING_BREAK,
        "补水暂停": EventKind.COOLING_BREAK,
        "饮水暂停": EventKind.COOLING_BREAK,
        "cooling break": EventKind.COOLING_BREAK,
        "拖延时间": EventKind.TIME_WASTING,
        "time wasting": EventKind.TIME_WASTING,
    }

    # Markers that upgrade a scoring kind when they appear in the same cell
    VAR_UPGRADES: Dict[EventKind, EventKind] = {
        EventKind.GOAL: EventKind.GOAL_VAR,
        EventKind.PENALTY: EventKind.PENALTY_VAR,
    }

    # First listed wins when a cell carries several markers
    MARKER_PRIORITY: List[EventKind] = [
        EventKind.GOAL_VAR,
        EventKind.PENALTY_VAR,
        EventKind.PENALTY,
        EventKind.GOAL,
        EventKind.RED_CARD,
        EventKind.YELLOW_CARD,
        EventKind.SUBSTITUTION,
        EventKind.INJURY_SERIOUS,
        EventKind.INJURY_MINOR,
        EventKind.VAR_REVIEW,
        EventKind.COOLING_BREAK,
        EventKind.TIME_WASTING,
        EventKind.OTHER,
    ]

    ASSIST_TOKENS: Tuple[str, ...] = ("助攻:", "助攻：")
    ASSIST_STRIP_CHARS: Tuple[str, ...] = ("(", ")", "（", "）")

    EMPTY_VALUE = "-"

    # Error Messages
    ERROR_MESSAGES: Dict[str, str] = {
        "fixture_extraction": "Failed to extract fixture row: {}",
        "stat_extraction": "Failed to extract stat row: {}",
        "event_extraction": "Failed to extract event row: {}",
        "invalid_cell": "Invalid cell structure provided",
    }
