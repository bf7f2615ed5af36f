# logger/constants.py
"""
Constants for rendering and logging operations
"""


class MarkdownConstants:
    """
    Fixed output vocabulary for the Markdown tables
    """

    # Titles
    LEAGUE_TITLE = "# 足球联赛列表"
    FIXTURE_TITLE = "# 比赛数据"
    REPORT_TITLE = "# 比赛数据报告"
    STATS_SECTION = "## 技术统计"
    EVENTS_SECTION = "## 详细事件"
    STOPPAGE_SECTION = "### 补时预测"
    FILTER_HEADER = "## 筛选联赛: {}"
    SECTION_RULE = "\n\n---\n\n"

    # Table headers
    LEAGUE_COLUMNS = ["联赛名称"]
    FIXTURE_COLUMNS = ["时间", "联赛", "状态", "主队", "比分", "客队", "半场"]
    STATS_COLUMNS = ["统计项目", "主队", "客队"]
    EVENT_COLUMNS = ["时间", "主队事件", "客队事件"]
    TALLY_COLUMNS = ["事件类型", "次数"]

    # Header block labels
    LEAGUE_LABEL = "联赛"
    TIME_LABEL = "时间"
    VENUE_LABEL = "场地"
    CURRENT_TIME_LABEL = "比赛进行"
    WEATHER_LABEL = "天气"
    TEMPERATURE_LABEL = "温度"
    INFO_SEPARATOR = " | "

    # Stoppage block
    PREDICTION_LINE = "**预计补时**: {} 分钟"
    BASE_LINE = "**基础补时**: {} 分钟 | **事件累计**: {} 秒"

    # Tally category display names
    TALLY_LABELS = {
        "goals": "进球",
        "goals_var": "进球(VAR)",
        "penalties": "点球",
        "penalties_var": "点球(VAR)",
        "substitutions": "换人",
        "minor_injuries": "轻伤",
        "serious_injuries": "重伤",
        "var_reviews": "VAR复核",
        "red_cards": "红牌/冲突",
        "cooling_breaks": "补水暂停",
        "time_wasting": "拖延时间",
        "extra_seconds": "额外秒数",
    }


class LoggingConstants:
    """
    Logging related constants
    """

    FILE_FORMAT = (
        "%(asctime)s | %(levelname)-8s | %(name)-20s | "
        "%(funcName)-15s:%(lineno)-4d | %(message)s"
    )
    FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
    CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-15s | %(message)s"
    CONSOLE_DATE_FORMAT = "%H:%M:%S"

    # File rotation
    DAILY_SUFFIX = "%Y-%m-%d"
    DAILY_BACKUPS = 30
    MAX_LOG_BYTES = 5 * 1024 * 1024
    SIZE_BACKUPS = 10
    SESSION_STAMP = "%Y-%m-%d_%H-%M-%S"

    # Module loggers are named after their package (logging.getLogger(__name__))
    PACKAGE_LOGGERS = (
        "caching",
        "coordination",
        "extractors",
        "pipelines",
        "predictors",
    )
