# configurations/settings_extraction.py
"""
Extraction engine configuration: batching, stoppage-time weights and caching.
"""

from dataclasses import dataclass, field
from typing import Dict

from exceptions import ConfigurationError


@dataclass
class BatchConfig:
    """
    Batch runner sizing policy
    """

    default_batch_size: int = 100
    large_batch_size: int = 50
    large_input_threshold: int = 1000

    def select_batch_size(self, total: int) -> int:
        """
        Pick the slice size for a run of `total` items.
        Very large inputs get smaller slices so progress is reported more often.
        """
        if total > self.large_input_threshold:
            return self.large_batch_size
        return self.default_batch_size

    @classmethod
    def testing(cls) -> "BatchConfig":
        return cls(default_batch_size=10, large_batch_size=5, large_input_threshold=50)


@dataclass
class StoppageConfig:
    """
    Stoppage-time heuristic settings (everything in seconds unless noted)
    """

    base_minutes: int = 1
    bump_threshold_seconds: int = 45

    goal_seconds: int = 75
    goal_var_extra_seconds: int = 90
    penalty_seconds: int = 120
    penalty_var_extra_seconds: int = 90
    substitution_seconds: int = 35
    minor_injury_seconds: int = 90
    serious_injury_seconds: int = 240
    var_review_seconds: int = 120
    red_card_seconds: int = 90
    cooling_break_seconds: int = 180
    time_wasting_seconds: int = 45

    def weights(self) -> Dict[str, int]:
        """
        Seconds added per tally, keyed by aggregate category
        """
        return {
            "goals": self.goal_seconds,
            "goals_var": self.goal_seconds + self.goal_var_extra_seconds,
            "penalties": self.penalty_seconds,
            "penalties_var": self.penalty_seconds + self.penalty_var_extra_seconds,
            "substitutions": self.substitution_seconds,
            "minor_injuries": self.minor_injury_seconds,
            "serious_injuries": self.serious_injury_seconds,
            "var_reviews": self.var_review_seconds,
            "red_cards": self.red_card_seconds,
            "cooling_breaks": self.cooling_break_seconds,
            "time_wasting": self.time_wasting_seconds,
        }


@dataclass
class CacheConfig:
    """
    Parse cache settings
    """

    enabled: bool = True


@dataclass
class ParserSettings:
    """
    Combined configuration for the extraction engine.
    """

    batch: BatchConfig = field(default_factory=BatchConfig)
    stoppage: StoppageConfig = field(default_factory=StoppageConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)

    # Parser backend handed to BeautifulSoup
    parser_features: str = "html.parser"

    # Logging settings
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_strategy: str = "session"

    # Environment tracking
    _environment: str = "development"

    def validate(self) -> bool:
        """
        Validate configuration settings
        """
        if self.batch.default_batch_size <= 0 or self.batch.large_batch_size <= 0:
            raise ConfigurationError("batch sizes must be greater than 0")

        if self.batch.large_input_threshold < 0:
            raise ConfigurationError("large_input_threshold cannot be negative")

        if self.stoppage.base_minutes < 0:
            raise ConfigurationError("base_minutes cannot be negative")

        if self.stoppage.bump_threshold_seconds < 0:
            raise ConfigurationError("bump_threshold_seconds cannot be negative")

        negative = [
            name for name, seconds in self.stoppage.weights().items() if seconds < 0
        ]
        if negative:
            raise ConfigurationError(
                f"stoppage weights cannot be negative: {', '.join(negative)}"
            )

        if self.log_strategy not in ("daily", "size", "session"):
            raise ConfigurationError(f"Unknown log strategy: {self.log_strategy}")

        return True

    def get_summary(self) -> dict:
        """
        Get a summary of the current configuration
        """
        return {
            "environment": self._environment,
            "parser": self.parser_features,
            "batch": {
                "default_batch_size": self.batch.default_batch_size,
                "large_batch_size": self.batch.large_batch_size,
                "large_input_threshold": self.batch.large_input_threshold,
            },
            "stoppage": {
                "base_minutes": self.stoppage.base_minutes,
                "bump_threshold_seconds": self.stoppage.bump_threshold_seconds,
            },
            "cache": {"enabled": self.cache.enabled},
            "logging": {
                "level": self.log_level,
                "directory": self.log_dir,
                "strategy": self.log_strategy,
            },
        }
