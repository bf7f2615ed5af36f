# predictors/stoppage_time.py
"""
Added-time heuristic.

Every tallied event adds a fixed number of seconds; the sum is turned into
minutes by floor division, plus one minute when the leftover seconds exceed
the bump threshold. The prediction is base minutes plus that, never below 0.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, Optional

from configurations import StoppageConfig
from logger import ClassifiedEvent, EventRecord

logger = logging.getLogger(__name__)


@dataclass
class EventStatsAggregate:
    """
    Per-category event counts for one timeline extraction pass
    """

    goals: int = 0
    goals_var: int = 0
    penalties: int = 0
    penalties_var: int = 0
    substitutions: int = 0
    minor_injuries: int = 0
    serious_injuries: int = 0
    var_reviews: int = 0
    red_cards: int = 0
    cooling_breaks: int = 0
    time_wasting: int = 0
    extra_seconds: int = 0

    def increment(self, category: str, count: int = 1) -> None:
        if category == "extra_seconds" or not hasattr(self, category):
            raise KeyError(f"Unknown tally category: {category}")
        setattr(self, category, getattr(self, category) + count)

    def add_event(self, event: Optional[ClassifiedEvent]) -> None:
        if event is None or event.tally_category is None:
            return
        self.increment(event.tally_category)

    def add_record(self, record: EventRecord) -> None:
        self.add_event(record.home_detail)
        self.add_event(record.away_detail)

    @classmethod
    def from_records(cls, records: Iterable[EventRecord]) -> "EventStatsAggregate":
        aggregate = cls()
        for record in records:
            aggregate.add_record(record)
        return aggregate

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    def counts(self) -> Dict[str, int]:
        """
        Event tallies only, without the free-form extra seconds
        """
        values = self.as_dict()
        values.pop("extra_seconds")
        return values

    @property
    def total_events(self) -> int:
        return sum(self.counts().values())


class StoppageTimePredictor:
    """
    Pure function of an EventStatsAggregate and a base number of minutes.
    """

    def __init__(self, config: Optional[StoppageConfig] = None):
        self.config = config or StoppageConfig()

    def event_seconds(self, aggregate: EventStatsAggregate) -> int:
        """
        Weighted seconds from tallies plus extra seconds clamped to zero
        """
        weights = self.config.weights()
        seconds = sum(
            weights[category] * max(0, count)
            for category, count in aggregate.counts().items()
        )
        return seconds + max(0, aggregate.extra_seconds)

    def seconds_to_minutes(self, seconds: int) -> int:
        minutes, remainder = divmod(max(0, seconds), 60)
        if remainder > self.config.bump_threshold_seconds:
            minutes += 1
        return minutes

    def predict(
        self, aggregate: EventStatsAggregate, base_minutes: Optional[int] = None
    ) -> int:
        """
        Args:
            aggregate: Event tallies
            base_minutes: Overrides the configured base when given

        Returns:
            Predicted added minutes, at least 0
        """
        base = self.config.base_minutes if base_minutes is None else base_minutes
        seconds = self.event_seconds(aggregate)
        prediction = max(0, base + self.seconds_to_minutes(seconds))
        logger.debug(
            f"Stoppage prediction: base={base} seconds={seconds} -> {prediction}"
        )
        return prediction


def predict_stoppage_minutes(
    aggregate: EventStatsAggregate, base_minutes: int = 1
) -> int:
    return StoppageTimePredictor().predict(aggregate, base_minutes=base_minutes)
