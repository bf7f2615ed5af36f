"""Unit tests for the added-time heuristic."""
import pytest

from configurations import StoppageConfig
from predictors import EventStatsAggregate, StoppageTimePredictor, predict_stoppage_minutes

CATEGORIES = list(EventStatsAggregate().counts())


@pytest.fixture
def predictor():
    return StoppageTimePredictor()


class TestStoppageTimePredictor:
    def test_base_only(self, predictor):
        assert predictor.predict(EventStatsAggregate()) == 1

    def test_single_goal(self, predictor):
        # 75 seconds: one minute, 15 second remainder does not bump
        assert predictor.predict(EventStatsAggregate(goals=1), base_minutes=1) == 2

    def test_remainder_must_exceed_threshold(self, predictor):
        # 3 * 35 = 105 seconds: remainder 45 is not above 45
        assert predictor.predict(EventStatsAggregate(substitutions=3)) == 2
        # 75 + 35 = 110 seconds: remainder 50 bumps
        assert predictor.predict(EventStatsAggregate(goals=1, substitutions=1)) == 3

    def test_var_weights_stack_on_base_weight(self, predictor):
        assert predictor.event_seconds(EventStatsAggregate(goals_var=1)) == 165
        assert predictor.event_seconds(EventStatsAggregate(penalties_var=1)) == 210

    def test_extra_seconds_clamped_to_zero(self, predictor):
        assert predictor.event_seconds(EventStatsAggregate(extra_seconds=-500)) == 0
        assert predictor.predict(EventStatsAggregate(extra_seconds=-500)) == 1
        assert predictor.predict(EventStatsAggregate(extra_seconds=120)) == 3

    def test_never_negative(self, predictor):
        assert predictor.predict(EventStatsAggregate(), base_minutes=-5) == 0

    @pytest.mark.parametrize("category", CATEGORIES)
    def test_monotonic_in_every_category(self, predictor, category):
        aggregate = EventStatsAggregate()
        previous = predictor.predict(aggregate)
        for _ in range(12):
            aggregate.increment(category)
            current = predictor.predict(aggregate)
            assert current >= previous
            previous = current

    def test_custom_weights(self):
        predictor = StoppageTimePredictor(StoppageConfig(base_minutes=0, goal_seconds=120))
        assert predictor.predict(EventStatsAggregate(goals=1)) == 2

    def test_module_helper(self):
        assert predict_stoppage_minutes(EventStatsAggregate(goals=1)) == 2


class TestEventStatsAggregate:
    def test_unknown_category(self):
        with pytest.raises(KeyError):
            EventStatsAggregate().increment("offsides")

    def test_total_events_excludes_extra_seconds(self):
        aggregate = EventStatsAggregate(goals=2, red_cards=1, extra_seconds=30)
        assert aggregate.total_events == 3
        assert "extra_seconds" not in aggregate.counts()
