from .stoppage_time import (
    EventStatsAggregate,
    StoppageTimePredictor,
    predict_stoppage_minutes,
)

__all__ = ["EventStatsAggregate", "StoppageTimePredictor", "predict_stoppage_minutes"]
