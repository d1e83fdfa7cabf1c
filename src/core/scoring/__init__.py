"""Impact scoring - per-minute player vs team impact for a finished match.

Pipeline (pure domain logic, zero I/O):
1. Minute-state projection: cumulative K/D/A per participant at a minute
2. Accumulation: time-weighted solo and team scores over minute deltas
3. Sampling: cumulative scores at checkpoint minutes plus a summary point
4. Categorization: outcome x (your impact > team impact) verdict
"""

from src.core.scoring.accumulator import ImpactAccumulator, kill_value
from src.core.scoring.categorizer import categorize
from src.core.scoring.chart_sampler import (
    CHECKPOINT_MINUTES,
    SUMMARY_MINUTE,
    sample_chart_data,
    split_summary_point,
)
from src.core.scoring.minute_state import MinuteState, Side, project_minute_state

__all__ = [
    "CHECKPOINT_MINUTES",
    "SUMMARY_MINUTE",
    "ImpactAccumulator",
    "MinuteState",
    "Side",
    "categorize",
    "kill_value",
    "project_minute_state",
    "sample_chart_data",
    "split_summary_point",
]
