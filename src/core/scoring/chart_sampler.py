"""Chart data sampling - cumulative impact at fixed checkpoint minutes.

Output order follows computation order, not numeric minute order:
checkpoints ascending, then the final point, then the summary point.
"""

import numpy as np

from src.contracts.impact import ChartPoint
from src.contracts.match import MatchInfo, Participant
from src.contracts.timeline import MatchTimeline
from src.core.scoring.accumulator import ImpactAccumulator, game_duration_minutes

CHECKPOINT_MINUTES = frozenset({1, 5, 10, 14, 20, 25, 30})
OVERTIME_THRESHOLD_MINUTES = 30
# Final point label for any match longer than 30 minutes
OVERTIME_MINUTE = 35
# Summary point (means of all recorded points); never displayed
SUMMARY_MINUTE = -1


def final_minute(duration_minutes: int) -> int:
    return OVERTIME_MINUTE if duration_minutes > OVERTIME_THRESHOLD_MINUTES else duration_minutes


def _mean(values: list[float]) -> float:
    return float(np.mean(values)) if values else 0.0


def sample_chart_data(
    info: MatchInfo, timeline: MatchTimeline, reference: Participant
) -> list[ChartPoint]:
    """Run the accumulator across the match and sample it.

    Returns checkpoint points, one final point holding the true final totals,
    and a trailing summary point at minute -1. When no minute can be scored
    (zero-length game or a timeline with a single frame) nothing is recorded
    and the summary point is 0/0.
    """
    accumulator = ImpactAccumulator(info, timeline, reference)
    points: list[ChartPoint] = []

    for minute in accumulator.playable_minutes():
        accumulator.advance(minute)
        if minute in CHECKPOINT_MINUTES:
            points.append(
                ChartPoint(
                    minute=minute,
                    your_impact=accumulator.solo_score,
                    team_impact=accumulator.team_impact,
                )
            )

    if accumulator.minutes_processed:
        points.append(
            ChartPoint(
                minute=final_minute(game_duration_minutes(info.game_duration)),
                your_impact=accumulator.solo_score,
                team_impact=accumulator.team_impact,
            )
        )

    points.append(
        ChartPoint(
            minute=SUMMARY_MINUTE,
            your_impact=_mean([p.your_impact for p in points]),
            team_impact=_mean([p.team_impact for p in points]),
        )
    )
    return points


def split_summary_point(points: list[ChartPoint]) -> tuple[list[ChartPoint], ChartPoint | None]:
    """Separate the minute -1 summary point from the displayable chart."""
    summary = next((p for p in points if p.minute == SUMMARY_MINUTE), None)
    chart = [p for p in points if p.minute != SUMMARY_MINUTE]
    return chart, summary
