"""Impact score accumulation over successive game minutes.

Pure domain logic (zero I/O). Each minute contributes:
- solo score: the reference player's kill/death/assist deltas weighted by
  the minute's point values
- team score: the ally team's net kill differential weighted by kill value

Kill value decays in steps as the game goes on, so early kills count more.
"""

import logging
from dataclasses import dataclass

from src.contracts.match import MatchInfo, Participant
from src.contracts.timeline import MatchTimeline
from src.core.scoring.minute_state import (
    MinuteState,
    Side,
    empty_minute_state,
    project_minute_state,
)

logger = logging.getLogger(__name__)

# (last minute of the step, kill value)
KILL_VALUE_STEPS: tuple[tuple[int, float], ...] = (
    (1, 25.0),
    (5, 20.0),
    (10, 17.5),
    (14, 15.0),
    (20, 10.0),
    (30, 5.0),
)
LATE_GAME_KILL_VALUE = 2.5

# Four teammates besides the reference player. Fixed, not derived from roster size.
TEAMMATE_DIVISOR = 4


def kill_value(minute: int) -> float:
    """Points for a kill scored during `minute`."""
    for last_minute, value in KILL_VALUE_STEPS:
        if minute <= last_minute:
            return value
    return LATE_GAME_KILL_VALUE


@dataclass(frozen=True)
class PointValues:
    kill: float
    death: float
    assist: float

    @classmethod
    def for_minute(cls, minute: int) -> "PointValues":
        value = kill_value(minute)
        return cls(kill=value, death=-value, assist=value / 2)


@dataclass(frozen=True)
class MinuteDelta:
    """What changed between two consecutive minute states."""

    kills: int
    deaths: int
    assists: int
    ally_kills: int
    enemy_kills: int


def minute_delta(current: MinuteState, previous: MinuteState, participant_id: int) -> MinuteDelta:
    now = current.tally(participant_id)
    before = previous.tally(participant_id)
    return MinuteDelta(
        kills=now.kills - before.kills,
        deaths=now.deaths - before.deaths,
        assists=now.assists - before.assists,
        ally_kills=current.side_kills(Side.ALLY) - previous.side_kills(Side.ALLY),
        enemy_kills=current.side_kills(Side.ENEMY) - previous.side_kills(Side.ENEMY),
    )


def game_duration_minutes(game_duration_seconds: int) -> int:
    return game_duration_seconds // 60


class ImpactAccumulator:
    """Running solo and team scores for one reference player in one match.

    Drive it with `advance()` once per minute in ascending order, starting
    at minute 1. It keeps the previous minute's state so each step only
    needs one fresh projection.
    """

    def __init__(self, info: MatchInfo, timeline: MatchTimeline, reference: Participant) -> None:
        self.info = info
        self.timeline = timeline
        self.reference = reference
        self.solo_score = 0.0
        self.team_score_sum = 0.0
        self.minutes_processed = 0
        self._previous = empty_minute_state(info.participants, reference.team_id)

    @property
    def team_impact(self) -> float:
        """Team-average score as reported (team sum over the fixed divisor)."""
        return self.team_score_sum / TEAMMATE_DIVISOR

    @property
    def last_minute(self) -> int:
        """Last minute to score: bounded by game duration and frame availability."""
        duration = game_duration_minutes(self.info.game_duration)
        return max(0, min(duration, self.timeline.frame_count - 1))

    def playable_minutes(self) -> range:
        return range(1, self.last_minute + 1)

    def advance(self, minute: int) -> MinuteDelta:
        """Fold `minute` into the running totals and return its delta."""
        current = project_minute_state(
            self.timeline, minute, self.info.participants, self.reference.team_id
        )
        delta = minute_delta(current, self._previous, self.reference.participant_id)
        values = PointValues.for_minute(minute)

        self.solo_score += (
            delta.kills * values.kill + delta.deaths * values.death + delta.assists * values.assist
        )
        self.team_score_sum += (delta.ally_kills - delta.enemy_kills) * values.kill

        self._previous = current
        self.minutes_processed += 1

        if delta.kills or delta.deaths or delta.assists:
            logger.debug(
                "minute %d: player %d/%d/%d, net team kills %d, solo=%.2f team=%.2f",
                minute,
                delta.kills,
                delta.deaths,
                delta.assists,
                delta.ally_kills - delta.enemy_kills,
                self.solo_score,
                self.team_impact,
            )
        return delta
