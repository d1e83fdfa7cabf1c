"""
Impact analysis output contracts.

These are the records handed back to callers: the per-match summary with
its impact chart, and the categorical verdict derived from it. Serialize
with `model_dump(by_alias=True)` to get the camelCase shape the dashboard
consumes.
"""

from enum import Enum

from pydantic import Field

from .common import BaseContract


class GameResult(str, Enum):
    """Outcome of a match from the reference player's side."""

    VICTORY = "Victory"
    DEFEAT = "Defeat"


class ImpactCategory(str, Enum):
    """Did the reference player's performance deserve the outcome?"""

    IMPACT_WINS = "impactWins"  # won and out-performed the team
    IMPACT_LOSSES = "impactLosses"  # lost and under-performed
    GUARANTEED_WINS = "guaranteedWins"  # won regardless
    GUARANTEED_LOSSES = "guaranteedLosses"  # lost regardless


class ChartPoint(BaseContract):
    """Cumulative impact at one sampled minute.

    `minute` is -1 for the summary point (mean of all recorded points) and
    35 for the final point of a match that ran past 30 minutes.
    """

    minute: int
    your_impact: float
    team_impact: float


class MatchSummary(BaseContract):
    """Per-(match, player) result record."""

    match_id: str = Field(..., alias="id")
    summoner_name: str
    champion: str
    rank: str = Field("", description="Rank display text (placeholder until ranks are wired)")
    kda: str = Field(..., description='"K/D/A"')
    cs: int = Field(0, ge=0, description="Creep score from the last timeline frame")
    vision_score: int = Field(0, ge=0)
    game_result: GameResult
    game_time: str = Field(..., description="MM:SS")
    data: list[ChartPoint] = Field(default_factory=list, description="Chart points, summary removed")
    your_impact: float = Field(0.0, description="Mean of recorded yourImpact values")
    team_impact: float = Field(0.0, description="Mean of recorded teamImpact values")


class PerformanceAnalysisResult(BaseContract):
    """Envelope returned by the single-match analysis flow."""

    success: bool
    match_summary: MatchSummary | None = None
    category: ImpactCategory | None = None
    error: str | None = None
