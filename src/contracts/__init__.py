"""Contract models for data validation."""

from .events import ChampionKillEvent, EventType, TimelineEvent
from .impact import (
    ChartPoint,
    GameResult,
    ImpactCategory,
    MatchSummary,
    PerformanceAnalysisResult,
)
from .match import Match, MatchInfo, Participant, Team
from .timeline import Frame, MatchTimeline, ParticipantFrame

__all__ = [
    "ChampionKillEvent",
    "EventType",
    "TimelineEvent",
    "ChartPoint",
    "GameResult",
    "ImpactCategory",
    "MatchSummary",
    "PerformanceAnalysisResult",
    "Match",
    "MatchInfo",
    "Participant",
    "Team",
    "Frame",
    "MatchTimeline",
    "ParticipantFrame",
]
