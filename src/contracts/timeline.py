"""
Match Timeline data contracts for Riot API Match-V5.
Frame i holds roughly the i-th minute of play.
"""

from typing import Any

from pydantic import Field, SerializeAsAny, field_validator

from .common import BaseContract
from .events import ChampionKillEvent, TimelineEvent, parse_event


class DamageStats(BaseContract):
    """Damage statistics at a specific frame."""

    total_damage_done_to_champions: int = Field(0)


class ParticipantFrame(BaseContract):
    """Participant state at a specific frame."""

    participant_id: int = Field(..., ge=1)
    minions_killed: int = Field(0)
    jungle_minions_killed: int = Field(0)
    level: int = Field(1, ge=1)
    total_gold: int = Field(0)
    damage_stats: DamageStats = Field(default_factory=DamageStats)

    @property
    def creep_score(self) -> int:
        return self.minions_killed + self.jungle_minions_killed


class Frame(BaseContract):
    """A single frame in the match timeline."""

    timestamp: int = Field(0, description="Frame timestamp in milliseconds")
    participant_frames: dict[str, ParticipantFrame] = Field(
        default_factory=dict, description="Participant states indexed by participant ID string"
    )
    events: list[SerializeAsAny[TimelineEvent]] = Field(
        default_factory=list, description="Events that occurred during this frame"
    )

    @field_validator("events", mode="before")
    @classmethod
    def type_events(cls, v: Any) -> Any:
        """Narrow raw event dicts to their typed models."""
        if isinstance(v, list):
            return [parse_event(event) for event in v]
        return v

    def champion_kills(self) -> list[ChampionKillEvent]:
        return [event for event in self.events if isinstance(event, ChampionKillEvent)]

    def participant_frame(self, participant_id: int) -> ParticipantFrame | None:
        return self.participant_frames.get(str(participant_id))


class TimelineInfo(BaseContract):
    """Timeline information containing frames."""

    frame_interval: int = Field(60000, description="Milliseconds between frames (usually 60000)")
    frames: list[Frame] = Field(default_factory=list, description="List of all frames in the match")


class TimelineMetadata(BaseContract):
    """Timeline metadata."""

    data_version: str = Field("", description="Data version")
    match_id: str = Field(..., description="Match ID")
    participants: list[str] = Field(default_factory=list, description="Participant PUUIDs")


class MatchTimeline(BaseContract):
    """Complete match timeline from Riot API Match-V5."""

    metadata: TimelineMetadata | None = None
    info: TimelineInfo

    @property
    def frame_count(self) -> int:
        return len(self.info.frames)

    @property
    def last_frame(self) -> Frame | None:
        return self.info.frames[-1] if self.info.frames else None
