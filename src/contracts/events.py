"""
Timeline event models for Match-V5 API.
Only champion kills carry fields the impact pipeline reads; every other
event kind is kept as a bare TimelineEvent.
"""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from .common import BaseContract


class EventType(str, Enum):
    """Event types seen in Match Timeline frames."""

    PAUSE_END = "PAUSE_END"
    SKILL_LEVEL_UP = "SKILL_LEVEL_UP"
    ITEM_PURCHASED = "ITEM_PURCHASED"
    ITEM_SOLD = "ITEM_SOLD"
    ITEM_DESTROYED = "ITEM_DESTROYED"
    ITEM_UNDO = "ITEM_UNDO"
    TURRET_PLATE_DESTROYED = "TURRET_PLATE_DESTROYED"
    CHAMPION_KILL = "CHAMPION_KILL"
    CHAMPION_SPECIAL_KILL = "CHAMPION_SPECIAL_KILL"
    WARD_PLACED = "WARD_PLACED"
    WARD_KILL = "WARD_KILL"
    BUILDING_KILL = "BUILDING_KILL"
    ELITE_MONSTER_KILL = "ELITE_MONSTER_KILL"
    LEVEL_UP = "LEVEL_UP"
    GAME_END = "GAME_END"


class TimelineEvent(BaseContract):
    """Any timeline event. `type` stays a plain string so unknown kinds validate."""

    type: str = Field(..., description="Event kind, e.g. CHAMPION_KILL")
    timestamp: int = Field(0, description="Milliseconds since game start")

    @property
    def is_champion_kill(self) -> bool:
        return self.type == EventType.CHAMPION_KILL.value


class ChampionKillEvent(TimelineEvent):
    """Champion kill event."""

    killer_id: int = Field(0, description="0 for execute (tower, minion, monster)")
    victim_id: int = Field(0)
    assisting_participant_ids: list[int] = Field(default_factory=list)

    @field_validator("assisting_participant_ids", mode="before")
    @classmethod
    def _missing_assists(cls, v: Any) -> Any:
        # Riot omits the key (or sends null) for unassisted kills
        return [] if v is None else v


def parse_event(raw: dict[str, Any] | TimelineEvent) -> TimelineEvent:
    """Validate a raw event dict into the narrowest known model."""
    if isinstance(raw, TimelineEvent):
        return raw
    if raw.get("type") == EventType.CHAMPION_KILL.value:
        return ChampionKillEvent.model_validate(raw)
    return TimelineEvent.model_validate(raw)
