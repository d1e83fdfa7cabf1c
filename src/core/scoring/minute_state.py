"""Minute-state projection - cumulative K/D/A per participant at a game minute.

Pure domain function with zero I/O. Every call replays champion kills from
frame 1 up to the requested minute, so results never depend on call order.
Frame 0 (the game-start frame) is not replayed.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from src.contracts.match import Participant
from src.contracts.timeline import MatchTimeline


class Side(str, Enum):
    """Team membership relative to the reference player."""

    ALLY = "ally"
    ENEMY = "enemy"


@dataclass(frozen=True)
class ParticipantTally:
    """Cumulative kills/deaths/assists for one participant."""

    participant_id: int
    side: Side
    kills: int = 0
    deaths: int = 0
    assists: int = 0


@dataclass(frozen=True)
class MinuteState:
    """Snapshot of every roster participant's tally at `minute`."""

    minute: int
    tallies: Mapping[int, ParticipantTally] = field(default_factory=dict)

    def tally(self, participant_id: int) -> ParticipantTally:
        """Tally for a participant; all zeros if they are not on the roster."""
        found = self.tallies.get(participant_id)
        if found is None:
            return ParticipantTally(participant_id=participant_id, side=Side.ENEMY)
        return found

    def side_kills(self, side: Side) -> int:
        return sum(t.kills for t in self.tallies.values() if t.side == side)


def side_of(participant: Participant, reference_team_id: int) -> Side:
    return Side.ALLY if participant.team_id == reference_team_id else Side.ENEMY


def empty_minute_state(participants: Iterable[Participant], reference_team_id: int) -> MinuteState:
    """Minute 0: every roster participant at 0/0/0."""
    return MinuteState(
        minute=0,
        tallies={
            p.participant_id: ParticipantTally(p.participant_id, side_of(p, reference_team_id))
            for p in participants
        },
    )


def project_minute_state(
    timeline: MatchTimeline,
    minute: int,
    participants: Iterable[Participant],
    reference_team_id: int,
) -> MinuteState:
    """Replay champion kills in frames 1..min(minute, frame_count - 1).

    Killer, victim and assist ids that are not on the roster are ignored.

    Args:
        timeline: Validated match timeline
        minute: Target game minute (1-indexed)
        participants: Full match roster
        reference_team_id: Team id of the reference player (decides ally/enemy)

    Returns:
        MinuteState holding each roster participant's cumulative tally
    """
    roster = list(participants)
    kills = {p.participant_id: 0 for p in roster}
    deaths = dict(kills)
    assists = dict(kills)

    for frame in timeline.info.frames[1 : minute + 1]:
        for event in frame.champion_kills():
            if event.victim_id in deaths:
                deaths[event.victim_id] += 1
            if event.killer_id in kills:
                kills[event.killer_id] += 1
            for assist_id in event.assisting_participant_ids:
                if assist_id in assists:
                    assists[assist_id] += 1

    return MinuteState(
        minute=minute,
        tallies={
            p.participant_id: ParticipantTally(
                participant_id=p.participant_id,
                side=side_of(p, reference_team_id),
                kills=kills[p.participant_id],
                deaths=deaths[p.participant_id],
                assists=assists[p.participant_id],
            )
            for p in roster
        },
    )
