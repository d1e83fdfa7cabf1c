"""Pytest configuration and fixtures for impact scorer tests.

Fixtures build raw Match-V5 payloads (camelCase dicts) the way the Riot API
returns them, so tests exercise contract validation as well as scoring.

Roster used throughout: participants 1-5 on team 100, 6-10 on team 200.
The reference player is participant 1 ("puuid-1").
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

import pytest

REFERENCE_PUUID = "puuid-1"
BLUE_TEAM = 100
RED_TEAM = 200
POSITIONS = ["TOP", "JUNGLE", "MIDDLE", "BOTTOM", "UTILITY"]


def kill_event(
    killer: int, victim: int, assists: Iterable[int] | None = (), timestamp: int = 0
) -> dict[str, Any]:
    event: dict[str, Any] = {
        "type": "CHAMPION_KILL",
        "timestamp": timestamp,
        "killerId": killer,
        "victimId": victim,
        "bounty": 300,
        "position": {"x": 7000, "y": 7000},
    }
    if assists is not None:
        event["assistingParticipantIds"] = list(assists)
    return event


def _participant(participant_id: int, **overrides: Any) -> dict[str, Any]:
    team_id = BLUE_TEAM if participant_id <= 5 else RED_TEAM
    data = {
        "puuid": f"puuid-{participant_id}",
        "summonerName": f"Summoner{participant_id}",
        "championName": f"Champion{participant_id}",
        "participantId": participant_id,
        "teamId": team_id,
        "teamPosition": POSITIONS[(participant_id - 1) % 5],
        "kills": 0,
        "deaths": 0,
        "assists": 0,
        "visionScore": 10 + participant_id,
        "totalDamageDealtToChampions": 10_000,
        "goldEarned": 9_000,
    }
    data.update(overrides)
    return data


def _participant_frame(participant_id: int, minions: int = 0, jungle: int = 0) -> dict[str, Any]:
    return {
        "participantId": participant_id,
        "minionsKilled": minions,
        "jungleMinionsKilled": jungle,
        "level": 1,
        "totalGold": 500,
        "currentGold": 500,
        "xp": 0,
        "position": {"x": 0, "y": 0},
        "damageStats": {"totalDamageDoneToChampions": 0},
    }


@pytest.fixture
def match_factory() -> Callable[..., dict[str, Any]]:
    """Build a Match-V5 match payload.

    Keyword args:
        duration: gameDuration in seconds (default 32:15)
        blue_win: whether team 100 won
        teams: explicit teams list (overrides blue_win)
        overrides: {participant_id: {field: value}} applied to the roster
    """

    def _build(
        *,
        duration: int = 32 * 60 + 15,
        blue_win: bool = True,
        teams: list[dict[str, Any]] | None = None,
        overrides: Mapping[int, Mapping[str, Any]] | None = None,
    ) -> dict[str, Any]:
        overrides = overrides or {}
        participants = [_participant(pid, **overrides.get(pid, {})) for pid in range(1, 11)]
        if teams is None:
            teams = [
                {"teamId": BLUE_TEAM, "win": blue_win, "bans": []},
                {"teamId": RED_TEAM, "win": not blue_win, "bans": []},
            ]
        return {
            "metadata": {
                "dataVersion": "2",
                "matchId": "NA1_5151928908",
                "participants": [p["puuid"] for p in participants],
            },
            "info": {
                "gameDuration": duration,
                "gameMode": "CLASSIC",
                "queueId": 420,
                "participants": participants,
                "teams": teams,
            },
        }

    return _build


@pytest.fixture
def timeline_factory() -> Callable[..., dict[str, Any]]:
    """Build a Match-V5 timeline payload with `frame_count` frames.

    Keyword args:
        events: {frame_index: [event, ...]}
        last_frame_cs: {participant_id: (minions, jungle)} for the final frame;
            participants not listed get 0/0. Pass exclude_from_last_frame to
            drop ids from the final frame entirely.
    """

    def _build(
        frame_count: int,
        *,
        events: Mapping[int, list[dict[str, Any]]] | None = None,
        last_frame_cs: Mapping[int, tuple[int, int]] | None = None,
        exclude_from_last_frame: Iterable[int] = (),
    ) -> dict[str, Any]:
        events = events or {}
        last_frame_cs = last_frame_cs or {}
        excluded = set(exclude_from_last_frame)
        frames = []
        for index in range(frame_count):
            is_last = index == frame_count - 1
            participant_frames = {}
            for pid in range(1, 11):
                if is_last and pid in excluded:
                    continue
                minions, jungle = last_frame_cs.get(pid, (0, 0)) if is_last else (0, 0)
                participant_frames[str(pid)] = _participant_frame(pid, minions, jungle)
            frame_events = [{"type": "ITEM_PURCHASED", "participantId": 1, "itemId": 1055}]
            frame_events.extend(events.get(index, []))
            frames.append(
                {
                    "timestamp": index * 60_000,
                    "participantFrames": participant_frames,
                    "events": frame_events,
                }
            )
        return {
            "metadata": {"dataVersion": "2", "matchId": "NA1_5151928908", "participants": []},
            "info": {"frameInterval": 60_000, "frames": frames},
        }

    return _build


@pytest.fixture
def sample_match(match_factory: Callable[..., dict[str, Any]]) -> dict[str, Any]:
    """32:15 blue-side victory; participant 1 finished 7/2/11."""
    return match_factory(overrides={1: {"kills": 7, "deaths": 2, "assists": 11}})


@pytest.fixture
def sample_timeline(timeline_factory: Callable[..., dict[str, Any]]) -> dict[str, Any]:
    """34 frames; participant 1 kills at 3, dies at 12, assists at 22.

    Checkpoint values for participant 1 (yourImpact / teamImpact):
        1: 0 / 0      5: 20 / 5     10: 20 / 5     14: 5 / 1.25
        20: 5 / 1.25  25: 7.5 / 2.5 30: 7.5 / 2.5  final(35): 7.5 / 2.5
    """
    return timeline_factory(
        34,
        events={
            3: [kill_event(1, 6, [2])],
            12: [kill_event(7, 1, [8])],
            22: [kill_event(2, 9, [1])],
        },
        last_frame_cs={1: (120, 18)},
    )


@pytest.fixture
def kill() -> Callable[..., dict[str, Any]]:
    """Factory for CHAMPION_KILL event payloads."""
    return kill_event
