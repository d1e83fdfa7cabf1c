"""Unit tests for the impact score accumulator and kill-value table."""

import pytest

from src.contracts.match import Match
from src.contracts.timeline import MatchTimeline
from src.core.scoring.accumulator import (
    TEAMMATE_DIVISOR,
    ImpactAccumulator,
    PointValues,
    game_duration_minutes,
    kill_value,
)


def _accumulator(match_raw, timeline_raw, participant_id: int = 1) -> ImpactAccumulator:
    info = Match.model_validate(match_raw).info
    timeline = MatchTimeline.model_validate(timeline_raw)
    reference = next(p for p in info.participants if p.participant_id == participant_id)
    return ImpactAccumulator(info, timeline, reference)


def _run(accumulator: ImpactAccumulator) -> ImpactAccumulator:
    for minute in accumulator.playable_minutes():
        accumulator.advance(minute)
    return accumulator


@pytest.mark.parametrize(
    "minute,expected",
    [
        (0, 25.0),
        (1, 25.0),
        (2, 20.0),
        (5, 20.0),
        (6, 17.5),
        (10, 17.5),
        (11, 15.0),
        (14, 15.0),
        (15, 10.0),
        (20, 10.0),
        (21, 5.0),
        (30, 5.0),
        (31, 2.5),
        (65, 2.5),
    ],
)
def test_kill_value_steps(minute: int, expected: float) -> None:
    assert kill_value(minute) == expected


def test_kill_value_never_increases() -> None:
    values = [kill_value(m) for m in range(0, 70)]
    assert all(later <= earlier for earlier, later in zip(values, values[1:]))


def test_point_values_derive_from_kill_value() -> None:
    values = PointValues.for_minute(12)
    assert values.kill == 15.0
    assert values.death == -15.0
    assert values.assist == 7.5


@pytest.mark.parametrize("seconds,minutes", [(0, 0), (59, 0), (60, 1), (1935, 32), (3900, 65)])
def test_game_duration_minutes_floors(seconds: int, minutes: int) -> None:
    assert game_duration_minutes(seconds) == minutes


def test_player_kill_scores_solo_and_team(match_factory, timeline_factory, kill) -> None:
    acc = _run(
        _accumulator(match_factory(duration=600), timeline_factory(11, events={3: [kill(1, 6)]}))
    )

    assert acc.solo_score == 20.0
    assert acc.team_score_sum == 20.0
    assert acc.team_impact == 20.0 / TEAMMATE_DIVISOR


def test_player_death_costs_kill_value(match_factory, timeline_factory, kill) -> None:
    acc = _run(
        _accumulator(match_factory(duration=900), timeline_factory(16, events={12: [kill(7, 1)]}))
    )

    assert acc.solo_score == -15.0
    assert acc.team_score_sum == -15.0
    assert acc.team_impact == pytest.approx(-3.75)


def test_assist_is_half_kill_value(match_factory, timeline_factory, kill) -> None:
    acc = _run(
        _accumulator(
            match_factory(duration=600), timeline_factory(11, events={4: [kill(2, 6, [1, 3])]})
        )
    )

    assert acc.solo_score == 10.0
    assert acc.team_score_sum == 20.0


def test_team_score_is_net_kill_differential(match_factory, timeline_factory, kill) -> None:
    # Two ally kills and one enemy kill in minute 25 (value 5.0), none involving participant 1
    acc = _run(
        _accumulator(
            match_factory(duration=26 * 60),
            timeline_factory(
                27, events={25: [kill(2, 6), kill(3, 7), kill(8, 4)]}
            ),
        )
    )

    assert acc.solo_score == 0.0
    assert acc.team_score_sum == pytest.approx(5.0)
    assert acc.team_impact == pytest.approx(1.25)


def test_red_side_reference_sees_blue_kills_as_enemy(match_factory, timeline_factory, kill) -> None:
    acc = _run(
        _accumulator(
            match_factory(duration=600), timeline_factory(11, events={2: [kill(1, 6)]}), 6
        )
    )

    assert acc.solo_score == -20.0
    assert acc.team_score_sum == -20.0


def test_minutes_bounded_by_duration(match_factory, timeline_factory) -> None:
    acc = _accumulator(match_factory(duration=10 * 60 + 30), timeline_factory(25))

    assert acc.last_minute == 10
    assert list(acc.playable_minutes()) == list(range(1, 11))


def test_minutes_bounded_by_frames(match_factory, timeline_factory) -> None:
    acc = _accumulator(match_factory(duration=40 * 60), timeline_factory(12))

    assert acc.last_minute == 11


def test_no_playable_minutes_without_frames(match_factory) -> None:
    acc = _accumulator(match_factory(duration=1800), {"info": {"frames": []}})

    assert list(acc.playable_minutes()) == []


def test_advance_tracks_processed_minutes(match_factory, timeline_factory, kill) -> None:
    acc = _accumulator(match_factory(duration=300), timeline_factory(6, events={2: [kill(1, 6)]}))

    first = acc.advance(1)
    second = acc.advance(2)

    assert acc.minutes_processed == 2
    assert (first.kills, first.ally_kills) == (0, 0)
    assert (second.kills, second.ally_kills, second.enemy_kills) == (1, 1, 0)
