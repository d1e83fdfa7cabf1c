"""Match summary reconstruction.

Combines the sampled impact chart with static match metadata into one
MatchSummary per (match, player). Shared by the single-match analysis flow
and the stored-history rebuild.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from src.config.settings import get_settings
from src.contracts.impact import GameResult, MatchSummary
from src.contracts.match import Match, MatchInfo, Participant
from src.contracts.timeline import MatchTimeline
from src.core.errors import InvalidMatchDataError, ReferenceParticipantNotFound
from src.core.scoring.chart_sampler import sample_chart_data, split_summary_point

logger = logging.getLogger(__name__)


def coerce_match(match: Match | dict[str, Any]) -> Match:
    """Accept a validated Match or a raw Match-V5 payload."""
    if isinstance(match, Match):
        return match
    try:
        return Match.model_validate(match)
    except ValidationError as e:
        raise InvalidMatchDataError("match", str(e)) from e


def coerce_timeline(timeline: MatchTimeline | dict[str, Any]) -> MatchTimeline:
    """Accept a validated MatchTimeline or a raw Match-V5 timeline payload."""
    if isinstance(timeline, MatchTimeline):
        return timeline
    try:
        return MatchTimeline.model_validate(timeline)
    except ValidationError as e:
        raise InvalidMatchDataError("timeline", str(e)) from e


def format_game_time(duration_seconds: int) -> str:
    """Zero-padded MM:SS, e.g. 1835 -> "30:35"."""
    minutes, seconds = divmod(duration_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


def game_result_for(info: MatchInfo, participant: Participant) -> GameResult:
    """Victory if the participant's team is marked as the winner.

    A team missing from the team list counts as a defeat.
    """
    team = info.get_team(participant.team_id)
    if team is None:
        logger.debug("team %s missing from match, treating as defeat", participant.team_id)
        return GameResult.DEFEAT
    return GameResult.VICTORY if team.win else GameResult.DEFEAT


def creep_score(participant: Participant, timeline: MatchTimeline) -> int:
    """Lane + jungle minions from the last frame; 0 when that data is absent."""
    last_frame = timeline.last_frame
    if last_frame is None:
        return 0
    participant_frame = last_frame.participant_frame(participant.participant_id)
    if participant_frame is None:
        return 0
    return participant_frame.creep_score


def reconstruct(
    match_id: str,
    puuid: str,
    match: Match | dict[str, Any],
    timeline: MatchTimeline | dict[str, Any],
) -> MatchSummary:
    """Build the MatchSummary for one player in one match.

    Args:
        match_id: Match ID the summary is filed under
        puuid: Reference player's PUUID
        match: Match-V5 match record (model or raw payload)
        timeline: Match-V5 timeline record (model or raw payload)

    Returns:
        MatchSummary with the summary point's means as your_impact/team_impact
        and the remaining chart points as data

    Raises:
        ReferenceParticipantNotFound: puuid is not on the match roster
        InvalidMatchDataError: a raw payload failed validation
    """
    match_model = coerce_match(match)
    timeline_model = coerce_timeline(timeline)
    info = match_model.info

    participant = info.get_participant_by_puuid(puuid)
    if participant is None:
        raise ReferenceParticipantNotFound(match_id, puuid)

    chart, summary_point = split_summary_point(sample_chart_data(info, timeline_model, participant))

    return MatchSummary(
        match_id=match_id,
        summoner_name=participant.summoner_name,
        champion=participant.champion_name,
        rank=get_settings().rank_placeholder,
        kda=participant.kda_text,
        cs=creep_score(participant, timeline_model),
        vision_score=participant.vision_score,
        game_result=game_result_for(info, participant),
        game_time=format_game_time(info.game_duration),
        data=chart,
        your_impact=summary_point.your_impact if summary_point else 0.0,
        team_impact=summary_point.team_impact if summary_point else 0.0,
    )
