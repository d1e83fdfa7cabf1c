"""Impact analysis service.

Request-level flows around the pure scoring core:
- analyze one match for a player and hand the verdict to a category store
- rebuild a player's stored match history, skipping matches that fail
- decide whether the upstream match list holds matches not stored yet

Nothing here fetches, caches or retries. Callers own I/O and pass records in.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import structlog

from src.config.settings import get_settings
from src.contracts.impact import ImpactCategory, MatchSummary, PerformanceAnalysisResult
from src.contracts.match import Match
from src.contracts.timeline import MatchTimeline
from src.core.errors import ImpactAnalysisError
from src.core.observability import trace_scoring
from src.core.ports.impact_store_port import ImpactCategoryStorePort
from src.core.scoring.categorizer import categorize
from src.core.services.match_reconstruction import reconstruct

logger = structlog.get_logger(__name__)


def categorize_summary(summary: MatchSummary) -> ImpactCategory:
    """Verdict for an already reconstructed summary."""
    return categorize(summary.game_result, summary.your_impact, summary.team_impact)


@trace_scoring
def analyze_match_performance(
    match_id: str,
    puuid: str,
    match: Match | dict[str, Any],
    timeline: MatchTimeline | dict[str, Any],
    store: ImpactCategoryStorePort | None = None,
) -> PerformanceAnalysisResult:
    """Reconstruct, categorize and (optionally) record one match.

    Analysis failures come back as success=False with the error message.
    A failing store is logged and does not fail the analysis.
    """
    try:
        summary = reconstruct(match_id, puuid, match, timeline)
    except ImpactAnalysisError as e:
        logger.warning(
            "match_analysis_failed",
            match_id=match_id,
            error_type=type(e).__name__,
            error=str(e),
        )
        return PerformanceAnalysisResult(success=False, error=str(e))

    category = categorize_summary(summary)

    if store is not None:
        try:
            store.save_category(match_id, puuid, category)
        except Exception as e:
            logger.error(
                "impact_category_store_failed",
                match_id=match_id,
                category=category.value,
                error_type=type(e).__name__,
                error=str(e),
            )

    logger.info(
        "match_analyzed",
        match_id=match_id,
        game_result=summary.game_result,
        your_impact=round(summary.your_impact, 2),
        team_impact=round(summary.team_impact, 2),
        category=category.value,
    )
    return PerformanceAnalysisResult(success=True, match_summary=summary, category=category)


@trace_scoring
def reconstruct_stored_matches(
    puuid: str,
    match_ids: Sequence[str],
    match_details: Mapping[str, Match | dict[str, Any]],
    timelines: Mapping[str, MatchTimeline | dict[str, Any]],
) -> list[MatchSummary]:
    """Rebuild summaries for a player's stored matches, in `match_ids` order.

    Matches missing either record are skipped silently; matches that fail
    to reconstruct are logged and skipped so one bad match never sinks the batch.
    """
    summaries: list[MatchSummary] = []
    skipped = 0

    for match_id in match_ids:
        match = match_details.get(match_id)
        timeline = timelines.get(match_id)
        if match is None or timeline is None:
            skipped += 1
            continue

        try:
            summaries.append(reconstruct(match_id, puuid, match, timeline))
        except ImpactAnalysisError as e:
            skipped += 1
            logger.warning(
                "stored_match_reconstruction_failed",
                match_id=match_id,
                error_type=type(e).__name__,
                error=str(e),
            )

    logger.info(
        "stored_matches_reconstructed",
        requested=len(match_ids),
        reconstructed=len(summaries),
        skipped=skipped,
    )
    return summaries


def history_check_size(stored_count: int) -> int:
    """How many upstream match ids to request when looking for new matches."""
    settings = get_settings()
    return max(stored_count + settings.stored_match_check_margin, settings.stored_match_check_floor)


def has_more_in_api(stored_ids: Iterable[str], api_ids: Sequence[str], check_size: int) -> bool:
    """True if upstream lists a match we have not stored, or returned a full page."""
    stored = set(stored_ids)
    has_new = any(match_id not in stored for match_id in api_ids)
    return has_new or len(api_ids) >= check_size
