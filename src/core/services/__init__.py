"""Service layer implementing business logic.

Services wrap the pure scoring core with request-level flows: summary
reconstruction, categorization, and hand-off to caller-owned ports.
"""

from src.core.services.impact_analysis_service import (
    analyze_match_performance,
    categorize_summary,
    has_more_in_api,
    history_check_size,
    reconstruct_stored_matches,
)
from src.core.services.match_reconstruction import reconstruct

__all__ = [
    "analyze_match_performance",
    "categorize_summary",
    "has_more_in_api",
    "history_check_size",
    "reconstruct",
    "reconstruct_stored_matches",
]
