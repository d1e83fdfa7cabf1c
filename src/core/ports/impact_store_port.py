"""Port interface for impact category persistence.

The scorer never stores anything itself. Callers that keep a per-player
history of verdicts (keyed by match id + PUUID) implement this port.
"""

from abc import ABC, abstractmethod

from src.contracts.impact import ImpactCategory


class ImpactCategoryStorePort(ABC):
    """Port interface for recording a match's impact category."""

    @abstractmethod
    def save_category(self, match_id: str, puuid: str, category: ImpactCategory) -> None:
        """Upsert the category for (match_id, puuid).

        Args:
            match_id: Match ID in Match-V5 format (e.g. NA1_5151928908)
            puuid: Player's persistent unique ID
            category: Verdict computed for that player in that match

        Raises:
            Exception: Implementation-specific storage failure. The analysis
                service logs it and still returns the computed result.
        """
        pass
