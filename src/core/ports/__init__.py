"""Port interfaces for hexagonal architecture.

These ports define the contracts between the scoring core and the
collaborators that own storage.
"""

from src.core.ports.impact_store_port import ImpactCategoryStorePort

__all__ = ["ImpactCategoryStorePort"]
