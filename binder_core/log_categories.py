"""
Log category names for the binder application.

Every log call site tags its message with one of these categories so that
downstream tooling can filter by subsystem. The string values are part of
the external contract: log filters match on them, so changing a value is a
breaking change.
"""

from enum import Enum
from typing import List


class LogCategory(str, Enum):
    """Closed set of log categories."""

    QTY_ENRICH = "QtyEnrich"
    QTY_VARIANT = "QtyVariant"
    QTY_COORDINATOR = "QtyCoordinator"
    QUANTITY_REPO_STD = "QuantityRepo.Std"
    QUANTITY_REPO_CUSTOM = "QuantityRepo.Custom"
    COLLECTION = "Collection"
    COLLECTION_DEBUG = "Collection.Debug"
    COLLECTION_WARN = "Collection.Warn"
    CACHE = "Cache"
    CACHE_DIAG = "Cache.Diag"
    RESOLVE_SPECS = "ResolveSpecs"
    SPEC_FETCH = "SpecFetch"
    BINDER = "Binder"
    UI = "UI"
    CARD_SLOT = "CardSlot"
    MFC = "MFC"
    IMPORT = "Import"
    LAYOUT = "Layout"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> List[str]:
        """Return all category values in declaration order."""
        return [member.value for member in cls]
