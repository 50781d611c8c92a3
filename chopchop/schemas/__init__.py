from chopchop.schemas.base import (
    CandidateItem,
    DietaryFilter,
    InventoryRecord,
    RecipeRequest,
    RecipeResponse,
    RelayError,
    RelayResponse,
    ScanResponse,
)

__all__ = [
    "CandidateItem",
    "DietaryFilter",
    "InventoryRecord",
    "RecipeRequest",
    "RecipeResponse",
    "RelayError",
    "RelayResponse",
    "ScanResponse",
]
