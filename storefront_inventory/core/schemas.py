from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")

# ======================================================
# Configuration Commune Pydantic
# ======================================================

class FrozenModel(BaseModel):
    """Objet valeur immuable: toute modification passe par une reconstruction."""
    model_config = ConfigDict(frozen=True, from_attributes=True)


class PaginatedResponse(BaseModel, Generic[T]):
    items: List[T]
    total: int
    page: int
    size: int
    total_pages: int
