from decimal import Decimal
from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import Field, computed_field, field_validator

from storefront_inventory.core.schemas import FrozenModel, PaginatedResponse
from .constants import DEFAULT_VARIANT_LABEL, STOCK_STATUS_LABELS


class StockStatus(str, Enum):
    NORMAL = "NORMAL"
    LOW = "LOW"
    OUT_OF_STOCK = "OUT_OF_STOCK"

    @property
    def label(self) -> str:
        return STOCK_STATUS_LABELS[self.value]


# ======================================================
# StockItem: projection d'une variante renvoyée par le backend
# ======================================================

class StockItem(FrozenModel):
    product_detail_id: Optional[int] = None
    product_id: Optional[int] = None
    product_name: Optional[str] = None
    product_thumbnail: Optional[str] = None
    sku: Optional[str] = None
    color_id: Optional[int] = None
    color_name: Optional[str] = None
    color_code: Optional[str] = None
    size_id: Optional[int] = None
    size_name: Optional[str] = None
    origin_id: Optional[int] = None
    origin_name: Optional[str] = None
    price: Decimal = Decimal("0")
    stock_quantity: int = 0
    # Statut calculé par le backend, transmis tel quel (valeur inconnue conservée)
    stock_status: Union[StockStatus, str, None] = Field(default=StockStatus.NORMAL, union_mode="left_to_right")
    category_name: Optional[str] = None
    brand_name: Optional[str] = None

    @field_validator("price", "stock_quantity", mode="before")
    @classmethod
    def _null_as_zero(cls, value):
        return 0 if value is None else value

    @property
    def variant_display(self) -> str:
        """Libellé lisible de la variante, ex. "Đỏ / M / Việt Nam"."""
        parts = [name for name in (self.color_name, self.size_name, self.origin_name) if name]
        return " / ".join(parts) if parts else DEFAULT_VARIANT_LABEL


# ======================================================
# ProductStockGroup: agrégat par produit, jamais persisté
# ======================================================

class ProductStockGroup(FrozenModel):
    """
    Regroupement des variantes d'un même produit.

    Les agrégats sont des propriétés calculées à partir de `variants`:
    aucun compteur ne peut diverger des membres qu'il résume.
    """
    product_id: int
    product_name: str
    thumbnail: str = ""
    category_name: str = ""
    brand_name: str = ""
    variants: Tuple[StockItem, ...] = ()

    @computed_field
    @property
    def total_variants(self) -> int:
        return len(self.variants)

    @computed_field
    @property
    def total_stock(self) -> int:
        return sum(item.stock_quantity for item in self.variants)

    @computed_field
    @property
    def has_low_stock(self) -> bool:
        return any(item.stock_status == StockStatus.LOW for item in self.variants)

    @computed_field
    @property
    def has_out_of_stock(self) -> bool:
        return any(item.stock_status == StockStatus.OUT_OF_STOCK for item in self.variants)


class StockGroupPage(PaginatedResponse[ProductStockGroup]):
    visible_pages: List[int] = Field(default_factory=list)
