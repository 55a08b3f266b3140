from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from storefront_inventory.core.schemas import FrozenModel
from storefront_inventory.stock.models import StockStatus
from .constants import REPORT_STATUS_LABELS


class TransactionType(str, Enum):
    IMPORT = "IMPORT"
    EXPORT = "EXPORT"
    ADJUSTMENT = "ADJUSTMENT"
    RETURN = "RETURN"


class InventoryTransaction(FrozenModel):
    """Mouvement de stock unitaire (historique d'une variante)."""
    product_detail_id: int
    transaction_type: TransactionType
    quantity: int
    stock_before: Optional[int] = None
    stock_after: Optional[int] = None
    note: Optional[str] = None


class MovementRow(FrozenModel):
    """Ligne brute du backend: solde d'ouverture et totaux de mouvements d'une variante."""
    product_detail_id: Optional[int] = None
    product_id: Optional[int] = None
    product_name: Optional[str] = None
    sku: Optional[str] = None
    color_name: Optional[str] = None
    size_name: Optional[str] = None
    origin_name: Optional[str] = None
    price: Decimal = Decimal("0")
    opening_stock: int = 0
    total_import: int = 0
    total_export: int = 0
    total_adjustment: int = 0
    total_return: int = 0

    @field_validator(
        "price", "opening_stock", "total_import", "total_export",
        "total_adjustment", "total_return", mode="before",
    )
    @classmethod
    def _null_as_zero(cls, value):
        return 0 if value is None else value


class VariantMovementRecord(MovementRow):
    closing_stock: int
    stock_value: Decimal
    stock_status: StockStatus

    @property
    def status_label(self) -> str:
        return REPORT_STATUS_LABELS[self.stock_status.value]


class MovementSummary(FrozenModel):
    total_import: int = 0
    total_export: int = 0
    total_adjustment: int = 0
    total_return: int = 0


class ReportSummary(FrozenModel):
    total_variants: int = 0
    total_stock_value: Decimal = Decimal("0")
    low_stock_count: int = 0
    out_of_stock_count: int = 0
    total_opening_stock: int = 0
    total_closing_stock: int = 0


class Reconciliation(FrozenModel):
    details: List[VariantMovementRecord] = Field(default_factory=list)
    summary: ReportSummary = Field(default_factory=ReportSummary)
    movements: MovementSummary = Field(default_factory=MovementSummary)


class MonthlyReport(Reconciliation):
    period: str
    year: int
    month: int
