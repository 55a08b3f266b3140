import logging
from collections import defaultdict
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from storefront_inventory.gateway.client import BackendGateway
from storefront_inventory.stock.models import StockStatus
from storefront_inventory.stock.utils import classify_stock_quantity
from .exceptions import InvalidReportPeriodException
from .models import (
    InventoryTransaction,
    MonthlyReport,
    MovementRow,
    MovementSummary,
    Reconciliation,
    ReportSummary,
    TransactionType,
    VariantMovementRecord,
)
from .utils import format_period, is_valid_period

logger = logging.getLogger(__name__)

RowLike = Union[MovementRow, Mapping[str, Any]]


def reconcile_row(row: MovementRow, low_threshold: Optional[int] = None) -> VariantMovementRecord:
    """Calcule le solde de clôture, la valeur et le statut d'une variante."""
    closing_stock = (
        row.opening_stock
        + row.total_import
        - row.total_export
        + row.total_adjustment
        + row.total_return
    )
    return VariantMovementRecord(
        **row.model_dump(include=set(MovementRow.model_fields)),
        closing_stock=closing_stock,
        stock_value=Decimal(closing_stock) * row.price,
        stock_status=classify_stock_quantity(closing_stock, low_threshold),
    )


def reconcile(rows: Iterable[RowLike], low_threshold: Optional[int] = None) -> Reconciliation:
    """
    Rapproche les mouvements de la période pour chaque variante.

    closing_stock = opening_stock + total_import - total_export + total_adjustment + total_return
    stock_value = closing_stock * price

    Les totaux sont calculés une seule fois à partir des lignes détaillées.
    Une période sans ligne donne un résumé entièrement à zéro.

    Args:
        rows: Lignes brutes (MovementRow ou dictionnaires du backend)
        low_threshold: Seuil "stock bas", par défaut celui de l'écran de stock

    Returns:
        Reconciliation: Détails, résumé et totaux de mouvements
    """
    details: List[VariantMovementRecord] = [
        reconcile_row(MovementRow.model_validate(row), low_threshold) for row in rows
    ]

    summary = ReportSummary(
        total_variants=len(details),
        total_stock_value=sum((d.stock_value for d in details), Decimal("0")),
        low_stock_count=sum(1 for d in details if d.stock_status == StockStatus.LOW),
        out_of_stock_count=sum(1 for d in details if d.stock_status == StockStatus.OUT_OF_STOCK),
        total_opening_stock=sum(d.opening_stock for d in details),
        total_closing_stock=sum(d.closing_stock for d in details),
    )
    movements = MovementSummary(
        total_import=sum(d.total_import for d in details),
        total_export=sum(d.total_export for d in details),
        total_adjustment=sum(d.total_adjustment for d in details),
        total_return=sum(d.total_return for d in details),
    )
    logger.debug(f"[Reconciliation] {summary.total_variants} variante(s), valeur totale {summary.total_stock_value}")
    return Reconciliation(details=details, summary=summary, movements=movements)


def summarize_transactions(transactions: Iterable[InventoryTransaction]) -> Dict[int, MovementSummary]:
    """
    Replie un historique de mouvements en totaux par variante.

    Les entrées, sorties et retours sont comptés en valeur absolue;
    l'ajustement reste signé (une correction à la baisse est négative).
    """
    totals: Dict[int, Dict[str, int]] = defaultdict(
        lambda: {"total_import": 0, "total_export": 0, "total_adjustment": 0, "total_return": 0}
    )
    for tx in transactions:
        bucket = totals[tx.product_detail_id]
        if tx.transaction_type == TransactionType.IMPORT:
            bucket["total_import"] += abs(tx.quantity)
        elif tx.transaction_type == TransactionType.EXPORT:
            bucket["total_export"] += abs(tx.quantity)
        elif tx.transaction_type == TransactionType.RETURN:
            bucket["total_return"] += abs(tx.quantity)
        else:
            bucket["total_adjustment"] += tx.quantity
    return {detail_id: MovementSummary(**values) for detail_id, values in totals.items()}


class ReportService:
    """Service du rapport de rapprochement mensuel."""

    def __init__(self, gateway: BackendGateway):
        self.gateway = gateway

    async def get_monthly_report(self, year: int, month: int) -> MonthlyReport:
        """
        Récupère les lignes du mois auprès du backend et les rapproche.

        Raises:
            InvalidReportPeriodException: Si le mois n'est pas dans 1..12 ou l'année < 2020
        """
        if not is_valid_period(year, month):
            raise InvalidReportPeriodException(year, month)

        logger.info(f"[Reconciliation] Chargement du rapport {format_period(year, month)}")
        payload = await self.gateway.get_monthly_report(year=year, month=month)
        result = reconcile(payload.get("details") or [])
        return MonthlyReport(
            period=format_period(year, month),
            year=year,
            month=month,
            details=result.details,
            summary=result.summary,
            movements=result.movements,
        )
