"""
Export CSV du rapport de rapprochement mensuel.

Le document doit rester identique, à l'octet près, à l'export historique de la
console d'administration: BOM UTF-8, sections et en-têtes en vietnamien,
colonnes dans un ordre fixe.
"""
import logging
from datetime import date
from typing import List, Optional

from .constants import (
    CSV_BOM,
    DETAIL_HEADERS,
    MISSING_ATTRIBUTE,
    SECTION_DETAILS,
    SECTION_MOVEMENTS,
    SECTION_SUMMARY,
    SECTION_TOTALS,
)
from .models import MonthlyReport, VariantMovementRecord
from .utils import format_export_date, format_number, quote

logger = logging.getLogger(__name__)


def _detail_row(index: int, record: VariantMovementRecord) -> str:
    fields = [
        str(index),
        quote(record.sku or ""),
        quote(record.product_name or ""),
        quote(record.color_name or MISSING_ATTRIBUTE),
        quote(record.size_name or MISSING_ATTRIBUTE),
        quote(record.origin_name or MISSING_ATTRIBUTE),
        format_number(record.price),
        format_number(record.opening_stock),
        format_number(record.total_import),
        format_number(record.total_export),
        format_number(record.total_adjustment),
        format_number(record.total_return),
        format_number(record.closing_stock),
        format_number(record.stock_value),
        quote(record.status_label),
    ]
    return ",".join(fields)


def render_monthly_report_csv(report: MonthlyReport, export_date: Optional[date] = None) -> str:
    """
    Produit le document CSV du rapport.

    Les totaux sont lus dans le résumé du rapport, jamais recalculés ici.

    Args:
        report: Rapport déjà rapproché
        export_date: Date imprimée dans l'en-tête (aujourd'hui par défaut)

    Returns:
        str: Document CSV préfixé par le BOM
    """
    export_date = export_date or date.today()
    summary = report.summary
    movements = report.movements

    lines: List[str] = [
        f"BÁO CÁO TỒN KHO THÁNG {report.month}/{report.year}",
        f"Ngày xuất: {format_export_date(export_date)}",
        "",
        SECTION_SUMMARY,
        f"Tổng số biến thể,{summary.total_variants}",
        f"Giá trị tồn kho,{format_number(summary.total_stock_value)}",
        f"Sắp hết hàng,{summary.low_stock_count}",
        f"Hết hàng,{summary.out_of_stock_count}",
        "",
        SECTION_MOVEMENTS,
        f"Tổng nhập kho,+{movements.total_import}",
        f"Tổng xuất kho (bán),-{movements.total_export}",
        f"Tổng điều chỉnh,{movements.total_adjustment}",
        f"Tổng hoàn trả,+{movements.total_return}",
        "",
        SECTION_DETAILS,
        ",".join(DETAIL_HEADERS),
    ]
    lines.extend(_detail_row(index, record) for index, record in enumerate(report.details, start=1))
    lines.extend([
        "",
        SECTION_TOTALS,
        f"Tổng tồn đầu kỳ,{summary.total_opening_stock}",
        f"Tổng tồn cuối kỳ,{summary.total_closing_stock}",
        f"Tổng giá trị,{format_number(summary.total_stock_value)}",
    ])

    logger.info(f"[Reconciliation] Export CSV {report.period}: {len(report.details)} ligne(s)")
    return CSV_BOM + "\n".join(lines) + "\n"
