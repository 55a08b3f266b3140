from datetime import date
from decimal import Decimal
from typing import Union

from .constants import MIN_REPORT_YEAR


def is_valid_period(year: int, month: int) -> bool:
    return 1 <= month <= 12 and year >= MIN_REPORT_YEAR


def format_period(year: int, month: int) -> str:
    """Période au format "MM/YYYY"."""
    return f"{month:02d}/{year}"


def format_number(value: Union[int, Decimal, None]) -> str:
    """
    Écrit un nombre sans zéros décimaux superflus ni notation exponentielle
    (700.00 -> "700", 12.50 -> "12.5").
    """
    if value is None:
        return "0"
    if isinstance(value, int):
        return str(value)
    normalized = Decimal(value).normalize()
    if normalized == 0:
        return "0"
    return format(normalized, "f")


def format_export_date(day: date) -> str:
    """Date d'export au format jour/mois/année, sans zéros de remplissage."""
    return f"{day.day}/{day.month}/{day.year}"


def quote(value: str) -> str:
    """Encadre un champ texte de guillemets en doublant les guillemets internes."""
    return '"' + value.replace('"', '""') + '"'


def export_filename(year: int, month: int) -> str:
    return f"bao_cao_ton_kho_T{month}_{year}.csv"
