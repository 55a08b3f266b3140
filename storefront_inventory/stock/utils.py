"""
Utilitaires pour le module de gestion des stocks.
"""
from typing import List, Optional

from .config import settings
from .constants import PAGE_WINDOW
from .models import StockStatus


def classify_stock_quantity(quantity: int, low_threshold: Optional[int] = None) -> StockStatus:
    """
    Calcule le statut du stock en fonction de la quantité disponible.

    Même politique que le backend pour l'écran de stock, afin que le rapport
    et l'écran donnent le même statut pour un même niveau de stock.

    Args:
        quantity: Quantité en stock (peut être négative après ajustement)
        low_threshold: Seuil "stock bas", par défaut STOCK_LOW_STOCK_THRESHOLD

    Returns:
        StockStatus: OUT_OF_STOCK, LOW ou NORMAL
    """
    threshold = settings.LOW_STOCK_THRESHOLD if low_threshold is None else low_threshold
    if quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= threshold:
        return StockStatus.LOW
    return StockStatus.NORMAL


def count_pages(total: int, size: int) -> int:
    return -(-total // size) if total else 0


def visible_pages(current: int, total_pages: int, window: int = PAGE_WINDOW) -> List[int]:
    """Indices de pages (base 0) affichés autour de la page courante."""
    if total_pages <= 0:
        return []
    start = max(0, current - window)
    end = min(total_pages - 1, current + window)
    return list(range(start, end + 1))
