import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from storefront_inventory.catalog.router import handle_gateway_errors
from .config import settings
from .dependencies import StockServiceDep
from .exceptions import StockException
from .models import StockGroupPage, StockStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Stock"])


# --- Error Handling Helper ---
def handle_stock_errors(e: Exception):
    if isinstance(e, StockException):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    handle_gateway_errors(e)


@router.get("/stock", response_model=StockGroupPage)
async def list_stock(
    service: StockServiceDep,
    keyword: Optional[str] = Query(None, description="Recherche par nom de produit ou SKU"),
    stock_status: Optional[StockStatus] = Query(None, description="Filtrer par statut de stock"),
    category_id: Optional[int] = Query(None, description="Filtrer par catégorie"),
    page: int = Query(0, ge=0, description="Numéro de page (à partir de 0)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Nombre de produits par page"),
):
    """Liste le stock regroupé par produit, les produits les plus urgents en premier."""
    try:
        return await service.get_stock_page(
            keyword=keyword,
            stock_status=stock_status,
            category_id=category_id,
            page=page,
            size=size,
        )
    except Exception as e:
        handle_stock_errors(e)
