import logging
from typing import Dict, List

from fastapi import APIRouter, HTTPException, status

from storefront_inventory.gateway.exceptions import (
    BackendGatewayException,
    BackendUnavailableException,
)
from .dependencies import AttributeCatalogServiceDep
from .models import AttributeValue

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Catalog"])


def handle_gateway_errors(e: Exception):
    """Traduit une erreur backend en réponse HTTP (partagé par les routeurs)."""
    if isinstance(e, BackendUnavailableException):
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    if isinstance(e, BackendGatewayException):
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    logger.error(f"[Inventory API] Erreur inattendue: {e}", exc_info=True)
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Erreur interne.")


@router.get("/attributes", response_model=Dict[str, List[AttributeValue]])
async def list_attribute_values(service: AttributeCatalogServiceDep):
    """Renvoie les valeurs disponibles pour chaque axe (COLOR, SIZE, ORIGIN)."""
    try:
        catalog = await service.load_catalog()
    except BackendGatewayException as e:
        handle_gateway_errors(e)
    return catalog.as_dict()
