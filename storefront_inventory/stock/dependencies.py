from typing import Annotated

from fastapi import Depends

from storefront_inventory.gateway.dependencies import BackendGatewayDep
from .service import StockService


def get_stock_service(gateway: BackendGatewayDep) -> StockService:
    """Fournit une instance du service de stock."""
    return StockService(gateway=gateway)


StockServiceDep = Annotated[StockService, Depends(get_stock_service)]
