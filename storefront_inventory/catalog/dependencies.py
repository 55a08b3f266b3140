from typing import Annotated

from fastapi import Depends

from storefront_inventory.gateway.dependencies import BackendGatewayDep
from .service import AttributeCatalogService


def get_attribute_catalog_service(gateway: BackendGatewayDep) -> AttributeCatalogService:
    """Fournit le service de chargement du référentiel d'attributs."""
    return AttributeCatalogService(gateway=gateway)


AttributeCatalogServiceDep = Annotated[AttributeCatalogService, Depends(get_attribute_catalog_service)]
