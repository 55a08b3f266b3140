from typing import Annotated

from fastapi import Depends

from storefront_inventory.catalog.dependencies import AttributeCatalogServiceDep
from storefront_inventory.gateway.dependencies import BackendGatewayDep
from .service import VariantService


def get_variant_service(
    gateway: BackendGatewayDep,
    catalog_service: AttributeCatalogServiceDep,
) -> VariantService:
    """Fournit une instance du service de génération des variantes."""
    return VariantService(gateway=gateway, catalog_service=catalog_service)


VariantServiceDep = Annotated[VariantService, Depends(get_variant_service)]
