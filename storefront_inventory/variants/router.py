import logging

from fastapi import APIRouter, HTTPException, Path, status

from storefront_inventory.catalog.models import AttributeAxis
from storefront_inventory.catalog.router import handle_gateway_errors
from storefront_inventory.gateway.exceptions import BackendGatewayException
from .dependencies import VariantServiceDep
from .exceptions import VariantMatrixException, VariantValidationException
from .models import (
    SkuSuggestionRequest,
    SkuSuggestionResponse,
    VariantBatchCreate,
    VariantBatchResult,
    VariantMatrixRequest,
    VariantMatrixResponse,
)
from .service import resolve_selling_axes, validate_variants
from .utils import build_selling_attributes

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Product Variants"])


# --- Error Handling Helper ---
def handle_variant_service_errors(e: Exception):
    if isinstance(e, VariantValidationException):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": e.message, "errors": e.errors},
        )
    if isinstance(e, VariantMatrixException):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    handle_gateway_errors(e)


@router.post("/matrix", response_model=VariantMatrixResponse)
async def build_variant_matrix(request: VariantMatrixRequest, service: VariantServiceDep):
    """Génère toutes les variantes pour la sélection d'attributs courante.

    Recalculé à chaque changement de sélection; les erreurs de validation sont
    renvoyées sans bloquer la génération.
    """
    logger.info(f"API build_variant_matrix: selling={[a.value for a in request.selling_axes]}, base_sku={request.base_sku}")
    try:
        selling_axes = resolve_selling_axes(request.selling_axes, request.selling_attributes)
        variants = await service.generate(request, selling_axes)
    except (VariantMatrixException, BackendGatewayException) as e:
        handle_variant_service_errors(e)

    return VariantMatrixResponse(
        selling_attributes=build_selling_attributes(selling_axes),
        total=len(variants),
        variants=variants,
        validation_errors=validate_variants(variants, selling_axes),
    )


@router.post("/sku", response_model=SkuSuggestionResponse)
async def suggest_variant_sku(request: SkuSuggestionRequest, service: VariantServiceDep):
    """Suggère un SKU pour une combinaison saisie dans l'éditeur de variante."""
    value_ids = {
        AttributeAxis.COLOR: request.color_id,
        AttributeAxis.SIZE: request.size_id,
        AttributeAxis.ORIGIN: request.origin_id,
    }
    try:
        sku = await service.suggest_sku(request.base_sku, request.selling_axes, value_ids)
    except (VariantMatrixException, BackendGatewayException) as e:
        handle_variant_service_errors(e)
    return SkuSuggestionResponse(sku=sku)


@router.post("/products/{product_id}", response_model=VariantBatchResult, status_code=status.HTTP_201_CREATED)
async def create_product_variants(
    batch: VariantBatchCreate,
    service: VariantServiceDep,
    product_id: int = Path(..., ge=1),
):
    """Valide puis persiste un jeu de variantes pour un produit."""
    logger.info(f"API create_product_variants: product={product_id}, count={len(batch.variants)}")
    try:
        created = await service.create_variants(
            product_id, batch.variants, batch.selling_axes, batch.selling_attributes
        )
    except (VariantMatrixException, BackendGatewayException) as e:
        handle_variant_service_errors(e)
    return VariantBatchResult(product_id=product_id, created=len(created), items=created)
