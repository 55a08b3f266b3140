from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from sqlmodel import Field, SQLModel

from storefront_inventory.catalog.models import AttributeAxis

# --- Modèle de domaine ---

class VariantDraft(SQLModel):
    """Variante générée (product detail), avant persistance."""
    # Longueur et précision contrôlées par validate_variants
    sku: str
    price: Decimal
    stock_quantity: int = 0
    color_id: Optional[int] = None
    size_id: Optional[int] = None
    origin_id: Optional[int] = None
    image_url: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = True

    # Pour l'affichage uniquement (non envoyé au backend)
    color_name: Optional[str] = None
    size_name: Optional[str] = None
    origin_name: Optional[str] = None

    @property
    def attribute_key(self) -> Tuple[Optional[int], Optional[int], Optional[int]]:
        return (self.color_id, self.size_id, self.origin_id)

    def axis_value_id(self, axis: AttributeAxis) -> Optional[int]:
        return getattr(self, f"{axis.field_prefix}_id")

    def to_payload(self, product_id: int) -> Dict[str, Any]:
        """Corps attendu par POST /product-details."""
        payload = self.model_dump(
            exclude={"color_name", "size_name", "origin_name"},
            mode="json",
        )
        payload["product_id"] = product_id
        return payload


# --- Schémas API ---

class VariantMatrixRequest(SQLModel):
    base_price: Decimal = Field(max_digits=12, decimal_places=2)
    base_sku: Optional[str] = Field(default=None, max_length=80)
    selling_axes: List[AttributeAxis] = []
    # Chaîne stockée sur le produit, utilisée quand selling_axes est vide
    selling_attributes: Optional[str] = Field(default=None, max_length=50)
    selected_value_ids: Dict[AttributeAxis, List[int]] = {}
    display_value_ids: Dict[AttributeAxis, int] = {}


class VariantMatrixResponse(SQLModel):
    selling_attributes: str
    total: int
    variants: List[VariantDraft]
    validation_errors: List[str] = []


class SkuSuggestionRequest(SQLModel):
    base_sku: Optional[str] = Field(default=None, max_length=80)
    selling_axes: List[AttributeAxis] = []
    color_id: Optional[int] = None
    size_id: Optional[int] = None
    origin_id: Optional[int] = None


class SkuSuggestionResponse(SQLModel):
    sku: str


class VariantBatchCreate(SQLModel):
    selling_axes: List[AttributeAxis] = []
    selling_attributes: Optional[str] = Field(default=None, max_length=50)
    variants: List[VariantDraft]


class VariantBatchResult(SQLModel):
    product_id: int
    created: int
    items: List[Dict[str, Any]] = []
