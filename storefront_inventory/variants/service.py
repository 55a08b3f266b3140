import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from storefront_inventory.catalog.models import AttributeAxis, AttributeCatalog, AttributeValue
from storefront_inventory.catalog.service import AttributeCatalogService
from storefront_inventory.gateway.client import BackendGateway
from .config import settings
from .exceptions import (
    ConflictingAxisException,
    MissingAxisValuesException,
    UnknownAttributeValueException,
    VariantValidationException,
)
from .models import VariantDraft, VariantMatrixRequest
from .utils import cartesian_product, distinct_values, order_axes, parse_selling_attributes

logger = logging.getLogger(__name__)


def generate_sku(base_sku: Optional[str], values: Sequence[AttributeValue]) -> str:
    """Propose un SKU: base + noms des valeurs en majuscules, dans l'ordre COLOR, SIZE, ORIGIN.

    Sans valeur contributive, le suffixe fixe évite la collision avec le SKU du produit.
    Le résultat est une suggestion éditable; l'unicité est garantie par le backend.
    """
    base = (base_sku or "").strip() or settings.DEFAULT_BASE_SKU
    parts = [value.name.strip().upper() for value in values if value.name and value.name.strip()]
    suffix = "-".join(parts) if parts else settings.EMPTY_SKU_SUFFIX
    return f"{base}-{suffix}"


def build_matrix(
    base_price: Decimal,
    selling_axes: Iterable[AttributeAxis],
    selected_values: Mapping[AttributeAxis, Sequence[AttributeValue]],
    display_values: Optional[Mapping[AttributeAxis, AttributeValue]] = None,
    base_sku: Optional[str] = None,
) -> List[VariantDraft]:
    """Développe la sélection d'attributs en l'ensemble dense des variantes vendables.

    Chaque combinaison des axes de vente donne une variante au prix de base et au
    stock nul. Les axes d'affichage ajoutent la même valeur à toutes les variantes
    sans multiplier leur nombre. Sans axe de vente, une seule variante est produite.

    Raises:
        ConflictingAxisException: un axe est à la fois de vente et d'affichage.
        MissingAxisValuesException: un axe de vente n'a aucune valeur.
    """
    display_values = dict(display_values or {})
    axes = order_axes(selling_axes)

    conflicts = set(axes) & set(display_values)
    if conflicts:
        raise ConflictingAxisException(conflicts)
    for axis in axes:
        if not selected_values.get(axis):
            raise MissingAxisValuesException(axis)

    value_lists = [distinct_values(selected_values[axis]) for axis in axes]
    display_fields = _axis_fields(display_values.items())

    variants = []
    for combo in cartesian_product(value_lists):
        fields = _axis_fields(zip(axes, combo))
        fields.update(display_fields)
        variants.append(
            VariantDraft(
                sku=generate_sku(base_sku, combo),
                price=base_price,
                stock_quantity=0,
                **fields,
            )
        )

    logger.debug(f"[VariantMatrix] axes={[a.value for a in axes]} tailles={[len(v) for v in value_lists]} -> {len(variants)} variantes")
    return variants


def validate_variants(variants: Sequence[VariantDraft], selling_axes: Iterable[AttributeAxis]) -> List[str]:
    """Contrôles préalables à la persistance. Renvoie la liste des erreurs (vide si valide)."""
    axes = order_axes(selling_axes)
    errors = []

    if axes and not variants:
        errors.append("Sélectionnez au moins une valeur pour chaque attribut de vente.")
    if any(v.price is None or v.price <= 0 for v in variants):
        errors.append("Toutes les variantes doivent avoir un prix > 0.")
    if any(v.stock_quantity < 0 for v in variants):
        errors.append("Le stock d'une variante ne peut pas être négatif.")
    if any(not v.sku or not v.sku.strip() for v in variants):
        errors.append("Chaque variante doit avoir un SKU.")
    if any(v.sku and len(v.sku) > settings.SKU_MAX_LENGTH for v in variants):
        errors.append(f"Le SKU ne doit pas dépasser {settings.SKU_MAX_LENGTH} caractères.")
    if any(v.price is not None and _decimal_places(v.price) > settings.PRICE_DECIMAL_PLACES for v in variants):
        errors.append(f"Le prix ne peut pas avoir plus de {settings.PRICE_DECIMAL_PLACES} décimales.")

    for axis in axes:
        if any(v.axis_value_id(axis) is None for v in variants):
            errors.append(f"Chaque variante doit porter une valeur pour l'attribut de vente {axis.value}.")

    seen = set()
    duplicates = []
    for v in variants:
        if v.attribute_key in seen:
            duplicates.append(v.sku)
        seen.add(v.attribute_key)
    if duplicates:
        errors.append(f"Combinaisons d'attributs en double: {', '.join(duplicates)}.")

    return errors


def ensure_persistable(variants: Sequence[VariantDraft], selling_axes: Iterable[AttributeAxis]) -> None:
    errors = validate_variants(variants, selling_axes)
    if errors:
        raise VariantValidationException(errors)


def detect_selling_axes(variants: Iterable[Any]) -> frozenset:
    """Déduit les axes de vente d'un produit à partir de ses variantes existantes.

    Sert de repli quand le produit n'a pas d'attributs de vente enregistrés.
    Accepte des VariantDraft ou des dictionnaires bruts du backend.
    """
    variants = list(variants)
    detected = set()
    for axis in AttributeAxis.ordered():
        key = f"{axis.field_prefix}_id"
        for v in variants:
            value = v.get(key) if isinstance(v, dict) else getattr(v, key, None)
            if value is not None:
                detected.add(axis)
                break
    return frozenset(detected)


def resolve_selling_axes(
    selling_axes: Iterable[AttributeAxis],
    selling_attributes: Optional[str] = None,
    variants: Iterable[Any] = (),
) -> List[AttributeAxis]:
    """Axes de vente du produit, par ordre de priorité.

    1. les axes explicites de la requête;
    2. la chaîne enregistrée sur le produit (ex. "SIZE,COLOR");
    3. à défaut, les axes portés par les variantes existantes.

    Raises:
        InvalidSellingAttributesException: la chaîne contient un axe inconnu.
    """
    axes = order_axes(selling_axes)
    if axes:
        return axes
    if selling_attributes and selling_attributes.strip():
        return order_axes(parse_selling_attributes(selling_attributes))
    return order_axes(detect_selling_axes(variants))


def _decimal_places(value: Decimal) -> int:
    exponent = value.normalize().as_tuple().exponent
    return -exponent if isinstance(exponent, int) and exponent < 0 else 0


def _axis_fields(pairs: Iterable) -> Dict[str, Any]:
    fields = {}
    for axis, value in pairs:
        fields[f"{axis.field_prefix}_id"] = value.id
        fields[f"{axis.field_prefix}_name"] = value.name
    return fields


class VariantService:
    """Service applicatif: résolution des sélections, génération et persistance des variantes."""

    def __init__(self, gateway: BackendGateway, catalog_service: AttributeCatalogService):
        self.gateway = gateway
        self.catalog_service = catalog_service

    def resolve_selection(
        self,
        request: VariantMatrixRequest,
        catalog: AttributeCatalog,
        selling_axes: Sequence[AttributeAxis],
    ):
        """Remplace les ids de la requête par les valeurs du référentiel."""
        selected: Dict[AttributeAxis, List[AttributeValue]] = {}
        for axis, value_ids in request.selected_value_ids.items():
            if axis not in selling_axes:
                # Valeurs cochées sur un axe qui n'est pas de vente: ignorées
                continue
            selected[axis] = [self._lookup(catalog, axis, value_id) for value_id in value_ids]

        display = {
            axis: self._lookup(catalog, axis, value_id)
            for axis, value_id in request.display_value_ids.items()
        }
        return selected, display

    @staticmethod
    def _lookup(catalog: AttributeCatalog, axis: AttributeAxis, value_id: int) -> AttributeValue:
        value = catalog.find(axis, value_id)
        if value is None:
            raise UnknownAttributeValueException(axis, value_id)
        return value

    async def generate(
        self,
        request: VariantMatrixRequest,
        selling_axes: Optional[Sequence[AttributeAxis]] = None,
    ) -> List[VariantDraft]:
        if selling_axes is None:
            selling_axes = resolve_selling_axes(request.selling_axes, request.selling_attributes)
        catalog = await self.catalog_service.load_catalog()
        selected, display = self.resolve_selection(request, catalog, selling_axes)
        return build_matrix(
            base_price=request.base_price,
            selling_axes=selling_axes,
            selected_values=selected,
            display_values=display,
            base_sku=request.base_sku,
        )

    async def suggest_sku(
        self,
        base_sku: Optional[str],
        selling_axes: Iterable[AttributeAxis],
        value_ids: Mapping[AttributeAxis, Optional[int]],
    ) -> str:
        """SKU pour une combinaison saisie à la main (éditeur de variante unitaire)."""
        axes = [axis for axis in order_axes(selling_axes) if value_ids.get(axis)]
        values = []
        if axes:
            catalog = await self.catalog_service.load_catalog()
            values = [self._lookup(catalog, axis, value_ids[axis]) for axis in axes]
        return generate_sku(base_sku, values)

    async def create_variants(
        self,
        product_id: int,
        variants: Sequence[VariantDraft],
        selling_axes: Iterable[AttributeAxis],
        selling_attributes: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Persiste un jeu de variantes via le backend, après validation complète.

        Sans axes explicites, les axes de vente viennent de la chaîne enregistrée
        sur le produit, puis des variantes elles-mêmes.
        """
        selling_axes = resolve_selling_axes(selling_axes, selling_attributes, variants)
        ensure_persistable(variants, selling_axes)

        logger.info(f"[VariantService] Persistance de {len(variants)} variantes pour le produit {product_id}")
        created = []
        for variant in variants:
            created.append(await self.gateway.create_product_detail(variant.to_payload(product_id)))
        return created
