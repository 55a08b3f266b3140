"""Fonctions utilitaires pour le module variants."""

from functools import reduce
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple, TypeVar

from storefront_inventory.catalog.models import AttributeAxis, AttributeValue
from .exceptions import InvalidSellingAttributesException

T = TypeVar("T")


def cartesian_product(value_lists: Sequence[Sequence[T]]) -> List[Tuple[T, ...]]:
    """Produit cartésien par pliage sur une liste d'axes de longueur quelconque.

    Sans axe, renvoie un unique tuple vide.
    """
    return reduce(
        lambda combos, values: [combo + (value,) for combo in combos for value in values],
        value_lists,
        [()],
    )


def distinct_values(values: Iterable[AttributeValue]) -> List[AttributeValue]:
    """Dédoublonne par id en conservant l'ordre de sélection."""
    seen = set()
    result = []
    for value in values:
        if value.id not in seen:
            seen.add(value.id)
            result.append(value)
    return result


def order_axes(axes: Iterable[AttributeAxis]) -> List[AttributeAxis]:
    selected = set(axes)
    return [axis for axis in AttributeAxis.ordered() if axis in selected]


def parse_selling_attributes(raw: Optional[str]) -> FrozenSet[AttributeAxis]:
    """Décode la chaîne stockée sur le produit, ex: "SIZE, color" -> {SIZE, COLOR}."""
    if not raw or not raw.strip():
        return frozenset()
    axes = set()
    for token in raw.split(","):
        token = token.strip().upper()
        if not token:
            continue
        try:
            axes.add(AttributeAxis(token))
        except ValueError:
            raise InvalidSellingAttributesException(raw)
    return frozenset(axes)


def build_selling_attributes(axes: Iterable[AttributeAxis]) -> str:
    return ",".join(axis.value for axis in order_axes(axes))
