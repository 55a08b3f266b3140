from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import Field

from storefront_inventory.core.schemas import FrozenModel


class AttributeAxis(str, Enum):
    """Axes d'attributs d'une variante. L'ordre de déclaration est l'ordre canonique."""
    COLOR = "COLOR"
    SIZE = "SIZE"
    ORIGIN = "ORIGIN"

    @classmethod
    def ordered(cls) -> Tuple["AttributeAxis", ...]:
        return (cls.COLOR, cls.SIZE, cls.ORIGIN)

    @property
    def field_prefix(self) -> str:
        # color_id / size_id / origin_id
        return self.value.lower()


class AttributeValue(FrozenModel):
    id: int
    name: str = Field(..., max_length=100)

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeValue):
            return NotImplemented
        return self.id == other.id


class AttributeCatalog(FrozenModel):
    """Les trois réservoirs de valeurs, tels que renvoyés par le backend."""
    colors: Tuple[AttributeValue, ...] = ()
    sizes: Tuple[AttributeValue, ...] = ()
    origins: Tuple[AttributeValue, ...] = ()

    def values(self, axis: AttributeAxis) -> Tuple[AttributeValue, ...]:
        if axis is AttributeAxis.COLOR:
            return self.colors
        if axis is AttributeAxis.SIZE:
            return self.sizes
        return self.origins

    def find(self, axis: AttributeAxis, value_id: int) -> Optional[AttributeValue]:
        return next((v for v in self.values(axis) if v.id == value_id), None)

    def as_dict(self) -> Dict[str, List[AttributeValue]]:
        return {axis.value: list(self.values(axis)) for axis in AttributeAxis.ordered()}
