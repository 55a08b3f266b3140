import asyncio
import logging
from typing import Any, Dict, List, Tuple

from storefront_inventory.gateway.client import BackendGateway
from .models import AttributeAxis, AttributeCatalog, AttributeValue

logger = logging.getLogger(__name__)


class AttributeCatalogService:
    """Charge les réservoirs d'attributs depuis le backend."""

    def __init__(self, gateway: BackendGateway):
        self.gateway = gateway

    async def load_catalog(self) -> AttributeCatalog:
        """Charge couleurs, tailles et origines en parallèle.

        Le catalogue n'est construit qu'une fois les trois réponses arrivées;
        une erreur sur un axe fait échouer le chargement complet.
        """
        axes = AttributeAxis.ordered()
        raw_pools = await asyncio.gather(
            *(self.gateway.list_attribute_values(axis) for axis in axes)
        )
        pools = {axis: _to_values(raw) for axis, raw in zip(axes, raw_pools)}
        logger.debug(
            f"[AttributeCatalog] Chargé: {len(pools[AttributeAxis.COLOR])} couleurs, "
            f"{len(pools[AttributeAxis.SIZE])} tailles, {len(pools[AttributeAxis.ORIGIN])} origines"
        )
        return AttributeCatalog(
            colors=pools[AttributeAxis.COLOR],
            sizes=pools[AttributeAxis.SIZE],
            origins=pools[AttributeAxis.ORIGIN],
        )


def _to_values(raw: List[Dict[str, Any]]) -> Tuple[AttributeValue, ...]:
    values: Dict[int, AttributeValue] = {}
    for entry in raw:
        value = AttributeValue.model_validate(entry)
        # l'identité d'une valeur est son id: on garde la première occurrence
        values.setdefault(value.id, value)
    return tuple(values.values())
