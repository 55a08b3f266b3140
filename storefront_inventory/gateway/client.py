import logging
from typing import Any, Dict, List, Optional

import httpx

from storefront_inventory.catalog.models import AttributeAxis
from .exceptions import BackendResponseException, BackendUnavailableException

logger = logging.getLogger(__name__)

ATTRIBUTE_ENDPOINTS: Dict[AttributeAxis, str] = {
    AttributeAxis.COLOR: "/colors",
    AttributeAxis.SIZE: "/sizes",
    AttributeAxis.ORIGIN: "/origins",
}


class BackendGateway:
    """Client HTTP asynchrone vers le backend REST de la boutique.

    Le backend enveloppe ses réponses dans ``{"message", "status", "data"}``;
    seules les données utiles (``data``) sont renvoyées aux appelants.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        logger.debug(f"[BackendGateway] {method} {path} {kwargs.get('params') or ''}")
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"[BackendGateway] Timeout sur {method} {path}", exc_info=True)
            raise BackendUnavailableException(path, "délai dépassé") from e
        except httpx.TransportError as e:
            logger.error(f"[BackendGateway] Erreur transport sur {method} {path}: {e}", exc_info=True)
            raise BackendUnavailableException(path, str(e)) from e

        if response.is_error:
            detail = _extract_message(response)
            logger.error(f"[BackendGateway] {method} {path} -> HTTP {response.status_code}: {detail}")
            raise BackendResponseException(path, response.status_code, detail)

        try:
            payload = response.json()
        except ValueError as e:
            raise BackendResponseException(path, response.status_code, "corps JSON illisible") from e

        if isinstance(payload, dict) and "data" in payload:
            return payload["data"]
        return payload

    # --- Référentiel d'attributs ---

    async def list_attribute_values(self, axis: AttributeAxis) -> List[Dict[str, Any]]:
        """Récupère toutes les valeurs d'un axe (couleurs, tailles ou origines)."""
        data = await self._request("GET", ATTRIBUTE_ENDPOINTS[axis])
        return list(data or [])

    # --- Inventaire ---

    async def list_stock_items(
        self,
        keyword: Optional[str] = None,
        stock_status: Optional[str] = None,
        category_id: Optional[int] = None,
        page: int = 0,
        size: int = 1000,
    ) -> List[Dict[str, Any]]:
        """Liste à plat des variantes en stock, filtrée côté backend."""
        params: Dict[str, Any] = {"page": page, "size": size}
        if keyword:
            params["keyword"] = keyword
        if stock_status:
            params["stock_status"] = stock_status
        if category_id:
            params["category_id"] = category_id

        data = await self._request("GET", "/inventory/stock", params=params)
        if isinstance(data, dict):
            # Réponse paginée façon Spring: {"content": [...], "totalPages": ...}
            return list(data.get("content") or [])
        return list(data or [])

    async def get_monthly_report(self, year: int, month: int) -> Dict[str, Any]:
        """Rapport mensuel brut: soldes d'ouverture et totaux de mouvements par variante."""
        data = await self._request(
            "GET", "/inventory/report/monthly", params={"year": year, "month": month}
        )
        if data is None:
            return {"details": []}
        if isinstance(data, list):
            return {"details": data}
        return data

    # --- Variantes produit ---

    async def create_product_detail(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Persiste une variante (product detail) côté backend."""
        logger.info(f"[BackendGateway] Création variante SKU={payload.get('sku')} pour produit {payload.get('product_id')}")
        data = await self._request("POST", "/product-details", json=payload)
        return data or {}


def _extract_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict):
        return body.get("message") or body.get("detail")
    return None
