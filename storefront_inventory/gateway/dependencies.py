from typing import Annotated, AsyncGenerator, Dict

import httpx
from fastapi import Depends

from storefront_inventory.core.config import settings
from .client import BackendGateway


def _default_headers() -> Dict[str, str]:
    headers = {"Accept": "application/json"}
    if settings.BACKEND_API_TOKEN:
        headers["Authorization"] = f"Bearer {settings.BACKEND_API_TOKEN}"
    return headers


async def get_backend_gateway() -> AsyncGenerator[BackendGateway, None]:
    """
    Fournit un BackendGateway adossé à un httpx.AsyncClient le temps d'une requête.

    Returns:
        BackendGateway: Client configuré sur BACKEND_BASE_URL
    """
    async with httpx.AsyncClient(
        base_url=settings.BACKEND_BASE_URL,
        timeout=settings.BACKEND_TIMEOUT_SECONDS,
        headers=_default_headers(),
    ) as client:
        yield BackendGateway(client)


BackendGatewayDep = Annotated[BackendGateway, Depends(get_backend_gateway)]
