# Standard Library
from typing import Any, AsyncGenerator, Dict, List, Optional

# Third-Party Libraries
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# First-Party Libraries
from storefront_inventory.main import app
from storefront_inventory.catalog.models import AttributeAxis
from storefront_inventory.gateway.dependencies import get_backend_gateway


COLORS = [{"id": 1, "name": "Red"}, {"id": 2, "name": "Blue"}]
SIZES = [{"id": 10, "name": "M"}, {"id": 11, "name": "L"}]
ORIGINS = [{"id": 100, "name": "Vietnam"}, {"id": 101, "name": "Japan"}]


class FakeBackendGateway:
    """Remplace BackendGateway: données en mémoire, appels enregistrés."""

    def __init__(self):
        self.attributes: Dict[AttributeAxis, List[Dict[str, Any]]] = {
            AttributeAxis.COLOR: list(COLORS),
            AttributeAxis.SIZE: list(SIZES),
            AttributeAxis.ORIGIN: list(ORIGINS),
        }
        self.stock_items: List[Dict[str, Any]] = []
        self.report_rows: List[Dict[str, Any]] = []
        self.created: List[Dict[str, Any]] = []
        self.stock_calls: List[Dict[str, Any]] = []
        self.report_calls: List[Dict[str, int]] = []
        self.error: Optional[Exception] = None

    def _maybe_fail(self):
        if self.error is not None:
            raise self.error

    async def list_attribute_values(self, axis: AttributeAxis) -> List[Dict[str, Any]]:
        self._maybe_fail()
        return self.attributes[axis]

    async def list_stock_items(self, keyword=None, stock_status=None, category_id=None, page=0, size=1000):
        self._maybe_fail()
        self.stock_calls.append(
            {"keyword": keyword, "stock_status": stock_status, "category_id": category_id, "page": page, "size": size}
        )
        return list(self.stock_items)

    async def get_monthly_report(self, year: int, month: int) -> Dict[str, Any]:
        self._maybe_fail()
        self.report_calls.append({"year": year, "month": month})
        return {"details": list(self.report_rows)}

    async def create_product_detail(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        self._maybe_fail()
        created = dict(payload, id=len(self.created) + 1)
        self.created.append(created)
        return created


# --- Fixtures de Base ---

@pytest.fixture
def fake_gateway() -> FakeBackendGateway:
    return FakeBackendGateway()


@pytest_asyncio.fixture(scope="function")
async def test_client(fake_gateway: FakeBackendGateway) -> AsyncGenerator[AsyncClient, None]:
    """Fournit un AsyncClient httpx branché sur l'application, backend remplacé par le faux gateway."""
    app.dependency_overrides[get_backend_gateway] = lambda: fake_gateway
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    del app.dependency_overrides[get_backend_gateway]
