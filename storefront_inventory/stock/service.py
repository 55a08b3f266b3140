import logging
from typing import Dict, Iterable, List, Optional, Sequence

from storefront_inventory.gateway.client import BackendGateway
from .config import settings
from .constants import UNASSIGNED_PRODUCT_ID, UNASSIGNED_PRODUCT_NAME
from .exceptions import InvalidPaginationException
from .models import ProductStockGroup, StockGroupPage, StockItem, StockStatus
from .utils import count_pages, visible_pages

logger = logging.getLogger(__name__)


def _group_sort_key(group: ProductStockGroup):
    # Hết hàng d'abord, puis sắp hết, puis ordre alphabétique insensible à la casse
    return (not group.has_out_of_stock, not group.has_low_stock, group.product_name.casefold())


def group_stock_items(items: Iterable[StockItem]) -> List[ProductStockGroup]:
    """
    Regroupe une liste à plat de StockItem par produit parent.

    Les articles sans product_id (absent ou 0) sont rassemblés dans un groupe
    sentinelle "Không xác định" plutôt qu'ignorés. Dans chaque groupe, les
    variantes gardent leur ordre d'apparition.

    Args:
        items: Articles de stock tels que renvoyés par le backend

    Returns:
        List[ProductStockGroup]: Groupes triés par urgence de réapprovisionnement
    """
    members: Dict[int, List[StockItem]] = {}
    heads: Dict[int, StockItem] = {}
    unassigned = 0

    for item in items:
        product_id = item.product_id or UNASSIGNED_PRODUCT_ID
        if product_id == UNASSIGNED_PRODUCT_ID:
            unassigned += 1
        if product_id not in members:
            members[product_id] = []
            heads[product_id] = item
        members[product_id].append(item)

    if unassigned:
        logger.warning(f"[StockAggregator] {unassigned} article(s) sans produit regroupé(s) sous '{UNASSIGNED_PRODUCT_NAME}'")

    groups = [
        ProductStockGroup(
            product_id=product_id,
            product_name=heads[product_id].product_name or UNASSIGNED_PRODUCT_NAME,
            thumbnail=heads[product_id].product_thumbnail or "",
            category_name=heads[product_id].category_name or "",
            brand_name=heads[product_id].brand_name or "",
            variants=tuple(variants),
        )
        for product_id, variants in members.items()
    ]
    groups.sort(key=_group_sort_key)
    logger.debug(f"[StockAggregator] {sum(len(v) for v in members.values())} article(s) -> {len(groups)} groupe(s)")
    return groups


def paginate_groups(groups: Sequence[ProductStockGroup], page: int, size: int) -> StockGroupPage:
    """Découpe la liste déjà triée en pages (index de page à partir de 0)."""
    if page < 0 or size <= 0:
        raise InvalidPaginationException(page, size)

    total = len(groups)
    total_pages = count_pages(total, size)
    if page >= total_pages and total:
        logger.warning(f"[StockAggregator] Page {page} hors limites ({total_pages} page(s))")

    start = page * size
    return StockGroupPage(
        items=list(groups[start:start + size]),
        total=total,
        page=page,
        size=size,
        total_pages=total_pages,
        visible_pages=visible_pages(page, total_pages),
    )


class GroupedStock:
    """
    Résultat d'un passage de regroupement.

    Changer de page ne relance pas le regroupement: seule la liste déjà
    triée est redécoupée. Un nouveau GroupedStock est construit lorsque la
    liste d'articles change (filtre, recherche).
    """

    def __init__(self, items: Iterable[StockItem]):
        self.groups: List[ProductStockGroup] = group_stock_items(items)

    def __len__(self) -> int:
        return len(self.groups)

    def page(self, page: int = 0, size: Optional[int] = None) -> StockGroupPage:
        return paginate_groups(self.groups, page, size or settings.DEFAULT_PAGE_SIZE)


class StockService:
    """Service de consultation du stock, regroupé par produit."""

    def __init__(self, gateway: BackendGateway):
        self.gateway = gateway

    async def load_grouped_stock(
        self,
        keyword: Optional[str] = None,
        stock_status: Optional[StockStatus] = None,
        category_id: Optional[int] = None,
    ) -> GroupedStock:
        """Récupère la liste à plat du backend (une seule page de FETCH_SIZE) puis la regroupe."""
        logger.info(f"[StockService] Chargement du stock (keyword={keyword!r}, status={stock_status}, category={category_id})")
        rows = await self.gateway.list_stock_items(
            keyword=keyword,
            stock_status=stock_status.value if stock_status else None,
            category_id=category_id,
            page=0,
            size=settings.FETCH_SIZE,
        )
        return GroupedStock(StockItem.model_validate(row) for row in rows)

    async def get_stock_page(
        self,
        keyword: Optional[str] = None,
        stock_status: Optional[StockStatus] = None,
        category_id: Optional[int] = None,
        page: int = 0,
        size: Optional[int] = None,
    ) -> StockGroupPage:
        grouped = await self.load_grouped_stock(keyword, stock_status, category_id)
        return grouped.page(page, size)
