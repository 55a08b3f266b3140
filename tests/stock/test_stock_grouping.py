from decimal import Decimal

import pytest

from storefront_inventory.stock.exceptions import InvalidPaginationException
from storefront_inventory.stock.models import StockItem, StockStatus
from storefront_inventory.stock.service import GroupedStock, group_stock_items, paginate_groups
from storefront_inventory.stock.utils import classify_stock_quantity, visible_pages


def item(product_id, status="NORMAL", qty=0, name=None, **extra) -> StockItem:
    return StockItem(
        product_detail_id=extra.pop("detail_id", None),
        product_id=product_id,
        product_name=name if name is not None else f"Product {product_id}",
        stock_status=status,
        stock_quantity=qty,
        **extra,
    )


def test_groups_by_product_with_urgency_first():
    items = [
        item(1, "NORMAL", 5),
        item(1, "OUT_OF_STOCK", 0),
        item(2, "LOW", 2),
    ]

    groups = group_stock_items(items)

    assert [g.product_id for g in groups] == [1, 2]
    first = groups[0]
    assert first.has_out_of_stock is True
    assert first.has_low_stock is False
    assert first.total_stock == 5
    assert first.total_variants == 2
    assert groups[1].has_low_stock is True


def test_aggregates_always_match_members():
    items = [item(i % 3, status, qty) for i, (status, qty) in enumerate(
        [("NORMAL", 10), ("LOW", 3), ("OUT_OF_STOCK", 0), ("NORMAL", 8), ("LOW", 1), ("NORMAL", 50)]
    )]

    for group in group_stock_items(items):
        assert group.total_stock == sum(v.stock_quantity for v in group.variants)
        assert group.total_variants == len(group.variants)
        assert group.has_out_of_stock == any(v.stock_status == StockStatus.OUT_OF_STOCK for v in group.variants)
        assert group.has_low_stock == any(v.stock_status == StockStatus.LOW for v in group.variants)


def test_sort_low_before_normal_then_case_insensitive_name():
    items = [
        item(1, "NORMAL", 9, name="banana"),
        item(2, "NORMAL", 9, name="Apple"),
        item(3, "LOW", 2, name="zucchini"),
        item(4, "OUT_OF_STOCK", 0, name="mango"),
        item(5, "LOW", 1, name="Cherry"),
    ]

    names = [g.product_name for g in group_stock_items(items)]

    assert names == ["mango", "Cherry", "zucchini", "Apple", "banana"]


def test_regrouping_same_input_gives_same_order():
    items = [item(i, "NORMAL", i, name=f"P{i % 4}") for i in range(1, 12)]
    assert group_stock_items(items) == group_stock_items(items)


def test_members_keep_first_seen_order():
    items = [item(7, detail_id=3), item(8), item(7, detail_id=1), item(7, detail_id=2)]

    group = next(g for g in group_stock_items(items) if g.product_id == 7)

    assert [v.product_detail_id for v in group.variants] == [3, 1, 2]


def test_items_without_product_go_to_unassigned_group():
    items = [
        StockItem(product_id=None, product_name=None, stock_quantity=4),
        StockItem(product_id=0, product_name=None, stock_quantity=1),
        item(3, "NORMAL", 2),
    ]

    groups = group_stock_items(items)

    unassigned = next(g for g in groups if g.product_id == 0)
    assert unassigned.product_name == "Không xác định"
    assert unassigned.total_variants == 2
    assert unassigned.total_stock == 5
    assert sum(g.total_variants for g in groups) == len(items)


def test_group_takes_display_fields_from_first_member():
    items = [
        item(1, product_thumbnail="a.png", category_name="Áo", brand_name="Coolmate"),
        item(1, product_thumbnail="b.png", category_name="Quần", brand_name="Other"),
    ]

    group = group_stock_items(items)[0]

    assert (group.thumbnail, group.category_name, group.brand_name) == ("a.png", "Áo", "Coolmate")


def test_null_quantity_counts_as_zero():
    stock_item = StockItem.model_validate({"product_id": 1, "stock_quantity": None, "price": None})
    assert stock_item.stock_quantity == 0
    assert stock_item.price == Decimal("0")


def test_variant_display_label():
    assert item(1, color_name="Đỏ", size_name="M").variant_display == "Đỏ / M"
    assert item(1).variant_display == "Mặc định"


# --- Pagination ---

def test_pagination_slices_sorted_groups():
    groups = group_stock_items([item(i, "NORMAL", 10, name=f"P{i:02d}") for i in range(1, 46)])

    first = paginate_groups(groups, page=0, size=20)
    last = paginate_groups(groups, page=2, size=20)

    assert first.total == 45
    assert first.total_pages == 3
    assert [g.product_name for g in first.items][:2] == ["P01", "P02"]
    assert len(last.items) == 5
    assert last.visible_pages == [0, 1, 2]


def test_page_past_the_end_is_empty():
    groups = group_stock_items([item(1)])
    page = paginate_groups(groups, page=4, size=20)
    assert page.items == []
    assert page.total == 1


def test_empty_input_gives_empty_page():
    page = GroupedStock([]).page(0, 20)
    assert page.items == []
    assert page.total_pages == 0
    assert page.visible_pages == []


@pytest.mark.parametrize("page, size", [(-1, 20), (0, 0), (0, -5)])
def test_invalid_pagination_rejected(page, size):
    with pytest.raises(InvalidPaginationException):
        paginate_groups([], page, size)


def test_changing_page_does_not_regroup(mocker):
    grouped = GroupedStock([item(i, "NORMAL", 10) for i in range(1, 6)])
    spy = mocker.patch("storefront_inventory.stock.service.group_stock_items")

    assert len(grouped.page(0, 2).items) == 2
    assert len(grouped.page(2, 2).items) == 1
    spy.assert_not_called()


def test_default_page_size_comes_from_settings():
    grouped = GroupedStock([item(i) for i in range(1, 30)])
    assert grouped.page().size == 20
    assert len(grouped.page().items) == 20


# --- Helpers ---

@pytest.mark.parametrize(
    "quantity, expected",
    [(-3, StockStatus.OUT_OF_STOCK), (0, StockStatus.OUT_OF_STOCK), (1, StockStatus.LOW),
     (5, StockStatus.LOW), (6, StockStatus.NORMAL)],
)
def test_classify_stock_quantity_default_threshold(quantity, expected):
    assert classify_stock_quantity(quantity) is expected


def test_classify_stock_quantity_custom_threshold():
    assert classify_stock_quantity(8, low_threshold=10) is StockStatus.LOW


@pytest.mark.parametrize(
    "current, total, expected",
    [(0, 1, [0]), (0, 10, [0, 1, 2]), (5, 10, [3, 4, 5, 6, 7]), (9, 10, [7, 8, 9]), (0, 0, [])],
)
def test_visible_pages_window(current, total, expected):
    assert visible_pages(current, total) == expected


def test_status_labels():
    assert StockStatus.NORMAL.label == "Còn hàng"
    assert StockStatus.LOW.label == "Sắp hết"
    assert StockStatus.OUT_OF_STOCK.label == "Hết hàng"


def test_unknown_backend_status_is_kept_as_is():
    stock_item = StockItem.model_validate(
        {"product_id": 1, "product_name": "A", "stock_quantity": 3, "stock_status": "DISCONTINUED"}
    )

    assert stock_item.stock_status == "DISCONTINUED"
    assert StockItem.model_validate({"product_id": 1, "stock_status": "LOW"}).stock_status is StockStatus.LOW


def test_unknown_status_does_not_raise_group_flags():
    groups = group_stock_items([
        StockItem.model_validate({"product_id": 1, "product_name": "A", "stock_quantity": 3, "stock_status": "DISCONTINUED"}),
        item(1, "OUT_OF_STOCK", 0, name="A"),
        StockItem.model_validate({"product_id": 2, "product_name": "B", "stock_quantity": 1, "stock_status": "RESERVED"}),
    ])

    assert [g.product_id for g in groups] == [1, 2]
    assert groups[0].has_out_of_stock is True
    assert groups[0].total_stock == 3
    assert groups[1].has_low_stock is False
    assert groups[1].has_out_of_stock is False
