from decimal import Decimal
from itertools import product

import pytest

from storefront_inventory.catalog.models import AttributeAxis, AttributeValue
from storefront_inventory.variants import (
    build_matrix,
    build_selling_attributes,
    detect_selling_axes,
    ensure_persistable,
    generate_sku,
    parse_selling_attributes,
    resolve_selling_axes,
    validate_variants,
)
from storefront_inventory.variants.exceptions import (
    ConflictingAxisException,
    InvalidSellingAttributesException,
    MissingAxisValuesException,
    VariantValidationException,
)
from storefront_inventory.variants.utils import cartesian_product

RED = AttributeValue(id=1, name="Red")
BLUE = AttributeValue(id=2, name="Blue")
GREEN = AttributeValue(id=3, name="Green")
M = AttributeValue(id=10, name="M")
L = AttributeValue(id=11, name="L")
VIETNAM = AttributeValue(id=100, name="Vietnam")
JAPAN = AttributeValue(id=101, name="Japan")

COLOR, SIZE, ORIGIN = AttributeAxis.COLOR, AttributeAxis.SIZE, AttributeAxis.ORIGIN


def test_color_size_matrix_produces_every_combination():
    variants = build_matrix(
        base_price=Decimal("100"),
        selling_axes={COLOR, SIZE},
        selected_values={COLOR: [RED, BLUE], SIZE: [M, L]},
    )

    assert [(v.color_name, v.size_name) for v in variants] == [
        ("Red", "M"), ("Red", "L"), ("Blue", "M"), ("Blue", "L"),
    ]
    assert all(v.price == Decimal("100") for v in variants)
    assert all(v.stock_quantity == 0 for v in variants)
    assert all(v.origin_id is None for v in variants)


def test_no_selling_axes_produces_one_variant_with_display_origin():
    variants = build_matrix(
        base_price=Decimal("250000"),
        selling_axes=set(),
        selected_values={},
        display_values={ORIGIN: VIETNAM},
    )

    assert len(variants) == 1
    only = variants[0]
    assert only.origin_id == VIETNAM.id
    assert only.color_id is None and only.size_id is None
    assert only.sku == "PROD-NEW"


@pytest.mark.parametrize(
    "colors, sizes, origins",
    [([RED], [], []), ([RED, BLUE, GREEN], [M, L], []), ([RED, BLUE], [M, L], [VIETNAM, JAPAN]), ([], [M], [JAPAN])],
)
def test_variant_count_is_product_of_axis_sizes(colors, sizes, origins):
    selected = {COLOR: colors, SIZE: sizes, ORIGIN: origins}
    axes = {axis for axis, values in selected.items() if values}

    variants = build_matrix(Decimal("10"), axes, selected)

    expected = max(len(colors), 1) * max(len(sizes), 1) * max(len(origins), 1)
    assert len(variants) == expected
    assert len({v.attribute_key for v in variants}) == expected


def test_axis_order_is_fixed_regardless_of_declaration_order():
    variants = build_matrix(
        Decimal("10"),
        [ORIGIN, SIZE, COLOR],
        {ORIGIN: [JAPAN], SIZE: [M], COLOR: [RED]},
        base_sku="TSHIRT",
    )
    assert variants[0].sku == "TSHIRT-RED-M-JAPAN"


def test_display_value_is_stamped_on_every_variant_without_branching():
    variants = build_matrix(
        Decimal("10"),
        {COLOR},
        {COLOR: [RED, BLUE]},
        display_values={SIZE: M},
    )

    assert len(variants) == 2
    assert {v.size_id for v in variants} == {M.id}
    assert [v.sku for v in variants] == ["PROD-RED", "PROD-BLUE"]


def test_duplicate_selected_values_do_not_duplicate_variants():
    variants = build_matrix(Decimal("10"), {COLOR}, {COLOR: [RED, RED, BLUE]})
    assert [v.color_id for v in variants] == [RED.id, BLUE.id]


def test_build_matrix_is_idempotent():
    args = (Decimal("55.5"), {COLOR, ORIGIN}, {COLOR: [RED, BLUE], ORIGIN: [VIETNAM]})
    first = build_matrix(*args, base_sku="AO")
    second = build_matrix(*args, base_sku="AO")

    assert [v.model_dump() for v in first] == [v.model_dump() for v in second]


def test_selling_axis_without_values_is_rejected():
    with pytest.raises(MissingAxisValuesException) as exc_info:
        build_matrix(Decimal("10"), {COLOR, SIZE}, {COLOR: [RED], SIZE: []})
    assert exc_info.value.axis is SIZE


def test_axis_both_selling_and_display_is_rejected():
    with pytest.raises(ConflictingAxisException) as exc_info:
        build_matrix(Decimal("10"), {COLOR}, {COLOR: [RED]}, display_values={COLOR: BLUE})
    assert exc_info.value.axes == [COLOR]


def test_zero_price_still_builds_but_fails_validation():
    variants = build_matrix(Decimal("0"), {SIZE}, {SIZE: [M, L]})

    assert len(variants) == 2
    errors = validate_variants(variants, {SIZE})
    assert errors == ["Toutes les variantes doivent avoir un prix > 0."]
    with pytest.raises(VariantValidationException) as exc_info:
        ensure_persistable(variants, {SIZE})
    assert exc_info.value.errors == errors


def test_validation_reports_empty_set_and_duplicates():
    assert validate_variants([], {COLOR}) == ["Sélectionnez au moins une valeur pour chaque attribut de vente."]

    variants = build_matrix(Decimal("10"), {COLOR}, {COLOR: [RED]})
    errors = validate_variants(variants + variants, {COLOR})
    assert errors == ["Combinaisons d'attributs en double: PROD-RED."]


def test_validation_requires_selling_axis_value_on_each_variant():
    variants = build_matrix(Decimal("10"), set(), {})
    errors = validate_variants(variants, {COLOR})
    assert errors == ["Chaque variante doit porter une valeur pour l'attribut de vente COLOR."]


def test_valid_matrix_has_no_validation_errors():
    variants = build_matrix(Decimal("10"), {COLOR, SIZE}, {COLOR: [RED], SIZE: [M, L]})
    assert validate_variants(variants, {COLOR, SIZE}) == []


# --- SKU ---

def test_generate_sku_uppercases_names_in_given_order():
    assert generate_sku("ao-thun", [RED, AttributeValue(id=12, name="xl")]) == "ao-thun-RED-XL"


def test_generate_sku_falls_back_to_default_base_and_suffix():
    assert generate_sku(None, []) == "PROD-NEW"
    assert generate_sku("  ", [M]) == "PROD-M"
    assert generate_sku("BASE", []) == "BASE-NEW"


# --- Selling attributes codec ---

def test_parse_selling_attributes_is_lenient_on_case_and_spaces():
    assert parse_selling_attributes(" size, Color ,") == frozenset({SIZE, COLOR})
    assert parse_selling_attributes("") == frozenset()
    assert parse_selling_attributes(None) == frozenset()


def test_parse_selling_attributes_rejects_unknown_axis():
    with pytest.raises(InvalidSellingAttributesException):
        parse_selling_attributes("COLOR,MATERIAL")


def test_build_selling_attributes_uses_canonical_order():
    assert build_selling_attributes([ORIGIN, COLOR]) == "COLOR,ORIGIN"
    assert build_selling_attributes([]) == ""


def test_detect_selling_axes_from_existing_variants():
    existing = [
        {"sku": "A", "color_id": 1, "size_id": None},
        {"sku": "B", "color_id": 2, "size_id": 10},
    ]
    assert detect_selling_axes(existing) == frozenset({COLOR, SIZE})
    assert detect_selling_axes(build_matrix(Decimal("1"), set(), {})) == frozenset()


def test_cartesian_product_matches_itertools():
    lists = [[1, 2], ["a"], [True, False]]
    assert cartesian_product(lists) == list(product(*lists))
    assert cartesian_product([]) == [()]


# --- Long SKU and price precision ---

def test_overlong_generated_sku_is_reported_not_raised():
    long_color = AttributeValue(id=50, name="C" * 36)
    long_size = AttributeValue(id=60, name="S" * 29)

    variants = build_matrix(Decimal("10"), {COLOR, SIZE}, {COLOR: [long_color], SIZE: [long_size]}, base_sku="B" * 41)

    assert len(variants[0].sku) == 108
    assert validate_variants(variants, {COLOR, SIZE}) == ["Le SKU ne doit pas dépasser 100 caractères."]


def test_price_with_three_decimals_is_reported_not_raised():
    variants = build_matrix(Decimal("10.005"), set(), {})

    assert variants[0].price == Decimal("10.005")
    assert validate_variants(variants, set()) == ["Le prix ne peut pas avoir plus de 2 décimales."]


def test_trailing_zero_decimals_are_not_a_precision_error():
    variants = build_matrix(Decimal("10.500"), set(), {})
    assert validate_variants(variants, set()) == []


# --- Selling axes resolution ---

def test_resolve_selling_axes_prefers_explicit_axes():
    assert resolve_selling_axes([SIZE, COLOR], "ORIGIN") == [COLOR, SIZE]


def test_resolve_selling_axes_reads_stored_string():
    assert resolve_selling_axes([], "size, color") == [COLOR, SIZE]


def test_resolve_selling_axes_falls_back_to_existing_variants():
    existing = [{"sku": "A", "origin_id": 100}, {"sku": "B", "size_id": 10}]
    assert resolve_selling_axes([], None, existing) == [SIZE, ORIGIN]
    assert resolve_selling_axes([], "  ", []) == []


def test_resolve_selling_axes_rejects_unknown_stored_axis():
    with pytest.raises(InvalidSellingAttributesException):
        resolve_selling_axes([], "COLOR,WEIGHT")
