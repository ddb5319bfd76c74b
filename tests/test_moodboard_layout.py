from types import SimpleNamespace

import pytest

from AuraBoard.utils.moodboard_layout import (
    LANDSCAPE,
    PORTRAIT,
    SQUARE,
    detect_orientation,
    get_product_orientation,
    pack_layout_pages,
    resolve_moodboard_layout,
)


def product(orientation=None, aspect_ratio=None, id="p"):
    return SimpleNamespace(id=id, orientation=orientation, aspect_ratio=aspect_ratio)


def spans(slots):
    return [(s.grid_column, s.grid_row) for s in slots]


def test_empty_input_gives_empty_layout():
    assert resolve_moodboard_layout([]) == []


@pytest.mark.parametrize("orientation, expected", [
    (LANDSCAPE, (3, 2)),
    (PORTRAIT, (1, 2)),
    (SQUARE, (2, 2)),
])
def test_hero_spans(orientation, expected):
    slots = resolve_moodboard_layout([product(orientation)])
    assert spans(slots) == [expected]
    assert slots[0].hero


@pytest.mark.parametrize("orientation, expected", [
    (LANDSCAPE, (2, 1)),
    (PORTRAIT, (1, 2)),
    (SQUARE, (1, 1)),
])
def test_standard_spans(orientation, expected):
    slots = resolve_moodboard_layout([product(SQUARE), product(orientation)])
    assert spans(slots)[1] == expected
    assert not slots[1].hero


def test_first_slot_always_two_rows_and_rest_never_more():
    items = [product(o) for o in (PORTRAIT, LANDSCAPE, SQUARE, PORTRAIT, None, LANDSCAPE)]
    slots = resolve_moodboard_layout(items)
    assert slots[0].grid_row == 2
    assert all(s.grid_row in (1, 2) for s in slots[1:])


def test_three_products_keep_curation_order():
    items = [product(SQUARE, id="a"), product(PORTRAIT, id="b"), product(LANDSCAPE, id="c")]
    slots = resolve_moodboard_layout(items)
    assert spans(slots) == [(2, 2), (1, 2), (2, 1)]
    assert [s.product.id for s in slots] == ["a", "b", "c"]


def test_every_item_is_placed():
    items = [product(SQUARE, id=str(i)) for i in range(25)]
    assert len(resolve_moodboard_layout(items)) == 25


def test_layout_is_idempotent():
    items = [product(LANDSCAPE), product(None, "0.5"), product(None, "abc")]
    assert resolve_moodboard_layout(items) == resolve_moodboard_layout(items)


def test_slots_expose_css_spans():
    slot = resolve_moodboard_layout([product(LANDSCAPE)])[0]
    assert slot.css_grid_column == "span 3"
    assert slot.css_grid_row == "span 2"
    assert slot.to_dict()["gridColumn"] == "span 3"


def test_items_wrapping_a_product_are_resolved_through_it():
    item = SimpleNamespace(product=product(PORTRAIT), selection=None)
    slot = resolve_moodboard_layout([item])[0]
    assert slot.item is item
    assert slot.orientation == PORTRAIT


# ------------------------------------------------------
# Orientation resolution
# ------------------------------------------------------
@pytest.mark.parametrize("ratio, expected", [
    ("1.5", LANDSCAPE),
    ("1.21", LANDSCAPE),
    ("1.2", SQUARE),
    ("1.0", SQUARE),
    ("0.8", SQUARE),
    ("0.79", PORTRAIT),
    (" 0.5 ", PORTRAIT),
])
def test_aspect_ratio_classification(ratio, expected):
    assert get_product_orientation(product(None, ratio)) == expected


@pytest.mark.parametrize("ratio", ["abc", "", None, "nan", "inf"])
def test_unusable_aspect_ratio_defaults_to_square(ratio):
    assert get_product_orientation(product(None, ratio)) == SQUARE


def test_stored_orientation_agreeing_with_ratio():
    assert get_product_orientation(product(LANDSCAPE, "1.8")) == LANDSCAPE


def test_stored_orientation_wins_over_conflicting_ratio():
    assert get_product_orientation(product(PORTRAIT, "1.8")) == PORTRAIT
    slots = resolve_moodboard_layout([product(PORTRAIT, "1.8")])
    assert spans(slots) == [(1, 2)]


def test_unknown_stored_orientation_is_laid_out_square():
    assert get_product_orientation(product("panoramic", "2.0")) == SQUARE
    assert get_product_orientation(product("  ", "2.0")) == LANDSCAPE


def test_detect_orientation_boundaries():
    assert detect_orientation(1.2) == SQUARE
    assert detect_orientation(0.8) == SQUARE


# ------------------------------------------------------
# Grid packing
# ------------------------------------------------------
def test_packing_fills_pages_without_overlap():
    items = [product(SQUARE)] + [product(o) for o in (PORTRAIT, LANDSCAPE, SQUARE, SQUARE, LANDSCAPE, PORTRAIT)]
    pages = pack_layout_pages(resolve_moodboard_layout(items), columns=3, rows_per_page=4)

    assert sum(len(p) for p in pages) == len(items)
    for placements in pages:
        cells = []
        for pl in placements:
            assert pl.column + pl.column_span <= 3
            assert pl.row + pl.row_span <= 4
            cells += [(r, c) for r in range(pl.row, pl.row + pl.row_span)
                      for c in range(pl.column, pl.column + pl.column_span)]
        assert len(cells) == len(set(cells))


def test_packing_places_hero_top_left_and_is_deterministic():
    slots = resolve_moodboard_layout([product(SQUARE), product(PORTRAIT), product(LANDSCAPE)])
    pages = pack_layout_pages(slots, rows_per_page=4)
    assert len(pages) == 1
    assert [(p.row, p.column) for p in pages[0]] == [(0, 0), (0, 2), (2, 0)]
    assert pages == pack_layout_pages(slots, rows_per_page=4)


def test_packing_overflows_to_new_page():
    slots = resolve_moodboard_layout([product(LANDSCAPE)] + [product(LANDSCAPE) for _ in range(3)])
    pages = pack_layout_pages(slots, rows_per_page=4)
    assert [len(p) for p in pages] == [3, 1]


def test_packing_of_empty_layout():
    assert pack_layout_pages([]) == []
