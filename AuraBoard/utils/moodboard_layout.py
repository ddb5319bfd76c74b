"""
Moodboard Layout
----------------
Maps curated products onto a 3-column grid. The first product gets the
hero treatment; the rest are placed by orientation.
"""

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

LANDSCAPE = "landscape"
PORTRAIT = "portrait"
SQUARE = "square"
ORIENTATIONS = (LANDSCAPE, PORTRAIT, SQUARE)

GRID_COLUMNS = 3

# (gridColumn span, gridRow span)
HERO_SPANS = {
    LANDSCAPE: (3, 2),
    PORTRAIT: (1, 2),
    SQUARE: (2, 2),
}

STANDARD_SPANS = {
    LANDSCAPE: (2, 1),
    PORTRAIT: (1, 2),
    SQUARE: (1, 1),
}


@dataclass(frozen=True)
class LayoutSlot:
    item: Any
    orientation: str
    grid_column: int
    grid_row: int
    hero: bool = False

    @property
    def product(self):
        return getattr(self.item, "product", self.item)

    @property
    def css_grid_column(self):
        return f"span {self.grid_column}"

    @property
    def css_grid_row(self):
        return f"span {self.grid_row}"

    def to_dict(self):
        product = self.product
        return {
            "productId": getattr(product, "id", None),
            "orientation": self.orientation,
            "gridColumn": self.css_grid_column,
            "gridRow": self.css_grid_row,
            "hero": self.hero,
        }


def detect_orientation(aspect_ratio: float) -> str:
    if aspect_ratio > 1.2:
        return LANDSCAPE
    if aspect_ratio < 0.8:
        return PORTRAIT
    return SQUARE


def parse_aspect_ratio(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        ratio = float(str(value).strip())
    except ValueError:
        return None
    if not math.isfinite(ratio):
        return None
    return ratio


def get_product_orientation(product) -> str:
    # Stored orientation always wins, even if the aspect ratio disagrees
    stored = (getattr(product, "orientation", None) or "").strip().lower()
    if stored:
        # unrecognised stored values take the square spans
        return stored if stored in ORIENTATIONS else SQUARE

    ratio = parse_aspect_ratio(getattr(product, "aspect_ratio", None))
    if ratio is not None:
        return detect_orientation(ratio)

    return SQUARE


def resolve_moodboard_layout(items: Sequence[Any]) -> List[LayoutSlot]:
    """
    Resolve grid placements for the curated items, in curation order.

    Items are either products or selections exposing `.product`. Pure and
    deterministic: the same input always produces the same slots.
    """
    slots = []
    for index, item in enumerate(items):
        product = getattr(item, "product", item)
        orientation = get_product_orientation(product)
        hero = index == 0
        columns, rows = (HERO_SPANS if hero else STANDARD_SPANS)[orientation]
        slots.append(LayoutSlot(item, orientation, columns, rows, hero))
    return slots


# =========================================================
# 📐 GRID PACKING (used by the PDF renderer)
# =========================================================
@dataclass(frozen=True)
class GridPlacement:
    slot: LayoutSlot
    column: int
    row: int
    column_span: int
    row_span: int


def pack_layout_pages(slots: Sequence[LayoutSlot], columns=GRID_COLUMNS, rows_per_page=4):
    """
    Dense first-fit packing of slots onto fixed-size grid pages.

    Returns a list of pages, each a list of GridPlacement. A slot that does
    not fit in the free cells of the current page starts a new page.
    """
    if rows_per_page < 2:
        raise ValueError("rows_per_page must allow two-row slots")

    pages = []
    current = []
    occupied = set()

    for slot in slots:
        col_span = min(slot.grid_column, columns)
        row_span = min(slot.grid_row, rows_per_page)
        cell = _first_free_cell(occupied, col_span, row_span, columns, rows_per_page)

        if cell is None:
            pages.append(current)
            current = []
            occupied = set()
            cell = (0, 0)

        row, column = cell
        for r in range(row, row + row_span):
            for c in range(column, column + col_span):
                occupied.add((r, c))
        current.append(GridPlacement(slot, column, row, col_span, row_span))

    if current:
        pages.append(current)
    return pages


def _first_free_cell(occupied, col_span, row_span, columns, rows):
    for row in range(rows - row_span + 1):
        for column in range(columns - col_span + 1):
            cells = [
                (r, c)
                for r in range(row, row + row_span)
                for c in range(column, column + col_span)
            ]
            if not any(cell in occupied for cell in cells):
                return row, column
    return None
