import math

SINGLE = "single"
SPREAD = "spread"
VIEW_MODES = (SINGLE, SPREAD)


def total_spreads(page_count, mode=SPREAD):
    if page_count <= 0:
        return 0
    if mode == SINGLE:
        return page_count
    # cover sits alone, then facing pages
    return math.ceil((page_count + 1) / 2)


def spread_pages(spread_index, page_count, mode=SPREAD):
    """1-based page numbers visible at a spread index."""
    if page_count <= 0 or spread_index < 0:
        return []

    if mode == SINGLE:
        page = spread_index + 1
        return [page] if page <= page_count else []

    if spread_index == 0:
        return [1]

    left = spread_index * 2
    return [p for p in (left, left + 1) if p <= page_count]
