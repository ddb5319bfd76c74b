from AuraBoard.utils.flipbook import SINGLE, SPREAD, spread_pages, total_spreads


def test_spread_mode_shows_cover_alone_then_facing_pages():
    assert spread_pages(0, 5, SPREAD) == [1]
    assert spread_pages(1, 5, SPREAD) == [2, 3]
    assert spread_pages(2, 5, SPREAD) == [4, 5]
    assert spread_pages(3, 5, SPREAD) == []


def test_spread_mode_last_spread_can_be_a_single_page():
    assert spread_pages(2, 4, SPREAD) == [4]
    assert total_spreads(4, SPREAD) == 3


def test_single_mode_is_one_page_per_spread():
    assert [spread_pages(i, 3, SINGLE) for i in range(4)] == [[1], [2], [3], []]
    assert total_spreads(3, SINGLE) == 3


def test_empty_document_has_no_spreads():
    assert total_spreads(0) == 0
    assert spread_pages(0, 0) == []
    assert spread_pages(-1, 4) == []
