import pytest

from venue_catalog.paginate import paginate, visible_page_numbers


def test_thirteen_results_six_per_page():
    results = list(range(13))
    page = paginate(results, 6, 3)
    assert page.total_pages == 3
    assert page.items == [12]


def test_first_page_slice():
    assert paginate(list(range(13)), 6, 1).items == [0, 1, 2, 3, 4, 5]


def test_empty_results_have_no_pages():
    page = paginate([], 6, 1)
    assert page.total_pages == 0
    assert page.items == []


@pytest.mark.parametrize("current", [0, -1, 4, 100])
def test_out_of_range_page_is_empty(current):
    assert paginate(list(range(13)), 6, current).items == []


def test_bad_page_size():
    with pytest.raises(ValueError):
        paginate([1], 0, 1)


def test_few_pages_shows_all():
    assert visible_page_numbers(5, 3) == [1, 2, 3, 4, 5]
    assert visible_page_numbers(7, 7) == [1, 2, 3, 4, 5, 6, 7]
    assert visible_page_numbers(0, 1) == []


def test_window_centered():
    assert visible_page_numbers(20, 10) == [7, 8, 9, 10, 11, 12, 13]


@pytest.mark.parametrize("current", [1, 2, 3, 4])
def test_window_anchored_at_start(current):
    assert visible_page_numbers(20, current) == [1, 2, 3, 4, 5, 6, 7]


@pytest.mark.parametrize("current", [17, 18, 19, 20])
def test_window_anchored_at_end(current):
    assert visible_page_numbers(20, current) == [14, 15, 16, 17, 18, 19, 20]


def test_window_just_past_start_slides():
    assert visible_page_numbers(20, 5) == [2, 3, 4, 5, 6, 7, 8]
    assert visible_page_numbers(20, 16) == [13, 14, 15, 16, 17, 18, 19]


def test_window_size_is_configurable():
    assert visible_page_numbers(10, 5, window_size=5) == [3, 4, 5, 6, 7]
