from arxiv_search.utils.pagination import ELLIPSIS, page_offset, total_pages, visible_pages


def test_middle_page_has_both_ellipses():
    assert visible_pages(5, 10) == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]


def test_small_range_has_no_ellipsis():
    assert visible_pages(1, 3) == [1, 2, 3]


def test_single_skipped_page_is_shown():
    assert visible_pages(4, 10) == [1, 2, 3, 4, 5, ELLIPSIS, 10]
    assert visible_pages(7, 10) == [1, ELLIPSIS, 6, 7, 8, 9, 10]


def test_edges():
    assert visible_pages(1, 10) == [1, 2, ELLIPSIS, 10]
    assert visible_pages(10, 10) == [1, ELLIPSIS, 9, 10]
    assert visible_pages(1, 1) == [1]
    assert visible_pages(1, 0) == []


def test_out_of_range_current_is_clamped():
    assert visible_pages(0, 3) == visible_pages(1, 3)
    assert visible_pages(99, 3) == visible_pages(3, 3)


def test_controls_are_deterministic_and_well_formed():
    for page_count in range(1, 30):
        for current in range(1, page_count + 1):
            controls = visible_pages(current, page_count)
            assert controls == visible_pages(current, page_count)

            pages = [c for c in controls if c != ELLIPSIS]
            assert pages == sorted(set(pages))
            assert pages[0] == 1 and pages[-1] == page_count
            assert current in pages
            # 省略号不会出现在两端，也不会连续出现
            assert controls[0] != ELLIPSIS and controls[-1] != ELLIPSIS
            for left, right in zip(controls, controls[1:]):
                assert not (left == ELLIPSIS and right == ELLIPSIS)
                if ELLIPSIS not in (left, right):
                    assert right == left + 1


def test_total_pages():
    assert total_pages(25, 10) == 3
    assert total_pages(30, 10) == 3
    assert total_pages(0, 10) == 0
    assert total_pages(1, 10) == 1


def test_page_offset():
    assert page_offset(1, 10) == 0
    assert page_offset(3, 10) == 20
