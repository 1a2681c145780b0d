from tedit.viewport import Viewport


def test_scroll_follows_cursor_down():
    v = Viewport(width=80, height=5)
    v.scroll_to_show_cursor(4)
    assert v.scroll == 0
    v.scroll_to_show_cursor(5)
    assert v.scroll == 1
    v.scroll_to_show_cursor(12)
    assert v.scroll == 8


def test_scroll_follows_cursor_up():
    v = Viewport(width=80, height=5, scroll=10)
    v.scroll_to_show_cursor(12)
    assert v.scroll == 10
    v.scroll_to_show_cursor(3)
    assert v.scroll == 3


def test_scroll_invariant_holds_for_all_rows_and_heights():
    for height in range(1, 6):
        for start in range(0, 8):
            for row in range(0, 15):
                v = Viewport(width=10, height=height, scroll=start)
                v.scroll_to_show_cursor(row)
                assert v.scroll >= 0
                assert v.scroll <= row < v.scroll + height


def test_resize_smaller_reanchors():
    v = Viewport(width=80, height=10)
    v.scroll_to_show_cursor(9)
    assert v.scroll == 0
    v.resize(80, 4, row=9)
    assert v.scroll == 6
    assert v.height == 4


def test_resize_larger_keeps_scroll():
    v = Viewport(width=80, height=4, scroll=6)
    v.resize(100, 20, row=9)
    assert v.scroll == 6
    assert v.width == 100


def test_zero_height_keeps_scroll_at_cursor():
    v = Viewport(width=80, height=0)
    v.scroll_to_show_cursor(3)
    assert v.scroll == 3


def test_negative_size_clamps_to_zero():
    v = Viewport(width=80, height=10)
    v.resize(-1, -5, row=0)
    assert v.width == 0
    assert v.height == 0
    assert v.scroll == 0
