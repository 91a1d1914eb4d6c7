from core.desktop.devtools.interface.tui_display import display_width, pad_display, single_line, trim_display
from util.responsive import card_content_width


def test_wide_glyphs_count_double():
    assert display_width("abc") == 3
    assert display_width("日本") == 4


def test_trim_and_pad():
    assert trim_display("hello world", 5) == "hell…"
    assert trim_display("hi", 5) == "hi"
    assert trim_display("hello", 0) == ""
    assert display_width(trim_display("日本語テキスト", 5)) <= 5
    assert pad_display("ab", 4) == "ab  "
    assert display_width(pad_display("日本語テキスト", 6)) == 6


def test_single_line_collapses_whitespace():
    assert single_line("a\n  b\tc ") == "a b c"
    assert single_line(None) == ""


def test_card_content_width_bounds():
    for width in (10, 40, 79, 80, 100, 119, 120, 200, 400):
        result = card_content_width(width)
        assert 16 <= result <= 110
        assert result <= max(20, width) - 2
