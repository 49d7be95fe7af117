"""Tests for word coloring, exclamation splitting and line rendering."""

import pytest
from reviewcard.imaging import CanvasSpec, FontDescriptor, WordColorizer, WordRenderer, line_height
from reviewcard.imaging.emoji import has_emoji, split_text_and_emojis
from reviewcard.imaging.words import levenshtein

BASE = "#fff"
SPECIAL = "#FB7417"


def _renderer(surface, special_words=(), size=20, emoji=False):
    colorizer = WordColorizer(BASE, SPECIAL, special_words)
    return WordRenderer(surface, colorizer, FontDescriptor(size=size), emoji=emoji)


def test_levenshtein_distance():
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("", "abc") == 3
    assert levenshtein("same", "same") == 0


def test_levenshtein_ignores_case_and_accents():
    assert levenshtein("Café", "cafe") == 0
    assert levenshtein("NAÏVE", "naive") == 0


def test_color_of_empty_word_is_base():
    assert WordColorizer(BASE, SPECIAL, ["ok"]).get_color("") == BASE


def test_short_special_words_match_exactly():
    """Test that special words of three letters or fewer need an exact, case-insensitive match."""
    colorizer = WordColorizer(BASE, SPECIAL, ["ok"])
    assert colorizer.get_color("ok") == SPECIAL
    assert colorizer.get_color("OK") == SPECIAL
    assert colorizer.get_color("oki") == BASE
    assert colorizer.get_color("o") == BASE


def test_long_special_words_match_fuzzily():
    """Test that longer special words allow up to two edits."""
    colorizer = WordColorizer(BASE, SPECIAL, ["wonderful", "amazing"])
    assert colorizer.get_color("wonderfull") == SPECIAL
    assert colorizer.get_color("Amazing") == SPECIAL
    assert colorizer.get_color("amazng") == SPECIAL
    assert colorizer.get_color("wonder") == BASE
    assert colorizer.get_color("place") == BASE
    print("✓ Color classification works")


def test_blank_special_words_are_ignored():
    colorizer = WordColorizer(BASE, SPECIAL, ["", "ok"])
    assert colorizer.special_words == ["ok"]


def test_draw_plain_word(surface):
    advance = _renderer(surface).draw_word("Great", 10, 50)

    assert surface.glyphs == [("Great", 10, 50, BASE)]
    assert advance == surface.measure("Great ", FontDescriptor(size=20)).width


def test_exclamation_is_drawn_after_prefix(surface):
    """Test that a glued exclamation mark is drawn separately, right after the word."""
    font = FontDescriptor(size=20)
    advance = _renderer(surface).draw_word("Great!", 10, 50)

    prefix_width = surface.measure("Great", font).width
    assert surface.glyphs == [("Great", 10, 50, BASE), ("!", 10 + prefix_width, 50, BASE)]
    assert advance == pytest.approx(surface.measure("Great! ", font).width)
    print("✓ Exclamation splitting works")


def test_multiple_exclamations_unwind_in_order(surface):
    advance = _renderer(surface).draw_word("Wow!!", 0, 0)

    assert [(text, x) for text, x, _, _ in surface.glyphs] == [("Wow", 0), ("!", 30), ("!", 40)]
    assert advance == pytest.approx(60)


def test_single_exclamation_is_not_split(surface):
    _renderer(surface).draw_word("!", 0, 0)
    assert [glyph[0] for glyph in surface.glyphs] == ["!"]


def test_special_word_keeps_color_before_exclamation(surface):
    _renderer(surface, ["amazing"]).draw_word("amazing!", 0, 0)
    assert [(text, color) for text, _, _, color in surface.glyphs] == [("amazing", SPECIAL), ("!", BASE)]


def test_empty_word_draws_nothing(surface):
    advance = _renderer(surface).draw_word("", 0, 0)
    assert surface.glyphs == []
    assert advance == surface.measure(" ", FontDescriptor(size=20)).width


def test_emoji_segments_are_substituted(surface):
    _renderer(surface, emoji=True).draw_word("Yum\U0001F600", 0, 5)

    assert surface.glyphs == [("Yum", 0, 5, BASE)]
    assert surface.emojis == [("\U0001F600", 30, 5, 20)]


def test_emoji_left_as_glyphs_when_disabled(surface):
    _renderer(surface, emoji=False).draw_word("Yum\U0001F600", 0, 5)

    assert surface.glyphs == [("Yum\U0001F600", 0, 5, BASE)]
    assert surface.emojis == []


def test_emoji_segmentation():
    assert not has_emoji("plain text!")
    assert has_emoji("nice \U0001F44D")
    assert split_text_and_emojis("hi \U0001F600!") == [("hi ", False), ("\U0001F600", True), ("!", False)]
    # A family sequence joined by zero width joiners stays one run
    family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
    assert split_text_and_emojis(family) == [(family, True)]
    assert split_text_and_emojis("") == []


def test_draw_lines_centers_block(surface):
    """Test the end-to-end scenario: centered lines, special word highlighted."""
    canvas = CanvasSpec(1275, 362)
    lines = ["This place was", "amazing! Highly", "recommend"]
    renderer = _renderer(surface, ["amazing"], size=100)
    renderer.draw_lines(lines, canvas)

    block = surface.measure('\n'.join(lines), FontDescriptor(size=100))
    first_y = (canvas.height - block.descent + block.ascent) / 2
    second_y = first_y + line_height(3, block.ascent, block.descent)

    assert surface.glyphs[0] == ("This", (1275 - 14 * 50) / 2, first_y, BASE)
    assert ("amazing", (1275 - 15 * 50) / 2, second_y, SPECIAL) in surface.glyphs
    assert [text for text, _, _, color in surface.glyphs if color == SPECIAL] == ["amazing"]
    assert [text for text, _, _, _ in surface.glyphs] == [
        "This", "place", "was", "amazing", "!", "Highly", "recommend"
    ]


def test_draw_lines_with_empty_text(surface):
    _renderer(surface).draw_lines([""], CanvasSpec(100, 100))
    assert surface.glyphs == []
