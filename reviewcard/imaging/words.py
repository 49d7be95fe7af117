"""Per-word coloring and drawing."""

import unicodedata
from typing import Iterable, List
from rapidfuzz.distance import Levenshtein
from .emoji import has_emoji, split_text_and_emojis
from .fit import line_height
from .measure import CanvasSpec, FontDescriptor

# Special words up to this length must match exactly, longer ones fuzzily
EXACT_MATCH_MAX_LENGTH = 3
MAX_EDIT_DISTANCE = 2


def collation_key(text: str) -> str:
    """Reduce text to its base letters: no accents, no case."""
    decomposed = unicodedata.normalize('NFKD', text)
    return ''.join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def levenshtein(a: str, b: str) -> int:
    """Edit distance between a and b, ignoring accents and case."""
    return Levenshtein.distance(a, b, processor=collation_key)


class WordColorizer:
    """Pick the fill color of a word from the special word list."""

    def __init__(self, base_color: str, special_color: str, special_words: Iterable[str] = ()):
        self.base_color = base_color
        self.special_color = special_color
        self.special_words = [word for word in special_words if word]

    def is_special(self, word: str) -> bool:
        for special_word in self.special_words:
            if len(special_word) > EXACT_MATCH_MAX_LENGTH:
                if levenshtein(word, special_word) <= MAX_EDIT_DISTANCE:
                    return True
            elif word.lower() == special_word.lower():
                return True
        return False

    def get_color(self, word: str) -> str:
        if not word:
            return self.base_color
        return self.special_color if self.is_special(word) else self.base_color


class WordRenderer:
    """
    Draw laid out lines word by word on a drawing surface.

    The surface must provide ``measure(text, font)`` and ``draw_glyphs(text, x, y, font, color)``,
    and ``draw_emoji(emoji, x, y, size)`` when emoji substitution is enabled.
    """

    def __init__(self, surface, colorizer: WordColorizer, font: FontDescriptor, emoji: bool = False):
        self.surface = surface
        self.colorizer = colorizer
        self.font = font
        self.emoji = emoji

    def draw_word(self, word: str, x: float, y: float) -> float:
        """
        Draw word at (x, y) and return the horizontal advance, trailing space included.

        A trailing "!" is drawn on its own right after the rest of the word, so the
        advance of "Great!" is width("Great") + width("! "). That equals width("Great! ")
        except for kerning between the last letter and "!", which is lost.
        """
        return self._draw_word(word, x, y, " ")

    def _draw_word(self, word: str, x: float, y: float, spacer: str) -> float:
        # Split off a glued "!" so it neither breaks fuzzy matching nor takes the word's color
        if len(word) > 1 and word.endswith('!'):
            prefix_width = self._draw_word(word[:-1], x, y, "")
            return prefix_width + self._draw_word('!', x + prefix_width, y, spacer)

        if word:
            color = self.colorizer.get_color(word)
            if self.emoji and has_emoji(word):
                self._draw_with_emoji(word, x, y, color)
            else:
                self.surface.draw_glyphs(word, x, y, self.font, color)

        return self.surface.measure(word + spacer, self.font).width

    def _draw_with_emoji(self, word: str, x: float, y: float, color: str) -> None:
        for segment, is_emoji in split_text_and_emojis(word):
            if is_emoji:
                self.surface.draw_emoji(segment, x, y, self.font.size)
            else:
                self.surface.draw_glyphs(segment, x, y, self.font, color)
            x += self.surface.measure(segment, self.font).width

    def draw_lines(self, lines: List[str], canvas: CanvasSpec) -> None:
        """Draw lines centered on the canvas, each line centered horizontally as a whole."""
        block = self.surface.measure('\n'.join(lines), self.font)
        height = line_height(len(lines), block.ascent, block.descent)

        y = (canvas.height - block.descent + block.ascent) / 2
        for line in lines:
            x = (canvas.width - self.surface.measure(line, self.font).width) / 2
            for word in line.split(' '):
                x += self.draw_word(word, x, y)
            y += height
