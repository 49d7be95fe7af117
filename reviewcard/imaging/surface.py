"""Pillow drawing surface used by the word renderer."""

from typing import Optional
from PIL import Image, ImageDraw
from .emoji import EmojiRenderer
from .measure import FontDescriptor, MeasuredText, PillowMeasurer


class PillowSurface:
    """Draws glyphs on one image at baseline-anchored positions."""

    def __init__(self, image: Image.Image, measurer: PillowMeasurer, emoji_renderer: Optional[EmojiRenderer] = None):
        self.image = image
        self.measurer = measurer
        self.emoji_renderer = emoji_renderer
        self._draw = ImageDraw.Draw(image)

    def measure(self, text: str, font: FontDescriptor) -> MeasuredText:
        return self.measurer.measure(text, font)

    def draw_glyphs(self, text: str, x: float, y: float, font: FontDescriptor, color: str) -> None:
        self._draw.text((x, y), text, fill=color, font=self.measurer.font(font), anchor="ls")

    def draw_emoji(self, emoji: str, x: float, y: float, size: int) -> None:
        """Paste the emoji image with its bottom edge slightly below the baseline."""
        glyph = self.emoji_renderer.render(emoji, size)
        top = round(y + size * 0.1) - glyph.height
        self.image.paste(glyph, (round(x), top), glyph)
