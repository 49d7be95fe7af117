"""Review image generation and layout."""

import logging
from typing import NamedTuple, Optional, Tuple
from PIL import Image
from .emoji import EmojiRenderer
from .fit import LayoutOptions, LayoutResult, layout_text
from .measure import CanvasSpec, FontDescriptor, PillowMeasurer
from .surface import PillowSurface
from .words import WordColorizer, WordRenderer


class ReviewConfig(NamedTuple):
    """Configuration for review image generation."""
    canvas: CanvasSpec
    font_path: Optional[str]
    font_family: str = "Outfit"
    font_weight: str = "bold"
    options: LayoutOptions = LayoutOptions()
    background_color: Optional[str] = None


class ReviewLayout:
    """Handles the auto-fit layout and rendering of one review text."""

    def __init__(self, config: ReviewConfig, text: str, measurer: PillowMeasurer = None,
                 emoji_renderer: EmojiRenderer = None):
        self.config = config
        self.text = text
        self.measurer = measurer or PillowMeasurer()
        self.measurer.register_font(config.font_path, config.font_family, config.font_weight)
        self.emoji_renderer = emoji_renderer if config.options.emoji else None
        self.font = FontDescriptor(config.font_family, config.font_weight)

    def compute_layout(self) -> LayoutResult:
        """Pick line breaks and font size for the text."""
        return layout_text(self.text, self.config.canvas, self.config.options, self.measurer.measure, self.font)

    def create_image(self) -> Image.Image:
        """Create the complete review image."""
        layout = self.compute_layout()
        logging.info(f"Rendering {len(layout.lines)} lines at {layout.font_size}px")

        image = self._create_canvas()
        surface = PillowSurface(image, self.measurer, self.emoji_renderer)
        renderer = WordRenderer(
            surface, self._create_colorizer(), self.font._replace(size=layout.font_size),
            emoji=self.emoji_renderer is not None
        )
        renderer.draw_lines(layout.lines, self.config.canvas)
        return image

    def _create_canvas(self) -> Image.Image:
        """Blank canvas, transparent unless a background color is configured."""
        size: Tuple[int, int] = (self.config.canvas.width, self.config.canvas.height)
        if self.config.background_color:
            return Image.new("RGBA", size, self.config.background_color)
        return Image.new("RGBA", size, (0, 0, 0, 0))

    def _create_colorizer(self) -> WordColorizer:
        options = self.config.options
        return WordColorizer(options.base_color, options.special_color, options.special_words)


def create_review_image(canvas: CanvasSpec, text: str, font_path: Optional[str],
                        options: LayoutOptions = LayoutOptions(), font_family: str = "Outfit",
                        font_weight: str = "bold", background_color: Optional[str] = None,
                        emoji_renderer: EmojiRenderer = None) -> Image.Image:
    """Create a review image with the text auto-fitted to the canvas."""
    config = ReviewConfig(
        canvas=canvas,
        font_path=font_path,
        font_family=font_family,
        font_weight=font_weight,
        options=options,
        background_color=background_color
    )

    layout = ReviewLayout(config, text, emoji_renderer=emoji_renderer)
    return layout.create_image()
