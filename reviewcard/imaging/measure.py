"""Layout data model and the Pillow-backed measurement provider."""

from typing import Callable, Dict, NamedTuple, Optional, Tuple
from PIL import Image, ImageDraw, ImageFont
from .errors import FontNotRegistered, InvalidArgument


class CanvasSpec(NamedTuple):
    """Pixel dimensions of the image the text is laid out on."""
    width: int
    height: int


class FontDescriptor(NamedTuple):
    """Font family, weight and pixel size used for measuring and drawing."""
    family: str = "Outfit"
    weight: str = "bold"
    size: int = 100


class MeasuredText(NamedTuple):
    """Advance width and vertical extent around the first baseline."""
    width: float
    ascent: float
    descent: float

    @property
    def height(self) -> float:
        return self.ascent + self.descent


Measure = Callable[[str, FontDescriptor], MeasuredText]

DEFAULT_FONT = FontDescriptor()
FONT_WEIGHTS = ("normal", "bold")

# Smaller sizes are measured at this size and scaled down
REFERENCE_SIZE = 100


def validate_canvas(canvas: CanvasSpec) -> None:
    """Reject canvases with non-positive dimensions."""
    if canvas.width <= 0 or canvas.height <= 0:
        raise InvalidArgument(f"Canvas dimensions must be positive, got {canvas.width}x{canvas.height}")


class PillowMeasurer:
    """
    Measure and resolve fonts with Pillow.

    Fonts are registered by family and weight, like a browser canvas would, and loaded
    lazily for every size the layout search asks for. One instance belongs to one
    request; it is not shared across threads.
    """

    def __init__(self):
        self._paths: Dict[Tuple[str, str], Optional[str]] = {}
        self._fonts: Dict[FontDescriptor, ImageFont.FreeTypeFont] = {}
        self._reference_cache: Dict[Tuple[str, FontDescriptor], MeasuredText] = {}
        self._draw = ImageDraw.Draw(Image.new("RGB", (1, 1)))

    def register_font(self, font_path: Optional[str], family: str, weight: str = "normal") -> None:
        """Register a font file; a path of None selects Pillow's bundled default font."""
        if weight not in FONT_WEIGHTS:
            raise InvalidArgument(f"Unknown font weight '{weight}'")
        self._paths[(family, weight)] = font_path

    def font(self, descriptor: FontDescriptor) -> ImageFont.FreeTypeFont:
        """Return the Pillow font for a descriptor, loading it on first use."""
        if descriptor not in self._fonts:
            key = (descriptor.family, descriptor.weight)
            if key not in self._paths:
                raise FontNotRegistered(descriptor.family, descriptor.weight)

            font_path = self._paths[key]
            if font_path is None:
                self._fonts[descriptor] = ImageFont.load_default(size=descriptor.size)
            else:
                self._fonts[descriptor] = ImageFont.truetype(font_path, descriptor.size)
        return self._fonts[descriptor]

    def measure(self, text: str, descriptor: FontDescriptor) -> MeasuredText:
        """
        Measure a (possibly multi-line) text block at the given font.

        Hinting rounds advances at small sizes, down to zero at 1px, so below
        REFERENCE_SIZE the block is measured once at the reference size and scaled
        linearly. This keeps the measurement monotonic in the font size.
        """
        if descriptor.size >= REFERENCE_SIZE:
            return self._measure(text, descriptor)

        reference = descriptor._replace(size=REFERENCE_SIZE)
        key = (text, reference)
        if key not in self._reference_cache:
            self._reference_cache[key] = self._measure(text, reference)

        scale = descriptor.size / REFERENCE_SIZE
        width, ascent, descent = self._reference_cache[key]
        return MeasuredText(width * scale, ascent * scale, descent * scale)

    def _measure(self, text: str, descriptor: FontDescriptor) -> MeasuredText:
        font = self.font(descriptor)
        width = max(font.getlength(line) for line in text.split('\n'))

        if not text:
            return MeasuredText(float(width), 0.0, 0.0)

        _, top, _, bottom = self._draw.multiline_textbbox((0, 0), text, font=font, anchor="ls")
        return MeasuredText(float(width), float(-top), float(bottom))
