"""Font size and line wrapping search for auto-fitted text."""

import logging
from typing import List, NamedTuple, Optional, Tuple
from .errors import InvalidArgument, NoFittingSize
from .measure import DEFAULT_FONT, CanvasSpec, FontDescriptor, Measure, validate_canvas
from .search import bisect
from .text import longest_line_length, wrap_text

# Tuned visually per line count, other counts fall back to 0.7 / n ** 1.5 + 1
LINE_HEIGHT_RATIOS = {
    2: 1.275,
    3: 1.167,
    4: 1.12,
    5: 1.095,
}


class LayoutOptions(NamedTuple):
    """Options the layout engine and word renderer consume."""
    max_font_size: int = 100
    max_line_length: Optional[int] = None
    base_color: str = "#fff"
    special_color: str = "#FB7417"
    special_words: Tuple[str, ...] = ()
    emoji: bool = False


class LayoutResult(NamedTuple):
    """Chosen line set and the font size it fits at."""
    lines: List[str]
    font_size: int


def line_height(line_count: int, ascent: float, descent: float) -> float:
    """Distance between consecutive baselines for a block of line_count lines."""
    multiplier = LINE_HEIGHT_RATIOS.get(line_count) or 0.7 / line_count ** 1.5 + 1
    return (ascent + descent) / line_count * multiplier


def solve_font_size(text: str, canvas: CanvasSpec, max_font_size: int, measure: Measure,
                    font: FontDescriptor = DEFAULT_FONT) -> int:
    """
    Find the largest font size in [0, max_font_size] at which text fits the canvas.

    Relies on the measurement growing with the font size. A result of 0 means no
    positive size fits.
    """
    if max_font_size <= 0:
        raise InvalidArgument(f"max_font_size must be positive, got {max_font_size}")

    def fits(size: int) -> bool:
        measured = measure(text, font._replace(size=size))
        return measured.width <= canvas.width and measured.height <= canvas.height

    return bisect(0, max_font_size + 1, fits)


def _has_headroom(lines: List[str], font_size: int, canvas: CanvasSpec, measure: Measure,
                  font: FontDescriptor) -> bool:
    """Whether at least two line heights stay free below the centered block."""
    measured = measure('\n'.join(lines), font._replace(size=font_size))
    height = line_height(len(lines), measured.ascent, measured.descent)
    y = (canvas.height - measured.descent + measured.ascent) / 2
    return canvas.height - (y + len(lines) * height) >= 2 * height


def optimize_layout(text: str, canvas: CanvasSpec, max_font_size: int, measure: Measure,
                    font: FontDescriptor = DEFAULT_FONT) -> LayoutResult:
    """
    Search the wrap width that yields the largest fitting font size.

    The font size is not monotonic in the wrap width (shorter lines mean more lines),
    so this keeps the best size seen and steers with a headroom check. It is a
    heuristic: the result always fits but is not guaranteed to be the global optimum.
    """
    best = LayoutResult(text.split('\n'), solve_font_size(text, canvas, max_font_size, measure, font))

    def advance(wrap_width: int) -> bool:
        nonlocal best
        lines = wrap_text(text, wrap_width)
        font_size = solve_font_size('\n'.join(lines), canvas, max_font_size, measure, font)
        logging.debug(f"Wrap width {wrap_width}: {len(lines)} lines at {font_size}px (best {best.font_size}px)")

        if font_size <= best.font_size:
            return False

        best = LayoutResult(lines, font_size)
        # Enough room left means more, shorter lines are worth trying
        return not _has_headroom(lines, font_size, canvas, measure, font)

    bisect(0, longest_line_length(text), advance)
    return best


def layout_text(text: str, canvas: CanvasSpec, options: LayoutOptions, measure: Measure,
                font: FontDescriptor = DEFAULT_FONT) -> LayoutResult:
    """Choose line breaks and font size for text on the canvas."""
    validate_canvas(canvas)
    if options.max_font_size <= 0:
        raise InvalidArgument(f"max_font_size must be positive, got {options.max_font_size}")

    if options.max_line_length is not None:
        lines = wrap_text(text, options.max_line_length)
        result = LayoutResult(lines, solve_font_size('\n'.join(lines), canvas, options.max_font_size, measure, font))
    else:
        result = optimize_layout(text, canvas, options.max_font_size, measure, font)

    if result.font_size == 0:
        raise NoFittingSize(text, canvas)

    logging.debug(f"Laid out {len(result.lines)} lines at {result.font_size}px")
    return result
