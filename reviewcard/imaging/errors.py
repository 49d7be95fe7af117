"""Exceptions raised by the layout engine."""


class LayoutError(Exception):
    """Base class for every layout failure."""


class InvalidArgument(LayoutError, ValueError):
    """Raised when a layout parameter is out of range, before any search starts."""


class NoFittingSize(LayoutError):
    """
    Raised when the text cannot fit the canvas at any positive font size.

    The caller decides what to do with it (fallback text, error image, HTTP 500).
    """

    def __init__(self, text: str, canvas, message: str = None):
        self.text = text
        self.canvas = canvas
        self.message = message or f"Text of {len(text)} characters does not fit a {canvas.width}x{canvas.height} canvas"
        super().__init__(self.message)


class FontNotRegistered(LayoutError, KeyError):
    """Raised when a font descriptor names a family/weight nobody registered."""

    def __init__(self, family: str, weight: str):
        self.family = family
        self.weight = weight
        super().__init__(f"No font registered for {weight} {family}")

    def __str__(self):
        return self.args[0]
