"""Emoji detection and image substitution for colour emoji fonts."""

import functools
import re
from threading import Lock
from typing import List, Tuple, Union
from PIL import Image, ImageDraw, ImageFont

# Covers the common pictographic blocks, flags, dingbats and joiners
EMOJI_PATTERN = re.compile(
    "["
    "\U0001F300-\U0001F5FF"  # Misc symbols and pictographs
    "\U0001F600-\U0001F64F"  # Emoticons
    "\U0001F680-\U0001F6FF"  # Transport and map
    "\U0001F900-\U0001F9FF"  # Supplemental symbols and pictographs
    "\U0001FA70-\U0001FAFF"  # Symbols and pictographs extended-A
    "\U0001F1E6-\U0001F1FF"  # Regional indicators (flags)
    "\U00002600-\U000026FF"  # Misc symbols
    "\U00002700-\U000027BF"  # Dingbats
    "\U00002B50\U00002B55"   # Star, circle
    "\u200d"                 # Zero width joiner
    "\ufe0f"                 # Variation selector-16
    "]+"
)

# Noto Color Emoji ships bitmaps at this size only
EMOJI_NATIVE_SIZE = 109

# Rendered (emoji, size) pairs kept across requests
EMOJI_CACHE_SIZE = 256


def has_emoji(text: str) -> bool:
    """Check if text contains emoji characters."""
    return bool(EMOJI_PATTERN.search(text))


def split_text_and_emojis(text: str) -> List[Tuple[str, bool]]:
    """Split text into (segment, is_emoji) runs, in order."""
    segments = []
    last_end = 0

    for match in EMOJI_PATTERN.finditer(text):
        if match.start() > last_end:
            segments.append((text[last_end:match.start()], False))
        segments.append((match.group(), True))
        last_end = match.end()

    if last_end < len(text):
        segments.append((text[last_end:], False))

    return segments


class EmojiRenderer:
    """
    Render emoji sequences to RGBA images with a colour bitmap font.

    One renderer is shared by every request of an app: FreeType access is serialized
    with a lock and rendered images are kept in a bounded LRU cache. Callers must
    treat the returned images as read-only.
    """

    def __init__(self, font: Union[str, ImageFont.FreeTypeFont], native_size: int = EMOJI_NATIVE_SIZE):
        self.native_size = native_size
        if isinstance(font, ImageFont.FreeTypeFont):
            self._font = font
        else:
            self._font = ImageFont.truetype(font, native_size)
        self._lock = Lock()

    @functools.lru_cache(maxsize=EMOJI_CACHE_SIZE)
    def render(self, emoji: str, size: int) -> Image.Image:
        """Render emoji scaled so its height is size pixels."""
        with self._lock:
            return self._render(emoji, size)

    def _render(self, emoji: str, size: int) -> Image.Image:
        canvas = Image.new("RGBA", (self.native_size * 2 * len(emoji), self.native_size * 2), (0, 0, 0, 0))
        ImageDraw.Draw(canvas).text((0, 0), emoji, font=self._font, embedded_color=True)

        bbox = canvas.getbbox()
        if not bbox:
            return Image.new("RGBA", (size, size), (0, 0, 0, 0))

        glyph = canvas.crop(bbox)
        scale = size / glyph.height
        new_size = (max(1, round(glyph.width * scale)), max(1, size))
        return glyph.resize(new_size, Image.Resampling.LANCZOS)
