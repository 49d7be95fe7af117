"""Shared fakes for the layout tests."""

import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from reviewcard.imaging import MeasuredText


def monospace_measure(text, font):
    """Every character is half an em wide, every extra line adds 1.2 em of descent."""
    lines = text.split('\n')
    width = max(len(line) for line in lines) * font.size * 0.5
    return MeasuredText(width, font.size * 0.8, font.size * 0.2 + (len(lines) - 1) * font.size * 1.2)


class RecordingSurface:
    """Drawing surface that records draw calls instead of painting."""

    def __init__(self):
        self.glyphs = []
        self.emojis = []

    def measure(self, text, font):
        return monospace_measure(text, font)

    def draw_glyphs(self, text, x, y, font, color):
        self.glyphs.append((text, x, y, color))

    def draw_emoji(self, emoji, x, y, size):
        self.emojis.append((emoji, x, y, size))


@pytest.fixture
def measure():
    return monospace_measure


@pytest.fixture
def surface():
    return RecordingSurface()
