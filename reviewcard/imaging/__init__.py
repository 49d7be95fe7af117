"""Imaging module for auto-fitted review images."""

from .errors import FontNotRegistered, InvalidArgument, LayoutError, NoFittingSize
from .emoji import EmojiRenderer
from .fit import LayoutOptions, LayoutResult, layout_text, line_height, optimize_layout, solve_font_size
from .measure import CanvasSpec, FontDescriptor, MeasuredText, PillowMeasurer
from .review import create_review_image
from .text import wrap_text
from .words import WordColorizer, WordRenderer

__all__ = ['FontNotRegistered', 'InvalidArgument', 'LayoutError', 'NoFittingSize', 'EmojiRenderer',
           'LayoutOptions', 'LayoutResult', 'layout_text', 'line_height', 'optimize_layout', 'solve_font_size',
           'CanvasSpec', 'FontDescriptor', 'MeasuredText', 'PillowMeasurer', 'create_review_image',
           'wrap_text', 'WordColorizer', 'WordRenderer']
