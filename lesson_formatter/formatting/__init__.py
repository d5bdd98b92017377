"""Inline text formatting: escaping, emphasis, math and paragraph chunking."""

from lesson_formatter.formatting.chunking import ParagraphChunker
from lesson_formatter.formatting.inline import InlineFormatter, inline_formatter
from lesson_formatter.formatting.markup import escape_html, escape_safe, title_case
from lesson_formatter.formatting.math import MathFormatter, math_formatter

__all__ = ['ParagraphChunker', 'InlineFormatter', 'inline_formatter', 'MathFormatter',
           'math_formatter', 'escape_html', 'escape_safe', 'title_case']
