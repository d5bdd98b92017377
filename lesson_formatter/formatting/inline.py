"""Inline formatting for leaf text spans: escaping, emphasis and math."""

import re

from lesson_formatter.formatting.markup import escape_html, escape_safe, sub_outside_markup, title_case
from lesson_formatter.formatting.math import MathFormatter, math_formatter

_BOLD_DOUBLE = re.compile(r'\*\*([^*]+)\*\*')
# A lone "*" used as a multiplication sign is left alone
_BOLD_SINGLE = re.compile(r'(?<![\w*])\*(?!\s)([^*]+?)(?<!\s)\*(?![\w*])')
_ITALIC = re.compile(r'(?<!\w)_(?!\s)([^_]+?)(?<!\s)_(?!\w)')
_KEY_TERM = re.compile(r'\b([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)\s+(means?|is defined as|refers to|is when)')


class InlineFormatter:
    """Formats a single span of plain text into safe inline markup."""
    
    def __init__(self, math: MathFormatter = None):
        self.math = math or math_formatter
    
    def format_inline(self, text: str) -> str:
        """Format text on the heuristic path.
        
        Escapes the text, then applies bold markers, key-term emphasis
        (``Photosynthesis means ...``) and math formatting.
        
        Args:
            text: Raw text of one line, paragraph chunk or list item.
            
        Returns:
            Inline markup.
        """
        formatted = escape_html(text)
        formatted = sub_outside_markup(_BOLD_DOUBLE, r'<strong>\1</strong>', formatted)
        formatted = sub_outside_markup(_BOLD_SINGLE, r'<strong>\1</strong>', formatted)
        formatted = sub_outside_markup(_KEY_TERM, r'<strong>\1</strong> \2', formatted)
        return self.math.format_math_expressions(formatted)
    
    def format_text(self, text: str) -> str:
        """Format text on the structured path (bold, italic and math)."""
        formatted = escape_html(text)
        formatted = sub_outside_markup(_BOLD_DOUBLE, r'<strong>\1</strong>', formatted)
        formatted = sub_outside_markup(_BOLD_SINGLE, r'<strong>\1</strong>', formatted)
        formatted = sub_outside_markup(_ITALIC, r'<em>\1</em>', formatted)
        return self.math.format_math_expressions(formatted)


inline_formatter = InlineFormatter()

__all__ = ['InlineFormatter', 'inline_formatter', 'escape_html', 'escape_safe', 'title_case']
