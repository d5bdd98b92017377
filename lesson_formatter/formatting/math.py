"""Math expression formatting for educational content.

Detects arithmetic, fraction, comparison and algebraic expressions in
already-escaped text and wraps them in semantic ``<code class="math ...">``
tags so the stylesheet can colour them by operation.
"""

import re
from typing import List

from lesson_formatter.formatting.markup import escape_html, sub_outside_markup

# Number operands start at the first digit of a run
_FRACTION_TIMES = re.compile(r'(?<!\d)(\d+/\d+)\s*[x×]\s*(\d+/\d+)\s*=\s*(\d+/\d+)')
_FRACTION_DIVIDE = re.compile(r'(?<!\d)(\d+/\d+)\s*[÷/]\s*(\d+/\d+)\s*=\s*(\d+(?:/\d+)?)')
_FRACTION_EQUALS = re.compile(r'(?<!\d)(\d+/\d+)\s*=\s*(\d+/\d+)')
_TIMES = re.compile(r'(?<!\d)(\d+)\s*[x×]\s*(\d+)\s*=\s*(\d+)')
_DIVIDE = re.compile(r'(?<!\d)(\d+)\s*[÷/]\s*(\d+)\s*=\s*(\d+)')
_PLUS = re.compile(r'(?<!\d)(\d+)\s*\+\s*(\d+)\s*=\s*(\d+)')
_MINUS = re.compile(r'(?<!\d)(\d+)\s*-\s*(\d+)\s*=\s*(\d+)')
_FILL_BLANK = re.compile(r'(?<!\d)(\d+/\d+|\d+)\s*[x×+\-÷]\s*[_?]+\s*=\s*(\d+/\d+|\d+)')
_FRACTION_COMPARE = re.compile(r'(?<!\d)(\d+/\d+)\s*(&lt;|&gt;|[<>≤≥])\s*(\d+/\d+)')
_FRACTION = re.compile(r'\b(\d+/\d+)\b')
_NUMBER_COMPARE = re.compile(r'(?<!\d)(\d+)\s*(&lt;|&gt;|[<>≤≥])\s*(\d+)')
_ALGEBRAIC = re.compile(r'\b([a-z])\s*([+\-×÷])\s*([a-z])\b', re.IGNORECASE)
_PARENTHESIZED = re.compile(r'\(([^)]+)\)\s*[/÷]\s*\(([^)]+)\)')

_CONTAINS_MATH = (
    re.compile(r'(?<!\d)\d+/\d+'),
    re.compile(r'(?<!\d)\d+\s*[×÷+\-=]\s*\d+'),
    re.compile(r'[a-z]\s*[×÷+\-=]\s*[a-z]', re.IGNORECASE),
    re.compile(r'\([^)]+\)\s*[×÷+\-=]'),
)

_FRACTION_OPERATIONS = re.compile(r'(?<!\d)\d+/\d+\s*[×÷+\-=]\s*\d+(?:/\d+)?(?:\s*=\s*\d+(?:/\d+)?)?')
_SIMPLE_OPERATIONS = re.compile(r'(?<!\d)\d+\s*[×÷+\-]\s*\d+\s*=\s*\d+')


def _code(kind: str, body: str) -> str:
    return f'<code class="math {kind}">{body}</code>'


def _fill_blank(match: re.Match) -> str:
    return _code('fill-blank', re.sub(r'_+', '___', match.group(0)))


class MathFormatter:
    """Wraps math expressions in semantic markup. Stateless and re-entrant."""
    
    # Order matters: more specific patterns run first
    _RULES = (
        (_FRACTION_TIMES, _code('fraction-operation', r'\1 × \2 = \3')),
        (_FRACTION_DIVIDE, _code('fraction-operation', r'\1 ÷ \2 = \3')),
        (_FRACTION_EQUALS, _code('fraction-equality', r'\1 = \2')),
        (_TIMES, _code('multiplication', r'\1 × \2 = \3')),
        (_DIVIDE, _code('division', r'\1 ÷ \2 = \3')),
        (_PLUS, _code('addition', r'\1 + \2 = \3')),
        (_MINUS, _code('subtraction', r'\1 - \2 = \3')),
        (_FILL_BLANK, _fill_blank),
        (_FRACTION_COMPARE, _code('comparison', r'\1 \2 \3')),
        (_FRACTION, r'<span class="fraction">\1</span>'),
        (_NUMBER_COMPARE, _code('comparison', r'\1 \2 \3')),
        (_ALGEBRAIC, _code('algebraic', r'\1 \2 \3')),
        (_PARENTHESIZED, _code('parenthesized', r'(\1) ÷ (\2)')),
    )
    
    def format_math_expressions(self, text: str) -> str:
        """Format all math expressions in escaped text.
        
        Args:
            text: HTML-escaped text, possibly already containing tags.
            
        Returns:
            Text with math expressions wrapped. Regions wrapped by an
            earlier rule are left alone by later ones.
        """
        result = text
        for pattern, repl in self._RULES:
            result = sub_outside_markup(pattern, repl, result)
        return result
    
    def format_fraction(self, numerator, denominator) -> str:
        """Format a standalone fraction for visual display."""
        num = escape_html(str(numerator))
        den = escape_html(str(denominator))
        return (f'<span class="fraction" data-numerator="{num}" '
                f'data-denominator="{den}">{num}/{den}</span>')
    
    def format_equation(self, equation: str) -> str:
        """Format an equation, normalising ``*``, ``x`` and ``/`` operators."""
        normalized = equation.replace('*', '×')
        normalized = re.sub(r'x(?=\s*\d)', '×', normalized, flags=re.IGNORECASE)
        normalized = normalized.replace('/', '÷')
        return _code('equation', escape_html(normalized))
    
    def contains_math(self, text: str) -> bool:
        """Detect if text contains math content."""
        return any(pattern.search(text) for pattern in _CONTAINS_MATH)
    
    def extract_math_expressions(self, text: str) -> List[str]:
        """Extract math expressions from text, unique and in first-seen order."""
        expressions = []
        expressions.extend(_FRACTION_OPERATIONS.findall(text))
        expressions.extend(_SIMPLE_OPERATIONS.findall(text))
        expressions.extend(_FRACTION.findall(text))
        return list(dict.fromkeys(expressions))


# Shared instance; holds no mutable state
math_formatter = MathFormatter()
