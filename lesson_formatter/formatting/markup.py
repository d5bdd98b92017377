"""Escaping and markup-aware substitution helpers."""

import html
import re
from typing import Callable, List, Pattern, Tuple, Union

# Wrapped math and fractions are kept whole so they are never wrapped twice
_PROTECTED = re.compile(
    r'<code\b[^>]*>.*?</code>'
    r'|<span class="fraction"[^>]*>.*?</span>'
    r'|<[^>]+>',
    re.DOTALL,
)

_TAG = re.compile(r'<[^>]+>')

_ENTITY = re.compile(r'&(?:#\d+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);')

Replacement = Union[str, Callable[[re.Match], str]]


def escape_html(text: str) -> str:
    """Escape HTML special characters, quotes included."""
    return html.escape(text, quote=True)


def escape_safe(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` without double-escaping.
    
    An ``&`` that already opens a character reference such as ``&amp;`` is
    left as is, so applying this twice gives the same result as once.
    """
    text = re.sub(r'&(?!(?:#\d+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);)', '&amp;', text)
    return text.replace('<', '&lt;').replace('>', '&gt;')


def title_case(text: str) -> str:
    """Lower-case ``text`` and capitalise the first letter of every word."""
    return re.sub(r'\b\w', lambda m: m.group(0).upper(), text.lower())


def sub_outside_markup(pattern: Pattern, repl: Replacement, text: str) -> str:
    """Apply ``pattern.sub`` to the plain-text stretches of ``text`` only.
    
    Tags, wrapped ``<code>`` math and fraction spans are copied through
    unchanged.
    
    Args:
        pattern: Compiled regular expression.
        repl: Replacement string or function, as for ``re.sub``.
        text: Markup to process.
        
    Returns:
        The processed markup.
    """
    pieces = []
    last = 0
    for match in _PROTECTED.finditer(text):
        if match.start() > last:
            pieces.append(pattern.sub(repl, text[last:match.start()]))
        pieces.append(match.group(0))
        last = match.end()
    if last < len(text):
        pieces.append(pattern.sub(repl, text[last:]))
    return ''.join(pieces)


def split_tags(markup: str) -> List[Tuple[str, str]]:
    """Split markup into ``('tag', ...)`` and ``('text', ...)`` segments."""
    segments: List[Tuple[str, str]] = []
    last = 0
    for match in _TAG.finditer(markup):
        if match.start() > last:
            segments.append(('text', markup[last:match.start()]))
        segments.append(('tag', match.group(0)))
        last = match.end()
    if last < len(markup):
        segments.append(('text', markup[last:]))
    return segments


def entity_spans(text: str) -> List[Tuple[int, int]]:
    """Return the ``(start, end)`` offsets of character references in ``text``."""
    return [match.span() for match in _ENTITY.finditer(text)]


def cuts_entity(start: int, end: int, spans: List[Tuple[int, int]]) -> bool:
    """True when ``[start, end)`` begins or ends inside one of ``spans``."""
    for span_start, span_end in spans:
        if span_start < start < span_end or span_start < end < span_end:
            return True
    return False
