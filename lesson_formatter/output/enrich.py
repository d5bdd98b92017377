"""Enrichment passes over rendered lesson markup.

Vocabulary terms and exercise questions are located in the text between
tags only, so attribute values and tag names are never rewritten, and text
already inside an annotation span is not annotated a second time.
"""

import html
import re
from typing import Callable, Iterable, Pattern, Tuple

from lesson_formatter.formatting.markup import cuts_entity, entity_spans, escape_html, split_tags
from lesson_formatter.models import Chapter, Exercise, VocabularyItem

ANNOTATION_CLASSES = ('vocabulary-term', 'interactive-exercise')

_SPAN_OPEN = re.compile(r'<span\b', re.IGNORECASE)
_SPAN_CLOSE = re.compile(r'</span\s*>', re.IGNORECASE)
_HEADING = re.compile(r'<(h[1-6])((?:\s[^>]*)?)>(.*?)</\1>', re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r'<[^>]+>')


def _is_annotation(tag: str) -> bool:
    return any(f'class="{css_class}"' in tag for css_class in ANNOTATION_CLASSES)


def annotate(markup: str, pattern: Pattern, wrap: Callable[[str], str]) -> Tuple[str, int]:
    """Wrap every match of ``pattern`` found in the text of ``markup``.
    
    Args:
        markup: HTML fragment.
        pattern: Compiled pattern, matched against escaped text.
        wrap: Builds the replacement markup from the matched text.
        
    Returns:
        The new markup and the number of matches wrapped.
    """
    pieces = []
    # One entry per open span: True when it is an annotation span
    spans = []
    count = 0
    
    for kind, segment in split_tags(markup):
        if kind == 'tag':
            if _SPAN_OPEN.match(segment):
                spans.append(_is_annotation(segment))
            elif _SPAN_CLOSE.match(segment) and spans:
                spans.pop()
            pieces.append(segment)
            continue
        
        if any(spans):
            pieces.append(segment)
            continue
        
        entities = entity_spans(segment)
        last = 0
        for match in pattern.finditer(segment):
            if match.start() == match.end() or cuts_entity(match.start(), match.end(), entities):
                continue
            pieces.append(segment[last:match.start()])
            pieces.append(wrap(match.group(0)))
            last = match.end()
            count += 1
        pieces.append(segment[last:])
    
    return ''.join(pieces), count


def _phrase_pattern(text: str, whole_word: bool) -> Pattern:
    escaped = re.escape(escape_html(text.strip()))
    if whole_word:
        escaped = r'(?<!\w)' + escaped + r'(?!\w)'
    return re.compile(escaped, re.IGNORECASE)


def highlight_vocabulary(markup: str, vocabulary: Iterable[VocabularyItem]) -> str:
    """Wrap every whole-word, case-insensitive occurrence of each term.
    
    Terms are applied in order; text already claimed by an earlier term is
    left alone.
    """
    result = markup
    for item in vocabulary:
        if not item.term or not item.term.strip():
            continue
        definition = escape_html(item.definition or '')
        
        def wrap(text, definition=definition):
            return (f'<span class="vocabulary-term" data-definition="{definition}" '
                    f'title="{definition}">{text}</span>')
        
        result, _ = annotate(result, _phrase_pattern(item.term, whole_word=True), wrap)
    return result


def mark_exercise_locations(markup: str, exercises: Iterable[Exercise]) -> str:
    """Tag the places where each exercise's question appears.
    
    The question text is searched first; when it does not occur, the
    exercise's ``location_in_content`` snippet is used instead.
    """
    result = markup
    for exercise in exercises:
        attributes = (f'data-exercise-id="{escape_html(str(exercise.id))}" '
                      f'data-type="{escape_html(str(exercise.type))}"')
        
        def wrap(text, attributes=attributes):
            return f'<span class="interactive-exercise" {attributes}>{text}</span>'
        
        for needle in (exercise.question_text, exercise.location_in_content):
            if not needle or not needle.strip():
                continue
            result, count = annotate(result, _phrase_pattern(needle, whole_word=False), wrap)
            if count:
                break
    return result


def enhance_with_chapters(markup: str, chapters: Iterable[Chapter]) -> str:
    """Anchor headings that carry a chapter title.
    
    The first heading whose text equals a chapter title (ignoring case and
    surrounding whitespace) gets ``id="chapter-N"`` and ``data-chapter="N"``,
    numbering chapters from 1 in the given order.
    """
    numbers = {}
    for number, chapter in enumerate(chapters, 1):
        key = chapter.title.strip().lower() if chapter.title else ''
        if key and key not in numbers:
            numbers[key] = number
    if not numbers:
        return markup
    
    def anchor(match: re.Match) -> str:
        tag, attributes, inner = match.group(1), match.group(2), match.group(3)
        key = html.unescape(_TAG.sub('', inner)).strip().lower()
        if key not in numbers or re.search(r"\sid=", attributes):
            return match.group(0)
        number = numbers.pop(key)
        return f'<{tag}{attributes} id="chapter-{number}" data-chapter="{number}">{inner}</{tag}>'
    
    return _HEADING.sub(anchor, markup)
