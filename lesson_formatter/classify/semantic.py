"""Recognition of semantic teaching blocks (tips, notes, rules, definitions...)."""

from dataclasses import dataclass
from typing import Optional

from lesson_formatter import patterns
from lesson_formatter.classify.base import PatternMatcher, first_match

SLIDE = 'slide'
TIP = 'tip'
NOTE = 'note'
WARNING = 'warning'
KEY_CONCEPT = 'keyConcept'
RULE = 'rule'
FORMULA = 'formula'
EXAMPLE = 'example'
DEFINITION = 'definition'

MAX_TERM_LENGTH = 40
MAX_TERM_WORDS = 4


@dataclass(frozen=True)
class SemanticMatch:
    """A line recognised as a semantic block.
    
    ``body`` is the text after the label. Slides carry ``number`` and
    ``title``; definitions carry the defined term in ``title``.
    """
    kind: str
    body: str = ''
    title: str = ''
    number: str = ''


def _labelled(kind: str, title: str = ''):
    return lambda m: SemanticMatch(kind, body=m.group(1), title=title)


def _slide(m) -> SemanticMatch:
    return SemanticMatch(SLIDE, title=m.group(2), number=m.group(1))


_NOT_DEFINITIONS = (patterns.QUESTION_LINE, patterns.DURATION_LINE, patterns.GRADE_LEVEL_LINE,
                    patterns.SUBJECT_LINE)


def _definition(m) -> Optional[SemanticMatch]:
    term = m.group(1).strip()
    # Long subjects are ordinary sentences, not vocabulary terms
    if len(term) > MAX_TERM_LENGTH or len(term.split(' ')) > MAX_TERM_WORDS:
        return None
    # Questions and lesson metadata have their own line kinds
    if any(pattern.match(m.string) for pattern in _NOT_DEFINITIONS):
        return None
    return SemanticMatch(DEFINITION, body=m.group(2).strip(), title=term)


# First match wins
SEMANTIC_MATCHERS = (
    PatternMatcher(patterns.SLIDE_MARKER, _slide),
    PatternMatcher(patterns.TIP, _labelled(TIP)),
    PatternMatcher(patterns.NOTE, _labelled(NOTE)),
    PatternMatcher(patterns.WARNING, _labelled(WARNING)),
    PatternMatcher(patterns.KEY_CONCEPT, _labelled(KEY_CONCEPT, 'Key Concept')),
    PatternMatcher(patterns.RULE, _labelled(RULE)),
    PatternMatcher(patterns.FORMULA, _labelled(FORMULA)),
    PatternMatcher(patterns.EXAMPLE, _labelled(EXAMPLE, 'Example')),
    PatternMatcher(patterns.DEFINITION, _definition),
)


def classify_semantic(line: str) -> Optional[SemanticMatch]:
    """Classify a trimmed line as a semantic block, or return None."""
    if not line:
        return None
    return first_match(SEMANTIC_MATCHERS, line)
