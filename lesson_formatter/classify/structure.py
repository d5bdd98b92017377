"""Header and list item recognition for single lines."""

from dataclasses import dataclass
from typing import Optional

from lesson_formatter import patterns
from lesson_formatter.classify.base import LineMatcher, PatternMatcher, first_match
from lesson_formatter.formatting.markup import title_case

MAX_HEADER_LENGTH = 80
MAX_COLON_HEADER_LENGTH = 50
MAX_TITLE_CASE_HEADER_LENGTH = 40

BULLET = 'bullet'
NUMBERED = 'numbered'
LETTERED = 'lettered'


@dataclass(frozen=True)
class HeaderMatch:
    level: int
    text: str


@dataclass(frozen=True)
class ListItemMatch:
    type: str
    text: str
    number: Optional[str] = None
    letter: Optional[str] = None


class CanonicalHeader(LineMatcher):
    """Well-known section names such as "Learning Objectives" or "Summary:"."""
    
    def match(self, line, next_line=''):
        for pattern in patterns.SECTION_HEADERS:
            if pattern.match(line):
                return HeaderMatch(2, line[:-1] if line.endswith(':') else line)
        return None


class AllCapsHeader(LineMatcher):
    def match(self, line, next_line=''):
        if patterns.ALL_CAPS_HEADER.match(line):
            return HeaderMatch(2, title_case(line))
        return None


class NumberedHeader(LineMatcher):
    """``Step 1:``, ``Chapter 3.``, ``Problem 2)`` and the like."""
    
    def match(self, line, next_line=''):
        if patterns.NUMBERED_HEADER.match(line):
            return HeaderMatch(3, line)
        return None


class ColonHeader(LineMatcher):
    """Short capitalised line ending with a colon, unless it is a list item."""
    
    def match(self, line, next_line=''):
        if not line.endswith(':') or len(line) >= MAX_COLON_HEADER_LENGTH:
            return None
        if not 'A' <= line[0] <= 'Z':
            return None
        if patterns.BULLET_POINT.match(line) or patterns.NUMBERED_ITEM.match(line):
            return None
        return HeaderMatch(3, line[:-1])


class TitleCaseHeader(LineMatcher):
    """Short Title Case line introducing a longer line."""
    
    def match(self, line, next_line=''):
        if len(line) >= MAX_TITLE_CASE_HEADER_LENGTH or not patterns.TITLE_CASE_HEADER.match(line):
            return None
        if next_line and len(next_line.strip()) > len(line):
            return HeaderMatch(3, line)
        return None


HEADER_MATCHERS = (
    CanonicalHeader(),
    AllCapsHeader(),
    NumberedHeader(),
    ColonHeader(),
    TitleCaseHeader(),
)


def _bullet(m) -> ListItemMatch:
    return ListItemMatch(BULLET, m.string[m.end():])


def _numbered(m) -> ListItemMatch:
    return ListItemMatch(NUMBERED, m.string[m.end():], number=m.group(1))


def _lettered(m) -> ListItemMatch:
    return ListItemMatch(LETTERED, m.string[m.end():], letter=m.group(1))


LIST_MATCHERS = (
    PatternMatcher(patterns.BULLET_POINT, _bullet),
    PatternMatcher(patterns.NUMBERED_ITEM, _numbered),
    PatternMatcher(patterns.LETTERED_ITEM, _lettered),
)


def match_header(line: str, next_line: str = '') -> Optional[HeaderMatch]:
    """Classify a line as a header.
    
    Args:
        line: Line to classify.
        next_line: The following line, used by the Title Case rule.
        
    Returns:
        HeaderMatch with level 2 or 3, or None.
    """
    trimmed = line.strip()
    if not trimmed or len(trimmed) > MAX_HEADER_LENGTH:
        return None
    return first_match(HEADER_MATCHERS, trimmed, next_line)


def match_list_item(line: str) -> Optional[ListItemMatch]:
    """Classify a line as a bullet, numbered or lettered list item, marker stripped."""
    trimmed = line.strip()
    if not trimmed:
        return None
    return first_match(LIST_MATCHERS, trimmed)
