"""Common interface for line classification rules."""

import re
from typing import Any, Callable, Iterable, Optional, Pattern


class LineMatcher:
    """A single rule that recognises one kind of line.
    
    Subclasses implement ``match`` and return a match object, or ``None``
    when the line is not theirs.
    """
    
    def match(self, line: str, next_line: str = '') -> Optional[Any]:
        raise NotImplementedError


class PatternMatcher(LineMatcher):
    """Matches a compiled pattern at the start of the line and builds a result from it."""
    
    def __init__(self, pattern: Pattern, build: Callable[[re.Match], Optional[Any]]):
        self.pattern = pattern
        self.build = build
    
    def match(self, line: str, next_line: str = '') -> Optional[Any]:
        found = self.pattern.match(line)
        if not found:
            return None
        return self.build(found)


def first_match(matchers: Iterable[LineMatcher], line: str, next_line: str = '') -> Optional[Any]:
    """Return the result of the first matcher that accepts the line."""
    for matcher in matchers:
        result = matcher.match(line, next_line)
        if result is not None:
            return result
    return None
