"""Line classification: semantic blocks, headers and list items."""

from lesson_formatter.classify.base import LineMatcher, PatternMatcher, first_match
from lesson_formatter.classify.semantic import SemanticMatch, classify_semantic
from lesson_formatter.classify.structure import HeaderMatch, ListItemMatch, match_header, match_list_item

__all__ = ['LineMatcher', 'PatternMatcher', 'first_match', 'SemanticMatch', 'classify_semantic',
           'HeaderMatch', 'ListItemMatch', 'match_header', 'match_list_item']
