"""Line-break restoration for flat text.

PDF and slide extraction often return a whole document as one line. The
restorer puts paragraph and section breaks back using the boundary signals
and a fixed sequence of structural normalisations. It is a one-shot
heuristic: running it twice is not guaranteed to give the same result.
"""

import re
from typing import Any, Dict, List

from lesson_formatter.analysis.boundaries import (PARAGRAPH, QUESTION, SECTION, SentenceBoundary,
                                                  detect_sentence_boundaries)
from lesson_formatter.patterns import BULLET_GLYPHS, RESTORER_SECTIONS

BREAKS = {
    SECTION: '\n\n\n',
    PARAGRAPH: '\n\n',
    QUESTION: '\n\n',
}

_WHITESPACE = re.compile(r'\s+')
_LEADING_WHITESPACE = re.compile(r'\s*')

_PAGE_MARKER = re.compile(r'\s*\[Page\s*(\d+)\]\s*', re.IGNORECASE)
_SECTION_MARKER = re.compile(r'\s*(\[Section\s*\d+\])\s*', re.IGNORECASE)
_BULLET = re.compile(r'\s*([' + BULLET_GLYPHS + r'])\s*')
_DASH_BULLET = re.compile(r'([.!?])\s*-\s+([A-Z])')
_NUMBERED_ITEM = re.compile(r'\s+(\d+[.)]\s+)([A-Z])')
_LETTERED_ITEM = re.compile(r'\s+([a-z][.)]\s+)([A-Z])')
_METADATA_FIELDS = tuple(
    re.compile(r'(' + field + r':\s*[^:]+?)(?=\s+(?:' + '|'.join(others) + r'):)', re.IGNORECASE)
    for field, others in (
        ('Grade Level', ('Subject', 'Topic', 'Duration', 'Time', 'Prerequisites?')),
        ('Subject', ('Grade Level', 'Topic', 'Duration', 'Time', 'Prerequisites?')),
        ('Topic', ('Grade Level', 'Subject', 'Duration', 'Time', 'Prerequisites?')),
        ('Duration', ('Grade Level', 'Subject', 'Topic', 'Time', 'Prerequisites?')),
    )
)
_NUMBERED_HEADER = re.compile(r'\s+((?:Step|Example|Problem|Part)\s+\d+)\s*:', re.IGNORECASE)
_SECTION_HEADERS = tuple(
    re.compile(r'([.!?]|^)\s*(' + header + r')\b[ \t]*(:?)[ \t]*', re.IGNORECASE)
    for header in RESTORER_SECTIONS
)
_RULE_OPENER = re.compile(
    r'([.!?])\s+(The\s+(?:Simple\s+)?(?:Rule|Formula|Method|Key|Basic)\s+(?:for|of|to)\s+[A-Z])',
    re.IGNORECASE,
)

# Labels the semantic classifier reads together with their body
_INLINE_LABELS = frozenset(['key concept'])


def _section_header(match: re.Match) -> str:
    punctuation, name, colon = match.group(1), match.group(2), match.group(3)
    if colon and name.lower() not in _INLINE_LABELS:
        return f'{punctuation}\n\n{name}{colon}\n'
    return f'{punctuation}\n\n{name}{colon}'


class LineBreakRestorer:
    """Rewrites near-flat text into paragraph and section delimited text."""
    
    def __init__(self, config: Dict[str, Any]):
        """Initialize with configuration settings.
        
        Args:
            config: Configuration dictionary.
        """
        self.config = config
        self.min_confidence = config['restoration']['min_confidence']
        self.bucket_width = config['restoration']['bucket_width']
    
    def restore(self, text: str) -> str:
        """Restore line breaks in flat text.
        
        Args:
            text: Raw text, usually with few or no newlines.
            
        Returns:
            Text with paragraphs separated by blank lines.
        """
        if not text:
            return ''
        
        result = _WHITESPACE.sub(' ', text).strip()
        result = self.insert_breaks(result, detect_sentence_boundaries(result))
        result = self.normalize_structure(result)
        return result
    
    def insert_breaks(self, text: str, boundaries: List[SentenceBoundary]) -> str:
        """Insert line breaks after confident boundaries.
        
        Boundaries are taken by descending index, higher confidence first on
        ties. Only one boundary per bucket of ``bucket_width`` characters is
        used. The break goes right after the boundary's punctuation mark and
        any whitespace following it is dropped.
        
        Args:
            text: Whitespace-normalised text the boundaries were detected on.
            boundaries: Output of ``detect_sentence_boundaries``.
            
        Returns:
            Text with breaks inserted.
        """
        used_buckets = set()
        insertions = []
        
        for boundary in sorted(boundaries, key=lambda b: (-b.index, -b.confidence)):
            bucket = boundary.index // self.bucket_width
            if bucket in used_buckets or boundary.confidence <= self.min_confidence:
                continue
            
            point = boundary.index
            if boundary.punctuation:
                punctuation_index = text.find(boundary.punctuation, boundary.index)
                if punctuation_index != -1:
                    point = punctuation_index + 1
            
            if 0 < point < len(text):
                insertions.append((point, BREAKS.get(boundary.type, '\n')))
                used_buckets.add(bucket)
        
        # Assemble in one pass instead of re-slicing the string per insertion
        pieces = []
        last = 0
        for point, line_break in sorted(insertions):
            pieces.append(text[last:point])
            pieces.append(line_break)
            last = _LEADING_WHITESPACE.match(text, point).end()
        pieces.append(text[last:])
        
        return ''.join(pieces)
    
    def normalize_structure(self, text: str) -> str:
        """Force markers, list items, metadata fields and headers onto their own lines."""
        result = _PAGE_MARKER.sub(r'\n\n[Section \1]\n\n', text)
        result = _SECTION_MARKER.sub(r'\n\n\1\n\n', result)
        
        result = _BULLET.sub(r'\n\1 ', result)
        result = _DASH_BULLET.sub(r'\1\n- \2', result)
        
        result = _NUMBERED_ITEM.sub(r'\n\1\2', result)
        result = _LETTERED_ITEM.sub(r'\n\1\2', result)
        
        for pattern in _METADATA_FIELDS:
            result = pattern.sub(r'\1\n', result)
        
        result = _NUMBERED_HEADER.sub(r'\n\n\1:', result)
        
        for pattern in _SECTION_HEADERS:
            result = pattern.sub(_section_header, result)
        
        result = _RULE_OPENER.sub(r'\1\n\n\2', result)
        
        # Clean up
        result = re.sub(r'\n{4,}', '\n\n\n', result)
        result = result.strip('\n')
        result = '\n'.join(line.strip() for line in result.split('\n'))
        result = re.sub(r'\n{3,}', '\n\n', result)
        
        return result
