"""Heuristic sentence, paragraph and section boundary detection.

Four independent scans run over whitespace-normalised text and their hits
are returned together. No single hit is authoritative; the restorer
decides which ones to act on.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from lesson_formatter.patterns import BOUNDARY_SECTIONS, QUESTION_STARTERS, TRANSITION_PHRASES

SENTENCE = 'sentence'
PARAGRAPH = 'paragraph'
SECTION = 'section'
QUESTION = 'question'

_SENTENCE_END = re.compile(r'([.!?])\s+([A-Z])')
_TRANSITIONS = tuple(
    re.compile(r'([.!?])\s*(' + re.escape(phrase) + r')', re.IGNORECASE)
    for phrase in TRANSITION_PHRASES
)
_SECTIONS = tuple(
    re.compile(r'([.!?]|^)\s*(' + section + r')\s*[:•\-]?', re.IGNORECASE)
    for section in BOUNDARY_SECTIONS
)


@dataclass(frozen=True)
class SentenceBoundary:
    index: int
    confidence: float
    type: str
    punctuation: Optional[str] = None
    section_name: Optional[str] = None


def detect_sentence_boundaries(text: str) -> List[SentenceBoundary]:
    """Detect sentence boundaries with confidence scores.
    
    Args:
        text: Whitespace-normalised text.
        
    Returns:
        Unordered list of boundaries; ``index`` is the offset of the
        punctuation mark (or of the keyword at the start of the text).
    """
    boundaries = []
    
    # Signal 1: sentence punctuation followed by a capital letter
    for match in _SENTENCE_END.finditer(text):
        boundaries.append(SentenceBoundary(match.start(), 0.85, SENTENCE, match.group(1)))
    
    # Signal 2: transition phrases
    for pattern in _TRANSITIONS:
        for match in pattern.finditer(text):
            boundaries.append(SentenceBoundary(match.start(), 0.9, PARAGRAPH, match.group(1)))
    
    # Signal 3: educational section keywords
    for pattern in _SECTIONS:
        for match in pattern.finditer(text):
            boundaries.append(SentenceBoundary(
                match.start(), 0.95, SECTION,
                punctuation=match.group(1) or None,
                section_name=match.group(2),
            ))
    
    # Signal 4: question starters
    for match in QUESTION_STARTERS.finditer(text):
        boundaries.append(SentenceBoundary(match.start(), 0.88, QUESTION, match.group(1)))
    
    return boundaries
