"""Structural analysis of raw extracted text."""

import re
from dataclasses import dataclass
from typing import Any, Dict

from lesson_formatter.formatting.math import math_formatter
from lesson_formatter.patterns import BULLET_GLYPHS

_SENTENCE_SPLIT = re.compile(r'[.!?]+')
_BULLETS = re.compile('[' + BULLET_GLYPHS + ']')
_PAGE_MARKERS = re.compile(r'\[Page\s*\d+\]', re.IGNORECASE)
_METADATA = re.compile(r'(Grade Level|Subject|Topic|Duration):', re.IGNORECASE)
_NUMBERED_STEPS = re.compile(r'(Step|Example|Problem)\s*\d+', re.IGNORECASE)
_EDUCATIONAL_KEYWORDS = re.compile(r'(Learning Objectives?|Prerequisites?|Key Concepts?|Summary|Vocabulary)', re.IGNORECASE)


@dataclass(frozen=True)
class TextAnalysis:
    """Read-only snapshot of the structural signals of one text."""
    word_count: int = 0
    sentence_count: int = 0
    avg_sentence_length: float = 0.0
    has_bullets: bool = False
    has_page_markers: bool = False
    has_metadata: bool = False
    has_numbered_steps: bool = False
    has_educational_keywords: bool = False
    has_math: bool = False
    newline_ratio: float = 0.0
    needs_restoration: bool = False


class TextAnalyzer:
    """Computes a TextAnalysis for raw text."""
    
    def __init__(self, config: Dict[str, Any]):
        """Initialize with configuration settings.
        
        Args:
            config: Configuration dictionary.
        """
        self.config = config
        self.newline_ratio = config['restoration']['newline_ratio']
        self.min_length = config['restoration']['min_length']
    
    def analyze(self, text: str) -> TextAnalysis:
        """Analyze text to understand its structure.
        
        Text is considered flat, and in need of line-break restoration,
        when it is longer than the configured minimum length and has fewer
        newlines per character than the configured ratio.
        
        Args:
            text: Raw text.
            
        Returns:
            TextAnalysis for the text.
        """
        if not text:
            return TextAnalysis()
        
        words = text.split()
        sentences = [s for s in _SENTENCE_SPLIT.split(text) if s]
        avg_sentence_length = len(words) / len(sentences) if sentences else 0.0
        
        newline_ratio = text.count('\n') / len(text)
        
        return TextAnalysis(
            word_count=len(words),
            sentence_count=len(sentences),
            avg_sentence_length=avg_sentence_length,
            has_bullets=bool(_BULLETS.search(text)),
            has_page_markers=bool(_PAGE_MARKERS.search(text)),
            has_metadata=bool(_METADATA.search(text)),
            has_numbered_steps=bool(_NUMBERED_STEPS.search(text)),
            has_educational_keywords=bool(_EDUCATIONAL_KEYWORDS.search(text)),
            has_math=math_formatter.contains_math(text),
            newline_ratio=newline_ratio,
            needs_restoration=newline_ratio < self.newline_ratio and len(text) > self.min_length,
        )
