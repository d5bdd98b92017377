"""Sentence splitting and paragraph chunking for readable output."""

import re
from typing import Any, Dict, List, Set

from lesson_formatter.patterns import ABBREVIATIONS

_ABBREVIATION = re.compile(
    r'\b(?:' + '|'.join(re.escape(abbr) for abbr in ABBREVIATIONS) + r')\.',
    re.IGNORECASE,
)
_DECIMAL = re.compile(r'(?<=\d)\.(?=\d)')
_ELLIPSIS = re.compile(r'\.{3}')
_SENTENCE_END = re.compile(r'([.!?])\s+(?=[A-Z])|([.!?])\Z')


class ParagraphChunker:
    """Splits long paragraphs into sentence-aligned chunks."""
    
    def __init__(self, config: Dict[str, Any]):
        """Initialize with configuration settings.
        
        Args:
            config: Configuration dictionary.
        """
        self.config = config
        self.max_sentences = config['chunking']['max_sentences']
    
    def split_into_sentences(self, text: str) -> List[str]:
        """Split text into sentences.
        
        Splits on ``.``, ``!`` or ``?`` followed by whitespace and a capital
        letter, or at the end of the text. Periods belonging to known
        abbreviations, decimal numbers and ellipses never end a sentence.
        
        Args:
            text: Paragraph text.
            
        Returns:
            List of sentences, each a trimmed slice of the original text.
        """
        if not text:
            return []
        
        protected = self._protected_periods(text)
        sentences = []
        last = 0
        
        for match in _SENTENCE_END.finditer(text):
            if match.start() in protected:
                continue
            sentence = text[last:match.start() + 1].strip()
            if sentence:
                sentences.append(sentence)
            last = match.end()
        
        # Trailing text without closing punctuation
        remaining = text[last:].strip()
        if remaining:
            sentences.append(remaining)
        
        return sentences
    
    def split_long_paragraph(self, text: str, max_sentences: int = None) -> List[str]:
        """Split a long paragraph into chunks of at most ``max_sentences``.
        
        Args:
            text: Paragraph text.
            max_sentences: Sentences per chunk; defaults to the configured value.
            
        Returns:
            List of chunks. A paragraph that is already short enough comes
            back unchanged (trimmed) as the only chunk.
        """
        if not text or not text.strip():
            return [text]
        
        if max_sentences is None:
            max_sentences = self.max_sentences
        
        sentences = self.split_into_sentences(text)
        if len(sentences) <= max_sentences:
            return [text.strip()]
        
        chunks = []
        for i in range(0, len(sentences), max_sentences):
            chunk = ' '.join(sentences[i:i + max_sentences]).strip()
            if chunk:
                chunks.append(chunk)
        
        return chunks
    
    def _protected_periods(self, text: str) -> Set[int]:
        """Return offsets of periods that must not end a sentence."""
        protected = set()
        
        for match in _ABBREVIATION.finditer(text):
            protected.add(match.end() - 1)
        
        for match in _DECIMAL.finditer(text):
            protected.add(match.start())
        
        for match in _ELLIPSIS.finditer(text):
            protected.update(range(match.start(), match.end()))
        
        return protected
