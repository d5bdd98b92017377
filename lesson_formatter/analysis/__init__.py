"""Structure analysis and line-break restoration for raw text."""

from lesson_formatter.analysis.analyzer import TextAnalysis, TextAnalyzer
from lesson_formatter.analysis.boundaries import SentenceBoundary, detect_sentence_boundaries
from lesson_formatter.analysis.restorer import LineBreakRestorer

__all__ = ['TextAnalysis', 'TextAnalyzer', 'SentenceBoundary', 'detect_sentence_boundaries',
           'LineBreakRestorer']
