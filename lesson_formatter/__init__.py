"""Deterministic formatting of educational lesson text into styled HTML."""

from lesson_formatter.formatter import DocumentFormatter, document_formatter, format_document
from lesson_formatter.models import (AgeGroup, Chapter, DocumentFormatterOptions, Exercise,
                                     VocabularyItem)

__version__ = '0.1.0'

__all__ = ['DocumentFormatter', 'document_formatter', 'format_document', 'AgeGroup', 'Chapter',
           'DocumentFormatterOptions', 'Exercise', 'VocabularyItem']
