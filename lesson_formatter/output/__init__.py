"""HTML assembly, structured rendering, enrichment and file output."""

from lesson_formatter.output.assembler import HtmlAssembler, process_section_markers
from lesson_formatter.output.enrich import enhance_with_chapters, highlight_vocabulary, mark_exercise_locations
from lesson_formatter.output.structured import (RendererOptions, StructuredRenderer, create_renderer,
                                                structured_renderer)
from lesson_formatter.output.styles import stylesheet
from lesson_formatter.output.writer import OutputManager

__all__ = ['HtmlAssembler', 'process_section_markers', 'enhance_with_chapters', 'highlight_vocabulary',
           'mark_exercise_locations', 'RendererOptions', 'StructuredRenderer', 'create_renderer',
           'structured_renderer', 'stylesheet', 'OutputManager']
