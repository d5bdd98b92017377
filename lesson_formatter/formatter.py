"""Main formatter module: raw lesson text or content blocks to HTML."""

import re
from typing import Any, Dict, Mapping

from lesson_formatter.analysis.analyzer import TextAnalysis, TextAnalyzer
from lesson_formatter.analysis.restorer import LineBreakRestorer
from lesson_formatter.blocks.models import StructuredContent, parse_blocks, validate_blocks
from lesson_formatter.formatting.chunking import ParagraphChunker
from lesson_formatter.formatting.markup import escape_safe
from lesson_formatter.models import AgeGroup, DocumentFormatterOptions
from lesson_formatter.output.assembler import HtmlAssembler, process_section_markers
from lesson_formatter.output.enrich import enhance_with_chapters, highlight_vocabulary, mark_exercise_locations
from lesson_formatter.output.structured import RendererOptions, StructuredRenderer
from lesson_formatter.utils.config import load_config
from lesson_formatter.utils.logging import logger


def _coerce_text(raw_text: Any) -> str:
    if raw_text is None:
        return ''
    if isinstance(raw_text, str):
        return raw_text
    if isinstance(raw_text, (bytes, bytearray)):
        return bytes(raw_text).decode('utf-8', errors='replace')
    return str(raw_text)


class DocumentFormatter:
    """Formats lesson content, degrading through simpler tiers on failure.
    
    Tiers, in order: structured (typed content blocks), full heuristic,
    basic heuristic, minimal safe. ``format`` never raises.
    """
    
    def __init__(self, config: Dict[str, Any] = None):
        """Initialize with configuration settings.
        
        Args:
            config: Configuration dictionary; the packaged defaults if None.
        """
        self.config = config if config is not None else load_config()
        self.default_age_group = AgeGroup.coerce(self.config['formatting']['default_age_group'])
        self.analyzer = TextAnalyzer(self.config)
        self.restorer = LineBreakRestorer(self.config)
        self.chunker = ParagraphChunker(self.config)
        self.assembler = HtmlAssembler(self.chunker)
        self.renderer = StructuredRenderer(config=self.config)
    
    def format(self, raw_text: Any, options: Any = None) -> str:
        """Format lesson content as HTML.
        
        Args:
            raw_text: Raw extracted text. ``None`` and non-string values are
                coerced to text.
            options: DocumentFormatterOptions, an equivalent camelCase
                mapping, or None.
                
        Returns:
            HTML markup; an empty string for empty text without content blocks.
        """
        text = _coerce_text(raw_text)
        options = self._coerce_options(options)
        
        if options.content_blocks:
            markup = self.structured_format(options)
            if markup is not None:
                return markup
        
        if not text:
            return ''
        
        try:
            return self.full_format(text, options)
        except Exception as e:
            logger.warning(f"Full formatting failed, using basic format: {e}")
        
        try:
            return self.basic_format(text)
        except Exception as e:
            logger.error(f"Basic formatting failed, using minimal safe format: {e}")
        
        return self.minimal_safe_format(text)
    
    def analyze(self, raw_text: Any) -> TextAnalysis:
        """Return the structural analysis of raw text."""
        return self.analyzer.analyze(_coerce_text(raw_text))
    
    def structured_format(self, options: DocumentFormatterOptions):
        """Render content blocks, or return None when the heuristic path should run."""
        blocks = options.content_blocks
        if not validate_blocks(blocks):
            logger.warning(f"Content blocks validation failed, falling back to heuristic formatting "
                           f"({_count(blocks)} blocks)")
            return None
        
        try:
            content = StructuredContent.from_blocks(parse_blocks(blocks))
            logger.info(f"Rendering {len(content.blocks)} content blocks")
            render_options = RendererOptions(
                age_group=options.age_group,
                include_icons=self.renderer.options.include_icons,
                color_scheme=self.renderer.options.color_scheme,
            )
            return self.renderer.render(content, render_options)
        except Exception as e:
            logger.warning(f"Structured rendering failed, falling back to heuristic formatting: {e}")
            return None
    
    def full_format(self, text: str, options: DocumentFormatterOptions) -> str:
        """Full heuristic formatting with enrichment and the age-group wrapper."""
        processed = self._restore(text)
        processed = processed.replace('\r\n', '\n').replace('\r', '\n')
        processed = process_section_markers(processed)
        
        markup = self.assembler.convert(processed)
        
        if options.chapters:
            markup = enhance_with_chapters(markup, options.chapters)
        if options.vocabulary:
            markup = highlight_vocabulary(markup, options.vocabulary)
        if options.exercises:
            markup = mark_exercise_locations(markup, options.exercises)
        
        age_class = 'age-young' if options.age_group == AgeGroup.YOUNG else 'age-older'
        return f'<div class="formatted-content {age_class}">\n{markup}\n</div>'
    
    def basic_format(self, text: str) -> str:
        """Restoration and assembly only, without enrichment or wrapper."""
        return self.assembler.convert(self._restore(text))
    
    def minimal_safe_format(self, text: str) -> str:
        """Escape the text and turn blank lines into paragraphs and newlines into breaks."""
        escaped = escape_safe(text)
        escaped = re.sub(r'\n\n+', '</p><p>', escaped)
        escaped = escaped.replace('\n', '<br>')
        return f'<div class="formatted-content"><p>{escaped}</p></div>'
    
    def _restore(self, text: str) -> str:
        analysis = self.analyzer.analyze(text)
        if analysis.needs_restoration:
            logger.debug(f"Restoring line breaks ({len(text)} chars, newline ratio {analysis.newline_ratio:.4f})")
            return self.restorer.restore(text)
        return text
    
    def _coerce_options(self, options: Any) -> DocumentFormatterOptions:
        defaults = DocumentFormatterOptions(age_group=self.default_age_group)
        if options is None:
            return defaults
        try:
            coerced = DocumentFormatterOptions.coerce(options)
        except (ValueError, TypeError) as e:
            logger.warning(f"Invalid formatting options, using defaults: {e}")
            return defaults
        if isinstance(options, Mapping) and options.get('ageGroup', options.get('age_group')) is None:
            coerced = coerced.model_copy(update={'age_group': self.default_age_group})
        return coerced


def _count(blocks: Any) -> Any:
    try:
        return len(blocks)
    except TypeError:
        return 'unknown number of'


# Shared instance
document_formatter = DocumentFormatter()


def format_document(raw_text: Any, options: Any = None) -> str:
    """Format lesson content with the shared formatter; see ``DocumentFormatter.format``."""
    return document_formatter.format(raw_text, options)
