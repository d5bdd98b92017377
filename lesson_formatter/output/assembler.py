"""Line-by-line conversion of restored lesson text into HTML blocks."""

from typing import List, Optional

from lesson_formatter import patterns
from lesson_formatter.classify import semantic
from lesson_formatter.classify.semantic import SemanticMatch, classify_semantic
from lesson_formatter.classify.structure import NUMBERED, LETTERED, match_header, match_list_item
from lesson_formatter.formatting.chunking import ParagraphChunker
from lesson_formatter.formatting.inline import InlineFormatter, inline_formatter
from lesson_formatter.formatting.markup import escape_html


def process_section_markers(text: str) -> str:
    """Turn ``[Section n]`` and ``[Page n]`` markers into divider lines."""
    return patterns.SECTION_MARKER.sub(r'\n\n---SECTION \1---\n\n', text)


class _Document:
    """Output buffer plus the paragraph and list being accumulated."""
    
    def __init__(self, assembler: 'HtmlAssembler'):
        self.assembler = assembler
        self.blocks: List[str] = []
        self.paragraph: List[str] = []
        self.list_type: Optional[str] = None
        self.list_items: List[str] = []
    
    def flush_paragraph(self) -> None:
        if self.paragraph:
            text = ' '.join(self.paragraph).strip()
            if text:
                for chunk in self.assembler.chunker.split_long_paragraph(text):
                    self.blocks.append(f'<p>{self.assembler.inline.format_inline(chunk)}</p>')
            self.paragraph = []
    
    def flush_list(self) -> None:
        if self.list_items:
            tag = 'ol' if self.list_type in (NUMBERED, LETTERED) else 'ul'
            items = '\n'.join(f'<li>{self.assembler.inline.format_inline(item)}</li>'
                              for item in self.list_items)
            self.blocks.append(f'<{tag}>\n{items}\n</{tag}>')
        self.list_items = []
        self.list_type = None
    
    def flush(self) -> None:
        self.flush_list()
        self.flush_paragraph()


class HtmlAssembler:
    """Converts newline-structured text into a sequence of HTML blocks."""
    
    def __init__(self, chunker: ParagraphChunker, inline: InlineFormatter = None):
        """Initialize the assembler.
        
        Args:
            chunker: Splits long paragraphs before they are emitted.
            inline: Formatter for leaf text; the shared instance by default.
        """
        self.chunker = chunker
        self.inline = inline or inline_formatter
    
    def convert(self, text: str) -> str:
        """Convert text to HTML.
        
        Each line is classified in turn: blank line, section divider,
        semantic block, header, list item, question, metadata, and
        otherwise paragraph text. Consecutive paragraph lines are joined,
        consecutive list items of the same type share one list.
        
        Args:
            text: Text with one logical line per line.
            
        Returns:
            HTML blocks joined by newlines.
        """
        doc = _Document(self)
        lines = text.split('\n')
        
        for i, line in enumerate(lines):
            next_line = lines[i + 1] if i + 1 < len(lines) else ''
            trimmed = line.strip()
            
            if not trimmed:
                doc.flush()
                continue
            
            section = patterns.SECTION_DIVIDER.match(trimmed)
            if section:
                doc.flush()
                number = section.group(1)
                doc.blocks.append(f'<div class="section-break" data-section="{number}">'
                                  f'<span class="section-marker">Section {number}</span></div>')
                continue
            
            # Semantic blocks take precedence over headers and lists
            match = classify_semantic(trimmed)
            if match:
                doc.flush()
                doc.blocks.append(self.render_semantic(match))
                continue
            
            header = match_header(trimmed, next_line)
            if header:
                doc.flush()
                doc.blocks.append(f'<h{header.level} class="lesson-header">'
                                  f'{escape_html(header.text)}</h{header.level}>')
                continue
            
            item = match_list_item(trimmed)
            if item:
                doc.flush_paragraph()
                if doc.list_type is not None and doc.list_type != item.type:
                    doc.flush_list()
                doc.list_type = item.type
                doc.list_items.append(item.text)
                continue
            
            doc.flush_list()
            
            if patterns.QUESTION_LINE.match(trimmed):
                doc.flush_paragraph()
                doc.blocks.append(f'<p class="question"><strong>{self.inline.format_inline(trimmed)}</strong></p>')
                continue
            
            if (patterns.GRADE_LEVEL_LINE.search(trimmed) or patterns.SUBJECT_LINE.search(trimmed)
                    or patterns.DURATION_LINE.search(trimmed)):
                doc.flush_paragraph()
                doc.blocks.append(f'<p class="metadata">{self.inline.format_inline(trimmed)}</p>')
                continue
            
            doc.paragraph.append(trimmed)
        
        doc.flush()
        return '\n'.join(doc.blocks)
    
    def render_semantic(self, match: SemanticMatch) -> str:
        """Render a recognised semantic line through its fixed template."""
        fmt = self.inline.format_inline
        
        if match.kind == semantic.SLIDE:
            return ('<div class="slide-header">\n'
                    f'  <span class="slide-number">Slide {escape_html(match.number)}</span>\n'
                    f'  <h2 class="slide-title">{escape_html(match.title)}</h2>\n'
                    '</div>')
        
        if match.kind == semantic.TIP:
            return ('<div class="tip-block">\n'
                    '  <div class="tip-header"><span class="icon">💡</span><span class="tip-label">Tip</span></div>\n'
                    f'  <p class="tip-text">{fmt(match.body)}</p>\n'
                    '</div>')
        
        if match.kind == semantic.NOTE:
            return ('<div class="note-block">\n'
                    '  <div class="note-header"><span class="icon">📝</span><span class="note-label">Note</span></div>\n'
                    f'  <p class="note-text">{fmt(match.body)}</p>\n'
                    '</div>')
        
        if match.kind == semantic.WARNING:
            return ('<div class="warning-block">\n'
                    '  <div class="warning-header"><span class="icon">⚠️</span>'
                    '<span class="warning-label">Watch Out!</span></div>\n'
                    f'  <p class="warning-text">{fmt(match.body)}</p>\n'
                    '</div>')
        
        if match.kind == semantic.KEY_CONCEPT:
            return ('<div class="key-concept-box">\n'
                    '  <div class="concept-header"><span class="icon">💡</span>'
                    f'<span class="concept-title">{escape_html(match.title)}</span></div>\n'
                    f'  <p class="concept-text">{fmt(match.body)}</p>\n'
                    '</div>')
        
        if match.kind == semantic.RULE:
            return ('<div class="rule-box">\n'
                    '  <div class="rule-header"><span class="icon">📐</span><span class="rule-title">Rule</span></div>\n'
                    f'  <p class="rule-description">{fmt(match.body)}</p>\n'
                    '</div>')
        
        if match.kind == semantic.FORMULA:
            formula = self.inline.math.format_math_expressions(escape_html(match.body))
            return ('<div class="formula-block">\n'
                    f'  <div class="formula-display"><span class="icon">🔢</span>{formula}</div>\n'
                    '</div>')
        
        if match.kind == semantic.EXAMPLE:
            return ('<div class="example-block">\n'
                    '  <div class="example-header"><span class="icon">📝</span>'
                    f'<span class="example-title">{escape_html(match.title)}</span></div>\n'
                    f'  <div class="example-content">{fmt(match.body)}</div>\n'
                    '</div>')
        
        if match.kind == semantic.DEFINITION:
            return ('<div class="definition-block">\n'
                    f'  <span class="term">{escape_html(match.title)}</span>\n'
                    f'  <span class="definition-text">{fmt(match.body)}</span>\n'
                    '</div>')
        
        raise ValueError(f"Unknown semantic block kind: {match.kind}")
