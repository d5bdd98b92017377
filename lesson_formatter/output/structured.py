"""Rendering of typed content blocks into styled HTML."""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence, Union

from lesson_formatter.blocks import models as blocks
from lesson_formatter.blocks.models import ContentBlock, StructuredContent, parse_blocks
from lesson_formatter.formatting.chunking import ParagraphChunker
from lesson_formatter.formatting.inline import InlineFormatter, inline_formatter
from lesson_formatter.formatting.markup import escape_html
from lesson_formatter.models import AgeGroup
from lesson_formatter.utils.config import load_config

VIBRANT = 'vibrant'
SUBTLE = 'subtle'

ICONS = {
    'example': '📝',
    'keyConceptBox': '💡',
    'rule': '📐',
    'formula': '🔢',
    'wordProblem': '📚',
    'stepByStep': '👣',
    'tip': '💡',
    'note': '📝',
    'warning': '⚠️',
    'question': '❓',
    'answer': '✅',
    'vocabulary': '📖',
}

EMPTY_CONTENT = '<p class="text-gray-500 italic">No content available</p>'


@dataclass(frozen=True)
class RendererOptions:
    """Presentation options for one render.
    
    ``color_scheme`` of ``None`` follows the age group: vibrant for young
    learners, subtle otherwise.
    """
    age_group: AgeGroup = AgeGroup.OLDER
    include_icons: bool = True
    color_scheme: Optional[str] = None
    
    @property
    def resolved_color_scheme(self) -> str:
        if self.color_scheme:
            return self.color_scheme
        return VIBRANT if self.age_group == AgeGroup.YOUNG else SUBTLE
    
    @classmethod
    def from_config(cls, config: Dict[str, Any], age_group: Any = None) -> 'RendererOptions':
        renderer = config.get('renderer') or {}
        if age_group is None:
            age_group = (config.get('formatting') or {}).get('default_age_group')
        return cls(
            age_group=AgeGroup.coerce(age_group),
            include_icons=renderer.get('include_icons', True),
            color_scheme=renderer.get('color_scheme'),
        )


def _block(css_class: str, *parts: str) -> str:
    body = '\n'.join(f'  {part}' for part in parts if part)
    return f'<div class="{css_class}">\n{body}\n</div>'


class StructuredRenderer:
    """Renders StructuredContent with one fixed template per block kind."""
    
    def __init__(self, options: RendererOptions = None, config: Dict[str, Any] = None,
                 inline: InlineFormatter = None):
        """Initialize the renderer.
        
        Args:
            options: Default options, used when ``render`` gets none.
            config: Configuration dictionary; the packaged defaults if None.
            inline: Formatter for leaf text; the shared instance by default.
        """
        self.config = config if config is not None else load_config()
        self.options = options or RendererOptions.from_config(self.config)
        self.chunker = ParagraphChunker(self.config)
        self.inline = inline or inline_formatter
        
        self._renderers = {
            'metadata': self.render_metadata,
            'header': self.render_header,
            'paragraph': self.render_paragraph,
            'explanation': self.render_explanation,
            'example': self.render_example,
            'keyConceptBox': self.render_key_concept,
            'rule': self.render_rule,
            'formula': self.render_formula,
            'wordProblem': self.render_word_problem,
            'bulletList': self.render_bullet_list,
            'numberedList': self.render_numbered_list,
            'stepByStep': self.render_step_by_step,
            'tip': self.render_tip,
            'note': self.render_note,
            'warning': self.render_warning,
            'question': self.render_question,
            'answer': self.render_answer,
            'definition': self.render_definition,
            'vocabulary': self.render_vocabulary,
            'table': self.render_table,
            'divider': self.render_divider,
        }
    
    def set_options(self, age_group: Any = None, include_icons: Optional[bool] = None,
                    color_scheme: Optional[str] = None) -> None:
        """Update the instance options.
        
        Changing the age group without a colour scheme resets the scheme to
        the age group's default. Not safe while another thread renders with
        this instance; pass options to ``render`` instead.
        """
        options = self.options
        if age_group is not None:
            options = replace(options, age_group=AgeGroup.coerce(age_group), color_scheme=None)
        if include_icons is not None:
            options = replace(options, include_icons=include_icons)
        if color_scheme:
            options = replace(options, color_scheme=color_scheme)
        self.options = options
    
    def render(self, content: Union[StructuredContent, Sequence[Any]],
               options: RendererOptions = None) -> str:
        """Render structured content to HTML.
        
        Args:
            content: StructuredContent, or a sequence of blocks (typed or
                JSON-style mappings).
            options: Options for this call only; instance options if None.
            
        Returns:
            The rendered markup.
            
        Raises:
            BlockError: If a block mapping cannot be parsed.
        """
        options = options or self.options
        items = content.blocks if isinstance(content, StructuredContent) else content
        if not items:
            return EMPTY_CONTENT
        
        rendered = [self.render_block(block, i, options) for i, block in enumerate(parse_blocks(items))]
        
        age_class = 'age-young' if options.age_group == AgeGroup.YOUNG else 'age-older'
        color_class = 'color-vibrant' if options.resolved_color_scheme == VIBRANT else 'color-subtle'
        body = '\n'.join(html for html in rendered if html)
        
        return f'<div class="structured-content {age_class} {color_class}">\n{body}\n</div>'
    
    def render_block(self, block: ContentBlock, index: int, options: RendererOptions = None) -> str:
        """Render a single block; ``index`` numbers untitled examples and problems."""
        options = options or self.options
        renderer = self._renderers.get(block.type)
        if renderer is None:
            return f'<p class="text-gray-600">{escape_html(repr(block))}</p>'
        return renderer(block, index, options)
    
    # Helpers
    
    def _text(self, text: str) -> str:
        return self.inline.format_text(text)
    
    def _math(self, text: str) -> str:
        return self.inline.math.format_math_expressions(escape_html(text))
    
    def _icon(self, kind: str, options: RendererOptions) -> str:
        if not options.include_icons:
            return ''
        return f'<span class="icon">{ICONS[kind]}</span>'
    
    # Block renderers
    
    def render_metadata(self, block: blocks.MetadataBlock, index, options) -> str:
        items = []
        for css_class, label, value in (('grade', 'Grade', block.grade_level),
                                        ('subject', 'Subject', block.subject),
                                        ('topic', 'Topic', block.topic),
                                        ('duration', 'Duration', block.duration)):
            if value:
                items.append(f'<span class="metadata-item {css_class}"><span class="label">{label}:</span> '
                             f'{escape_html(value)}</span>')
        
        prerequisites = ''
        if block.prerequisites:
            entries = ''.join(f'<li>{escape_html(p)}</li>' for p in block.prerequisites)
            prerequisites = (f'<div class="prerequisites"><span class="label">Prerequisites:</span>'
                             f'<ul>{entries}</ul></div>')
        
        if not items and not prerequisites:
            return ''
        
        return _block('metadata-bar',
                      f'<div class="metadata-items">{"".join(items)}</div>' if items else '',
                      prerequisites)
    
    def render_header(self, block: blocks.HeaderBlock, index, options) -> str:
        level = block.level
        return f'<h{level} class="content-header header-level-{level}">{self._text(block.text)}</h{level}>'
    
    def render_paragraph(self, block: blocks.ParagraphBlock, index, options) -> str:
        chunks = self.chunker.split_long_paragraph(block.text)
        return '\n'.join(f'<p class="content-paragraph">{self._text(chunk)}</p>' for chunk in chunks)
    
    def render_explanation(self, block: blocks.ExplanationBlock, index, options) -> str:
        css_class = 'explanation-block explanation-important' if block.emphasis == 'important' else 'explanation-block'
        return _block(css_class, f'<p>{self._text(block.text)}</p>')
    
    def render_example(self, block: blocks.ExampleBlock, index, options) -> str:
        title = block.title or f'Example {index + 1}'
        solution = ''
        if block.solution:
            solution = (f'<div class="example-solution"><span class="solution-label">Solution:</span> '
                        f'<p>{self._text(block.solution)}</p></div>')
        
        return _block('example-block',
                      f'<div class="example-header">{self._icon("example", options)}'
                      f'<span class="example-title">{escape_html(title)}</span></div>',
                      f'<div class="example-content">{self._text(block.content)}</div>',
                      solution)
    
    def render_key_concept(self, block: blocks.KeyConceptBlock, index, options) -> str:
        title = block.title or 'Key Concept'
        return _block('key-concept-box',
                      f'<div class="concept-header">{self._icon("keyConceptBox", options)}'
                      f'<span class="concept-title">{escape_html(title)}</span></div>',
                      f'<p class="concept-text">{self._text(block.text)}</p>')
    
    def render_rule(self, block: blocks.RuleBlock, index, options) -> str:
        description = f'<p class="rule-description">{self._text(block.description)}</p>' if block.description else ''
        steps = ''
        if block.steps:
            items = ''.join(f'<li>{self._text(step)}</li>' for step in block.steps)
            steps = f'<ol class="rule-steps">{items}</ol>'
        formula = f'<div class="rule-formula">{self._math(block.formula)}</div>' if block.formula else ''
        
        return _block('rule-box',
                      f'<div class="rule-header">{self._icon("rule", options)}'
                      f'<span class="rule-title">{escape_html(block.title)}</span></div>',
                      description, steps, formula)
    
    def render_formula(self, block: blocks.FormulaBlock, index, options) -> str:
        explanation = ''
        if block.explanation:
            explanation = f'<p class="formula-explanation">{self._text(block.explanation)}</p>'
        return _block('formula-block',
                      f'<div class="formula-display">{self._icon("formula", options)}{self._math(block.formula)}</div>',
                      explanation)
    
    def render_word_problem(self, block: blocks.WordProblemBlock, index, options) -> str:
        title = block.title or f'Problem {index + 1}'
        icon = block.icon or (ICONS['wordProblem'] if options.include_icons else '')
        
        parts = []
        for css_class, label, value in (('problem-statement', 'Problem', block.problem),
                                        ('problem-understand', 'Understand', block.understand),
                                        ('problem-setup', 'Set up', block.setup),
                                        ('problem-calculate', 'Calculate', block.calculate),
                                        ('problem-simplify', 'Simplify', block.simplify),
                                        ('problem-answer', 'Answer', block.answer)):
            if value:
                parts.append(f'<div class="{css_class}"><span class="part-label">{label}:</span> '
                             f'<p>{self._text(value)}</p></div>')
        
        return _block('word-problem-block',
                      f'<div class="problem-header"><span class="problem-icon">{escape_html(icon)}</span>'
                      f'<span class="problem-title">{escape_html(title)}</span></div>',
                      '<div class="problem-parts">\n    ' + '\n    '.join(parts) + '\n  </div>')
    
    def _list(self, css_class: str, tag: str, list_class: str, title: Optional[str], items) -> str:
        title_html = f'<div class="list-title">{escape_html(title)}</div>' if title else ''
        entries = '\n    '.join(f'<li>{self._text(item)}</li>' for item in items)
        return _block(css_class, title_html,
                      f'<{tag} class="content-list {list_class}">\n    {entries}\n  </{tag}>')
    
    def render_bullet_list(self, block: blocks.BulletListBlock, index, options) -> str:
        return self._list('bullet-list-block', 'ul', 'bullet-list', block.title, block.items)
    
    def render_numbered_list(self, block: blocks.NumberedListBlock, index, options) -> str:
        return self._list('numbered-list-block', 'ol', 'numbered-list', block.title, block.items)
    
    def render_step_by_step(self, block: blocks.StepByStepBlock, index, options) -> str:
        title = block.title or 'Steps'
        steps = []
        for i, step in enumerate(block.steps, 1):
            label = step.label or f'Step {i}'
            steps.append(f'<div class="step-item"><span class="step-number">{i}</span>'
                         f'<div class="step-content"><span class="step-label">{escape_html(label)}:</span> '
                         f'<p>{self._text(step.content)}</p></div></div>')
        
        return _block('step-by-step-block',
                      f'<div class="steps-header">{self._icon("stepByStep", options)}'
                      f'<span class="steps-title">{escape_html(title)}</span></div>',
                      '<div class="steps-container">\n    ' + '\n    '.join(steps) + '\n  </div>')
    
    def render_tip(self, block: blocks.TipBlock, index, options) -> str:
        return _block('tip-block',
                      f'<div class="tip-header">{self._icon("tip", options)}<span class="tip-label">Tip</span></div>',
                      f'<p class="tip-text">{self._text(block.text)}</p>')
    
    def render_note(self, block: blocks.NoteBlock, index, options) -> str:
        return _block('note-block',
                      f'<div class="note-header">{self._icon("note", options)}<span class="note-label">Note</span></div>',
                      f'<p class="note-text">{self._text(block.text)}</p>')
    
    def render_warning(self, block: blocks.WarningBlock, index, options) -> str:
        return _block('warning-block',
                      f'<div class="warning-header">{self._icon("warning", options)}'
                      f'<span class="warning-label">Watch Out!</span></div>',
                      f'<p class="warning-text">{self._text(block.text)}</p>')
    
    def render_question(self, block: blocks.QuestionBlock, index, options) -> str:
        hint = ''
        if block.hint:
            hint = f'<p class="question-hint"><span class="hint-label">Hint:</span> {self._text(block.hint)}</p>'
        return _block('question-block',
                      f'<div class="question-content">{self._icon("question", options)}'
                      f'<p class="question-text">{self._text(block.text)}</p></div>',
                      hint)
    
    def render_answer(self, block: blocks.AnswerBlock, index, options) -> str:
        explanation = ''
        if block.explanation:
            explanation = f'<p class="answer-explanation">{self._text(block.explanation)}</p>'
        return _block('answer-block',
                      f'<div class="answer-content">{self._icon("answer", options)}'
                      f'<p class="answer-text">{self._text(block.text)}</p></div>',
                      explanation)
    
    def render_definition(self, block: blocks.DefinitionBlock, index, options) -> str:
        example = ''
        if block.example:
            example = (f'<p class="definition-example"><span class="example-label">Example:</span> '
                       f'{self._text(block.example)}</p>')
        return _block('definition-block',
                      f'<span class="term">{escape_html(block.term)}</span>',
                      f'<span class="definition-text">{self._text(block.definition)}</span>',
                      example)
    
    def render_vocabulary(self, block: blocks.VocabularyBlock, index, options) -> str:
        terms = []
        for item in block.terms:
            example = f'<span class="vocab-example">{self._text(item.example)}</span>' if item.example else ''
            terms.append(f'<div class="vocab-item"><span class="vocab-term">{escape_html(item.term)}</span>'
                         f'<span class="vocab-definition">{self._text(item.definition)}</span>{example}</div>')
        
        return _block('vocabulary-block',
                      f'<div class="vocab-header">{self._icon("vocabulary", options)}'
                      '<span class="vocab-title">Vocabulary</span></div>',
                      '<div class="vocab-list">\n    ' + '\n    '.join(terms) + '\n  </div>')
    
    def render_table(self, block: blocks.TableBlock, index, options) -> str:
        title = f'<div class="table-title">{escape_html(block.title)}</div>' if block.title else ''
        head = ''
        if block.headers:
            cells = ''.join(f'<th>{escape_html(h)}</th>' for h in block.headers)
            head = f'<thead><tr>{cells}</tr></thead>'
        rows = '\n    '.join('<tr>' + ''.join(f'<td>{self._text(cell)}</td>' for cell in row) + '</tr>'
                             for row in block.rows)
        
        return _block('table-block', title,
                      f'<table class="content-table">{head}<tbody>\n    {rows}\n  </tbody></table>')
    
    def render_divider(self, block: blocks.DividerBlock, index, options) -> str:
        style = escape_html(block.style or 'solid')
        if block.label:
            return _block(f'divider-block divider-{style} with-label',
                          f'<span class="divider-label">{escape_html(block.label)}</span>')
        return f'<div class="divider-block divider-{style}"></div>'


def create_renderer(options: RendererOptions = None, config: Dict[str, Any] = None) -> StructuredRenderer:
    """Create a renderer with its own options, for callers that want a private instance."""
    return StructuredRenderer(options, config)


# Shared instance; pass per-call options to render instead of calling set_options
structured_renderer = StructuredRenderer()
