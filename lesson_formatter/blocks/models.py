"""Typed content blocks for the structured rendering path.

Blocks arrive as JSON-style mappings with camelCase keys (for example from
an upstream content-analysis step). ``parse_blocks`` validates them into the
frozen pydantic models below, discriminated on ``type``; ``validate_blocks``
is the cheap shape check the orchestrator runs first.
"""

import math
from dataclasses import dataclass
from typing import Annotated, Any, Dict, Iterable, List, Literal, Mapping, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

WORDS_PER_MINUTE = 200


class BlockError(ValueError):
    """Raised when a content block mapping cannot be turned into a typed block."""


class BlockModel(BaseModel):
    """Frozen model that accepts camelCase aliases or field names.
    
    Numbers are accepted for text fields, e.g. a grade level of 5.
    """
    
    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)


class Step(BlockModel):
    content: str
    label: Optional[str] = None


class VocabularyTerm(BlockModel):
    term: str
    definition: str
    example: Optional[str] = None


class ContentBlock(BlockModel):
    """Base class; ``type`` is the JSON discriminant of each subclass."""
    
    type: str = ''
    id: Optional[str] = None


class MetadataBlock(ContentBlock):
    type: Literal['metadata'] = 'metadata'
    grade_level: Optional[str] = Field(default=None, alias='gradeLevel')
    subject: Optional[str] = None
    topic: Optional[str] = None
    duration: Optional[str] = None
    prerequisites: Tuple[str, ...] = ()


class HeaderBlock(ContentBlock):
    type: Literal['header'] = 'header'
    level: int
    text: str
    
    @field_validator('level', mode='before')
    @classmethod
    def reject_bool_level(cls, value):
        if isinstance(value, bool):
            raise ValueError('level must be an integer')
        return value
    
    @field_validator('level')
    @classmethod
    def clamp_level(cls, value):
        return min(4, max(1, value))


class ParagraphBlock(ContentBlock):
    type: Literal['paragraph'] = 'paragraph'
    text: str


class ExplanationBlock(ContentBlock):
    type: Literal['explanation'] = 'explanation'
    text: str
    emphasis: Literal['normal', 'important'] = 'normal'


class ExampleBlock(ContentBlock):
    type: Literal['example'] = 'example'
    content: str
    title: Optional[str] = None
    solution: Optional[str] = None


class KeyConceptBlock(ContentBlock):
    type: Literal['keyConceptBox'] = 'keyConceptBox'
    text: str
    title: Optional[str] = None


class RuleBlock(ContentBlock):
    type: Literal['rule'] = 'rule'
    title: str
    description: Optional[str] = None
    steps: Tuple[str, ...] = ()
    formula: Optional[str] = None


class FormulaBlock(ContentBlock):
    type: Literal['formula'] = 'formula'
    formula: str
    explanation: Optional[str] = None


class WordProblemBlock(ContentBlock):
    type: Literal['wordProblem'] = 'wordProblem'
    problem: str
    answer: str
    title: Optional[str] = None
    icon: Optional[str] = None
    understand: Optional[str] = None
    setup: Optional[str] = None
    calculate: Optional[str] = None
    simplify: Optional[str] = None


class BulletListBlock(ContentBlock):
    type: Literal['bulletList'] = 'bulletList'
    items: Tuple[str, ...]
    title: Optional[str] = None


class NumberedListBlock(ContentBlock):
    type: Literal['numberedList'] = 'numberedList'
    items: Tuple[str, ...]
    title: Optional[str] = None


class StepByStepBlock(ContentBlock):
    type: Literal['stepByStep'] = 'stepByStep'
    steps: Tuple[Step, ...]
    title: Optional[str] = None


class TipBlock(ContentBlock):
    type: Literal['tip'] = 'tip'
    text: str


class NoteBlock(ContentBlock):
    type: Literal['note'] = 'note'
    text: str


class WarningBlock(ContentBlock):
    type: Literal['warning'] = 'warning'
    text: str


class QuestionBlock(ContentBlock):
    type: Literal['question'] = 'question'
    text: str
    hint: Optional[str] = None


class AnswerBlock(ContentBlock):
    type: Literal['answer'] = 'answer'
    text: str
    explanation: Optional[str] = None


class DefinitionBlock(ContentBlock):
    type: Literal['definition'] = 'definition'
    term: str
    definition: str
    example: Optional[str] = None


class VocabularyBlock(ContentBlock):
    type: Literal['vocabulary'] = 'vocabulary'
    terms: Tuple[VocabularyTerm, ...]


class TableBlock(ContentBlock):
    type: Literal['table'] = 'table'
    rows: Tuple[Tuple[str, ...], ...]
    headers: Tuple[str, ...] = ()
    title: Optional[str] = None


class DividerBlock(ContentBlock):
    type: Literal['divider'] = 'divider'
    style: Literal['solid', 'dashed', 'section'] = 'solid'
    label: Optional[str] = None


# The closed set of block kinds, in documentation order
_BLOCK_CLASSES = (
    MetadataBlock, HeaderBlock, ParagraphBlock, ExplanationBlock, ExampleBlock,
    KeyConceptBlock, RuleBlock, FormulaBlock, WordProblemBlock, BulletListBlock,
    NumberedListBlock, StepByStepBlock, TipBlock, NoteBlock, WarningBlock,
    QuestionBlock, AnswerBlock, DefinitionBlock, VocabularyBlock, TableBlock,
    DividerBlock,
)

BLOCK_TYPES: Dict[str, Type[ContentBlock]] = {
    cls.model_fields['type'].default: cls for cls in _BLOCK_CLASSES
}

Block = Annotated[Union[_BLOCK_CLASSES], Field(discriminator='type')]

_block_adapter = TypeAdapter(Block)


@dataclass(frozen=True)
class DocumentInfo:
    total_sections: int = 0
    has_problems: bool = False
    has_formulas: bool = False
    estimated_read_time: Optional[str] = None


@dataclass(frozen=True)
class StructuredContent:
    """Ordered blocks of one document plus optional document-level information."""
    blocks: Tuple[ContentBlock, ...] = ()
    document_info: Optional[DocumentInfo] = None
    
    @classmethod
    def from_blocks(cls, blocks: Iterable[ContentBlock]) -> 'StructuredContent':
        """Build structured content and derive its DocumentInfo from the blocks."""
        blocks = tuple(blocks)
        words = sum(len(text.split()) for block in blocks for text in _block_strings(block))
        info = DocumentInfo(
            total_sections=sum(1 for b in blocks if isinstance(b, HeaderBlock)),
            has_problems=any(isinstance(b, (WordProblemBlock, QuestionBlock)) for b in blocks),
            has_formulas=any(isinstance(b, FormulaBlock) or (isinstance(b, RuleBlock) and b.formula)
                             for b in blocks),
            estimated_read_time=f'{max(1, math.ceil(words / WORDS_PER_MINUTE))} min',
        )
        return cls(blocks, info)


def create_block_id(block_type: str, index: int) -> str:
    """Create a block id such as ``tip-3``."""
    return f'{block_type}-{index}'


def validate_block(block: Any) -> bool:
    """True for a typed block or a mapping whose ``type`` is a known block kind."""
    if isinstance(block, ContentBlock):
        return block.type in BLOCK_TYPES
    if not isinstance(block, Mapping):
        return False
    block_type = block.get('type')
    return isinstance(block_type, str) and block_type in BLOCK_TYPES


def validate_blocks(blocks: Any) -> bool:
    """True when ``blocks`` is a list or tuple and every element is a valid block."""
    if not isinstance(blocks, (list, tuple)):
        return False
    return all(validate_block(block) for block in blocks)


def parse_block(data: Any, index: int = 0) -> ContentBlock:
    """Build a typed block from a JSON-style mapping.
    
    Args:
        data: Mapping with a ``type`` key and camelCase field names, or an
            already typed block (returned unchanged).
        index: Position of the block, used to generate a missing id.
        
    Returns:
        The typed block.
        
    Raises:
        BlockError: If the type is unknown, a required field is missing or
            a field has the wrong type.
    """
    if isinstance(data, ContentBlock):
        return data
    if not validate_block(data):
        raise BlockError(f"Block {index} has no valid type")
    
    # null means absent, as in the JSON the blocks come from
    values = {key: value for key, value in data.items() if value is not None}
    values.setdefault('id', create_block_id(data['type'], index))
    
    try:
        return _block_adapter.validate_python(values)
    except ValidationError as e:
        raise BlockError(f"Block {index} ({data['type']}) is invalid: {e}") from e


def parse_blocks(blocks: Sequence[Any]) -> List[ContentBlock]:
    """Parse every block of a sequence; see ``parse_block``."""
    if not validate_blocks(blocks):
        raise BlockError("Content blocks must be a list of blocks with a known type")
    return [parse_block(block, i) for i, block in enumerate(blocks)]


def _block_strings(block: ContentBlock) -> Iterable[str]:
    """Yield every piece of readable text in a block."""
    yield from _strings(block.model_dump(exclude={'type', 'id'}))


def _strings(value: Any) -> Iterable[str]:
    if isinstance(value, str):
        yield value
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _strings(item)
    elif isinstance(value, dict):
        for item in value.values():
            yield from _strings(item)
