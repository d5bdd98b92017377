"""Typed content blocks and their validation."""

from lesson_formatter.blocks.models import (BLOCK_TYPES, BlockError, ContentBlock, DocumentInfo, Step,
                                            StructuredContent, VocabularyTerm, create_block_id, parse_block,
                                            parse_blocks, validate_block, validate_blocks)

__all__ = ['BLOCK_TYPES', 'BlockError', 'ContentBlock', 'DocumentInfo', 'Step', 'StructuredContent',
           'VocabularyTerm', 'create_block_id', 'parse_block', 'parse_blocks', 'validate_block',
           'validate_blocks']
