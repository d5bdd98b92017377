"""Tests for typed content blocks."""

import unittest

from pydantic import ValidationError

from lesson_formatter.blocks.models import (BLOCK_TYPES, BlockError, DividerBlock, DocumentInfo, HeaderBlock,
                                            MetadataBlock, Step, StepByStepBlock, StructuredContent, TipBlock,
                                            VocabularyTerm, create_block_id, parse_block, parse_blocks,
                                            validate_block, validate_blocks)


class TestValidation(unittest.TestCase):
    """Test cases for validate_block and validate_blocks."""
    
    def test_known_types(self):
        """Test mappings and typed blocks with a known type."""
        self.assertTrue(validate_block({'type': 'tip', 'text': 'x'}))
        self.assertTrue(validate_block(TipBlock(text='x')))
        self.assertEqual(len(BLOCK_TYPES), 21)
    
    def test_invalid_blocks(self):
        """Test unknown types, missing types and non-mappings."""
        self.assertFalse(validate_block({'type': 'mystery'}))
        self.assertFalse(validate_block({'text': 'no type'}))
        self.assertFalse(validate_block({'type': 3}))
        self.assertFalse(validate_block('tip'))
        self.assertFalse(validate_block(None))
    
    def test_validate_blocks(self):
        """Test the whole-list check."""
        self.assertTrue(validate_blocks([{'type': 'tip', 'text': 'x'}, {'type': 'divider'}]))
        self.assertTrue(validate_blocks([]))
        self.assertFalse(validate_blocks([{'type': 'tip', 'text': 'x'}, {'text': 'missing type'}]))
        self.assertFalse(validate_blocks({'type': 'tip'}))
        self.assertFalse(validate_blocks(None))


class TestParsing(unittest.TestCase):
    """Test cases for parse_block and parse_blocks."""
    
    def test_parse_camel_case_fields(self):
        """Test camelCase keys map onto dataclass fields."""
        block = parse_block({'type': 'metadata', 'gradeLevel': 5, 'subject': 'Math',
                             'prerequisites': ['Counting']}, 0)
        self.assertEqual(block.grade_level, '5')
        self.assertEqual(block.subject, 'Math')
        self.assertEqual(block.prerequisites, ('Counting',))
    
    def test_generated_id(self):
        """Test that a missing id is generated from type and position."""
        self.assertEqual(parse_block({'type': 'tip', 'text': 'x'}, 3).id, 'tip-3')
        self.assertEqual(parse_block({'type': 'tip', 'text': 'x', 'id': 'mine'}, 3).id, 'mine')
        self.assertEqual(create_block_id('note', 1), 'note-1')
    
    def test_header_level_is_clamped(self):
        """Test header levels outside 1-4 are clamped."""
        self.assertEqual(parse_block({'type': 'header', 'level': 9, 'text': 'T'}).level, 4)
        self.assertEqual(parse_block({'type': 'header', 'level': '0', 'text': 'T'}).level, 1)
    
    def test_nested_fields(self):
        """Test steps, vocabulary terms and table rows."""
        steps = parse_block({'type': 'stepByStep', 'steps': [{'content': 'Add'}, {'content': 'Check', 'label': 'Last'}]})
        self.assertEqual(steps.steps, (Step(content='Add'), Step(content='Check', label='Last')))
        
        vocabulary = parse_block({'type': 'vocabulary', 'terms': [{'term': 'sum', 'definition': 'total'}]})
        self.assertEqual(vocabulary.terms, (VocabularyTerm(term='sum', definition='total'),))
        
        table = parse_block({'type': 'table', 'headers': ['a', 'b'], 'rows': [[1, 2], ['3', '4']]})
        self.assertEqual(table.rows, (('1', '2'), ('3', '4')))
        self.assertEqual(table.headers, ('a', 'b'))
    
    def test_missing_required_field(self):
        """Test that a missing required field raises BlockError."""
        with self.assertRaises(BlockError):
            parse_block({'type': 'wordProblem', 'problem': 'Share 6 apples'})
    
    def test_wrong_field_types(self):
        """Test that wrongly typed fields raise BlockError."""
        with self.assertRaises(BlockError):
            parse_block({'type': 'tip', 'text': ['not', 'a', 'string']})
        with self.assertRaises(BlockError):
            parse_block({'type': 'bulletList', 'items': 'not a list'})
        with self.assertRaises(BlockError):
            parse_block({'type': 'divider', 'style': 'wavy'})
        with self.assertRaises(BlockError):
            parse_block({'type': 'header', 'level': True, 'text': 'T'})
    
    def test_field_names_and_aliases(self):
        """Test that both camelCase aliases and field names are accepted."""
        by_alias = parse_block({'type': 'metadata', 'gradeLevel': '4'}, 0)
        by_name = parse_block({'type': 'metadata', 'grade_level': '4'}, 0)
        self.assertEqual(by_alias, by_name)
        self.assertEqual(MetadataBlock(grade_level='4', id='metadata-0'), by_alias)
    
    def test_type_selects_block_class(self):
        """Test that the type key picks the block class."""
        self.assertIsInstance(parse_block({'type': 'divider'}), DividerBlock)
        self.assertIsInstance(parse_block({'type': 'header', 'level': 1, 'text': 'T'}), HeaderBlock)
        for block_type, cls in BLOCK_TYPES.items():
            self.assertEqual(cls.model_fields['type'].default, block_type)
    
    def test_null_fields_are_absent(self):
        """Test that null values fall back to field defaults."""
        block = parse_block({'type': 'rule', 'title': 'Add', 'steps': None, 'id': None}, 2)
        self.assertEqual(block.steps, ())
        self.assertEqual(block.id, 'rule-2')
    
    def test_error_names_the_field(self):
        """Test that a validation error message names the bad field."""
        with self.assertRaises(BlockError) as context:
            parse_block({'type': 'explanation', 'text': 'x', 'emphasis': 'loud'}, 4)
        self.assertIn('emphasis', str(context.exception))
        self.assertIn('Block 4', str(context.exception))
        self.assertIsInstance(context.exception.__cause__, ValidationError)
    
    def test_block_error_is_value_error(self):
        """Test BlockError can be caught as ValueError."""
        with self.assertRaises(ValueError):
            parse_block({'type': 'mystery'})
    
    def test_parse_blocks(self):
        """Test parsing a list keeps order and passes typed blocks through."""
        tip = TipBlock(text='typed', id='t')
        parsed = parse_blocks([{'type': 'header', 'level': 2, 'text': 'Intro'}, tip])
        self.assertEqual(parsed, [HeaderBlock(level=2, text='Intro', id='header-0'), tip])
        with self.assertRaises(BlockError):
            parse_blocks([{'type': 'mystery'}])
    
    def test_blocks_are_frozen(self):
        """Test blocks are immutable."""
        block = TipBlock(text='x')
        with self.assertRaises(ValidationError):
            block.text = 'y'


class TestStructuredContent(unittest.TestCase):
    """Test cases for StructuredContent.from_blocks."""
    
    def test_document_info(self):
        """Test the derived document information."""
        blocks = parse_blocks([
            {'type': 'header', 'level': 1, 'text': 'Fractions'},
            {'type': 'header', 'level': 2, 'text': 'Adding'},
            {'type': 'question', 'text': 'What is 1/2 + 1/2?'},
            {'type': 'rule', 'title': 'Add', 'formula': 'a/c + b/c = (a+b)/c'},
        ])
        content = StructuredContent.from_blocks(blocks)
        self.assertEqual(content.blocks, tuple(blocks))
        self.assertEqual(content.document_info, DocumentInfo(
            total_sections=2, has_problems=True, has_formulas=True, estimated_read_time='1 min'))
    
    def test_read_time_rounds_up(self):
        """Test reading time at 200 words per minute."""
        content = StructuredContent.from_blocks([
            parse_block({'type': 'paragraph', 'text': 'word ' * 201}),
            StepByStepBlock(steps=(Step(content='one two'),)),
        ])
        self.assertEqual(content.document_info.estimated_read_time, '2 min')
        self.assertFalse(content.document_info.has_problems)
        self.assertFalse(content.document_info.has_formulas)


if __name__ == '__main__':
    unittest.main()
