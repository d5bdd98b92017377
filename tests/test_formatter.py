"""Tests for the DocumentFormatter orchestrator."""

import time
import unittest
from unittest import mock

from pydantic import ValidationError

from lesson_formatter.analysis.analyzer import TextAnalysis
from lesson_formatter.formatter import DocumentFormatter, format_document
from lesson_formatter.models import AgeGroup, DocumentFormatterOptions, VocabularyItem

FLAT_LESSON = ("Learning Objectives: Students will add fractions. "
               "Example: Add 1/2 and 1/4 to get 3/4. "
               "Tip: Find a common denominator first.")

LESSON_WITH_SUM = ("Learning Objectives: Students will add fractions. "
                   "Example: 1/2 + 1/4 = 3/4. "
                   "Tip: Find a common denominator first.")

TIP_BLOCKS = [{'type': 'tip', 'text': 'Draw a picture.'}]


class TestDocumentFormatter(unittest.TestCase):
    """Test cases for DocumentFormatter class."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.config = {
            'formatting': {'default_age_group': 'OLDER'},
            'restoration': {
                'newline_ratio': 0.002,
                'min_length': 100,
                'min_confidence': 0.7,
                'bucket_width': 10,
            },
            'chunking': {'max_sentences': 4},
            'renderer': {'include_icons': True, 'color_scheme': None},
            'output': {'standalone': True, 'title': 'Lesson'},
        }
        self.formatter = DocumentFormatter(self.config)
    
    def test_always_returns_a_string(self):
        """Test that format never raises for odd inputs."""
        for raw_text in ('', '   ', 'x', None, 42, b'bytes <b>', '\n\n\n', 'Count 1/2 apples. ' * 10000):
            self.assertIsInstance(self.formatter.format(raw_text), str)
    
    def test_empty_text(self):
        """Test empty text without content blocks gives an empty string."""
        self.assertEqual(self.formatter.format(''), '')
        self.assertEqual(self.formatter.format(None), '')
    
    def test_single_character(self):
        """Test the smallest non-empty input."""
        self.assertEqual(self.formatter.format('x'), '<div class="formatted-content age-older">\n<p>x</p>\n</div>')
    
    def test_line_endings_are_normalised(self):
        """Test CRLF input is read as ordinary lines."""
        self.assertIn('<p>Line one Line two</p>', self.formatter.format('Line one\r\nLine two'))
    
    def test_end_to_end_ordering(self):
        """Test a flat lesson comes out as header, paragraph, example and tip in order."""
        html = self.formatter.format(FLAT_LESSON)
        positions = [
            html.index('<h2 class="lesson-header">Learning Objectives</h2>'),
            html.index('<p>Students will add fractions.</p>'),
            html.index('<div class="example-block">'),
            html.index('<div class="tip-block">'),
        ]
        self.assertEqual(positions, sorted(positions))
        self.assertTrue(html.startswith('<div class="formatted-content age-older">'))
        self.assertIn('<span class="fraction">1/2</span>', html)
    
    def test_end_to_end_ordering_with_sum(self):
        """Test a flat lesson whose example is a fraction sum keeps header, example and tip order."""
        html = self.formatter.format(LESSON_WITH_SUM)
        positions = [
            html.index('<h2 class="lesson-header">Learning Objectives</h2>'),
            html.index('<div class="example-block">'),
            html.index('<div class="tip-block">'),
        ]
        self.assertEqual(positions, sorted(positions))
        self.assertEqual(html.count('<div class="example-block">'), 1)
        self.assertIn('1/2', html[positions[1]:positions[2]])
    
    def test_long_digit_run_returns_quickly(self):
        """Test that a 20,000 digit input is formatted in linear time."""
        start = time.perf_counter()
        html = self.formatter.format("1" * 20000)
        self.assertLess(time.perf_counter() - start, 10.0)
        self.assertIn("1" * 20000, html)
    
    def test_enrichment(self):
        """Test chapters, vocabulary and exercises are applied on the heuristic path."""
        text = "Adding Fractions\nA fraction is part of a whole and every fraction has a numerator."
        html = self.formatter.format(text, {
            'ageGroup': 'YOUNG',
            'chapters': [{'title': 'Adding Fractions'}],
            'vocabulary': [{'term': 'numerator', 'definition': 'Top number'}],
            'exercises': [{'id': 'e1', 'type': 'short-answer', 'questionText': 'part of a whole'}],
        })
        self.assertTrue(html.startswith('<div class="formatted-content age-young">'))
        self.assertIn('<h3 class="lesson-header" id="chapter-1" data-chapter="1">Adding Fractions</h3>', html)
        self.assertIn('<span class="vocabulary-term" data-definition="Top number" title="Top number">'
                      'numerator</span>', html)
        self.assertIn('<span class="interactive-exercise" data-exercise-id="e1" data-type="short-answer">'
                      'part of a whole</span>', html)
    
    def test_structured_path_takes_precedence(self):
        """Test valid content blocks win over raw text."""
        html = self.formatter.format('Some raw lesson text.', {'contentBlocks': TIP_BLOCKS})
        self.assertTrue(html.startswith('<div class="structured-content age-older color-subtle">'))
        self.assertIn('Draw a picture.', html)
        self.assertNotIn('Some raw lesson text.', html)
    
    def test_structured_path_uses_age_group(self):
        """Test the structured wrapper follows the requested age group."""
        options = DocumentFormatterOptions(age_group=AgeGroup.YOUNG, content_blocks=TIP_BLOCKS)
        html = self.formatter.format('', options)
        self.assertTrue(html.startswith('<div class="structured-content age-young color-vibrant">'))
    
    def test_content_blocks_without_text(self):
        """Test content blocks are rendered even when the text is empty."""
        self.assertIn('tip-block', self.formatter.format(None, {'contentBlocks': TIP_BLOCKS}))
    
    def test_invalid_blocks_fall_back(self):
        """Test a block without a type sends formatting down the heuristic path."""
        blocks = TIP_BLOCKS + [{'text': 'missing type'}]
        with self.assertLogs('lesson_formatter', level='WARNING') as logs:
            html = self.formatter.format('Plain lesson text.', {'contentBlocks': blocks})
        self.assertTrue(html.startswith('<div class="formatted-content age-older">'))
        self.assertIn('<p>Plain lesson text.</p>', html)
        self.assertIn('validation failed', logs.output[0])
    
    def test_unparseable_blocks_fall_back(self):
        """Test a block missing a required field falls back to the heuristic path."""
        blocks = [{'type': 'wordProblem', 'problem': 'Share 6 apples'}]
        with self.assertLogs('lesson_formatter', level='WARNING'):
            html = self.formatter.format('Plain lesson text.', {'contentBlocks': blocks})
        self.assertIn('<p>Plain lesson text.</p>', html)
    
    def test_empty_blocks_use_heuristic_path(self):
        """Test an empty block list is ignored."""
        html = self.formatter.format('Plain lesson text.', {'contentBlocks': []})
        self.assertTrue(html.startswith('<div class="formatted-content'))
    
    def test_full_format_failure_uses_basic_format(self):
        """Test the basic tier runs when full formatting raises."""
        with mock.patch.object(self.formatter, 'full_format', side_effect=RuntimeError('boom')):
            with self.assertLogs('lesson_formatter', level='WARNING') as logs:
                html = self.formatter.format('Plain lesson text.')
        self.assertEqual(html, '<p>Plain lesson text.</p>')
        self.assertIn('boom', logs.output[0])
    
    def test_minimal_safe_tier(self):
        """Test the last tier escapes once and never double-escapes."""
        with mock.patch.object(self.formatter, 'full_format', side_effect=RuntimeError('boom')), \
                mock.patch.object(self.formatter, 'basic_format', side_effect=RuntimeError('again')):
            with self.assertLogs('lesson_formatter', level='WARNING') as logs:
                html = self.formatter.format('Tom &amp; Jerry <3\n\nNext\nline')
        self.assertEqual(html, '<div class="formatted-content"><p>Tom &amp; Jerry &lt;3</p><p>Next<br>line</p></div>')
        self.assertTrue(any('ERROR' in line for line in logs.output))
    
    def test_minimal_safe_format_is_idempotent(self):
        """Test escaping already escaped text leaves entities alone."""
        once = self.formatter.minimal_safe_format('A & B')
        self.assertEqual(once, '<div class="formatted-content"><p>A &amp; B</p></div>')
        self.assertEqual(self.formatter.minimal_safe_format('A &amp; B'), once)
    
    def test_invalid_options_use_defaults(self):
        """Test malformed options are logged and replaced with defaults."""
        with self.assertLogs('lesson_formatter', level='WARNING'):
            html = self.formatter.format('hello', {'ageGroup': 'TEEN'})
        self.assertTrue(html.startswith('<div class="formatted-content age-older">'))
        with self.assertLogs('lesson_formatter', level='WARNING'):
            self.assertIsInstance(self.formatter.format('hello', 42), str)
    
    def test_default_age_group_from_config(self):
        """Test the configured default age group."""
        self.config['formatting']['default_age_group'] = 'YOUNG'
        formatter = DocumentFormatter(self.config)
        self.assertTrue(formatter.format('hello').startswith('<div class="formatted-content age-young">'))
        self.assertTrue(formatter.format('hello', {'vocabulary': []}).startswith(
            '<div class="formatted-content age-young">'))
    
    def test_typed_options(self):
        """Test DocumentFormatterOptions can be passed directly."""
        options = DocumentFormatterOptions(vocabulary=(VocabularyItem(term='hello', definition='a greeting'),))
        self.assertIn('class="vocabulary-term"', self.formatter.format('hello there', options))
    
    def test_analyze(self):
        """Test analyze method."""
        analysis = self.formatter.analyze(FLAT_LESSON)
        self.assertIsInstance(analysis, TextAnalysis)
        self.assertTrue(analysis.needs_restoration)
        self.assertEqual(self.formatter.analyze(None), TextAnalysis())
    
    def test_format_document(self):
        """Test the module-level convenience function."""
        self.assertEqual(format_document(''), '')
        self.assertIn('<p>hello</p>', format_document('hello'))


class TestDocumentFormatterOptions(unittest.TestCase):
    """Test cases for DocumentFormatterOptions."""
    
    def test_camel_case_mapping(self):
        """Test camelCase option mappings."""
        options = DocumentFormatterOptions.model_validate({
            'ageGroup': 'young',
            'chapters': [{'title': 'One', 'keyPoints': ['a']}],
            'exercises': [{'id': 1, 'type': 'quiz', 'questionText': 'Why?', 'acceptableAnswers': ['x']}],
        })
        self.assertEqual(options.age_group, AgeGroup.YOUNG)
        self.assertEqual(options.chapters[0].key_points, ('a',))
        self.assertEqual(options.exercises[0].id, '1')
        self.assertEqual(options.exercises[0].acceptable_answers, ('x',))
    
    def test_snake_case_and_null_entries(self):
        """Test field names are accepted and null lists mean no entries."""
        options = DocumentFormatterOptions.coerce({
            'age_group': 'OLDER',
            'chapters': None,
            'exercises': [{'id': 'e1', 'type': 'quiz', 'question_text': 'Why?',
                           'acceptable_answers': None}],
        })
        self.assertEqual(options.chapters, ())
        self.assertEqual(options.exercises[0].question_text, 'Why?')
        self.assertEqual(options.exercises[0].acceptable_answers, ())
    
    def test_malformed_entries(self):
        """Test entries without required fields are rejected."""
        with self.assertRaises(ValidationError):
            DocumentFormatterOptions.coerce({'exercises': [{'id': 'e1', 'type': 'quiz'}]})
        with self.assertRaises(ValidationError):
            DocumentFormatterOptions.coerce({'vocabulary': [{'term': 'sum'}]})
        with self.assertRaises(ValidationError):
            DocumentFormatterOptions.coerce({'ageGroup': 'TEEN'})
    
    def test_options_are_frozen(self):
        """Test options cannot be changed after construction."""
        options = DocumentFormatterOptions()
        with self.assertRaises(ValidationError):
            options.age_group = AgeGroup.YOUNG
    
    def test_coerce(self):
        """Test option coercion."""
        self.assertEqual(DocumentFormatterOptions.coerce(None), DocumentFormatterOptions())
        with self.assertRaises(TypeError):
            DocumentFormatterOptions.coerce('YOUNG')
        with self.assertRaises(ValueError):
            AgeGroup.coerce('TEEN')


if __name__ == '__main__':
    unittest.main()
