"""Tests for escaping helpers and inline formatting."""

import re
import unittest
from lesson_formatter.formatting.inline import InlineFormatter
from lesson_formatter.formatting.markup import (cuts_entity, entity_spans, escape_html, escape_safe,
                                                split_tags, sub_outside_markup, title_case)


class TestMarkupHelpers(unittest.TestCase):
    """Test cases for the escaping and markup helpers."""
    
    def test_escape_html(self):
        """Test escaping of special characters and quotes."""
        self.assertEqual(escape_html('<b> & "q"'), '&lt;b&gt; &amp; &quot;q&quot;')
    
    def test_escape_safe_does_not_double_escape(self):
        """Test escape_safe leaves existing entities alone."""
        self.assertEqual(escape_safe("&amp; & <b>"), "&amp; &amp; &lt;b&gt;")
        self.assertEqual(escape_safe("&#39; &#x27;"), "&#39; &#x27;")
    
    def test_escape_safe_is_idempotent(self):
        """Test escaping twice equals escaping once."""
        text = "Tom & Jerry <3 &amp; friends"
        once = escape_safe(text)
        self.assertEqual(escape_safe(once), once)
    
    def test_title_case(self):
        """Test title_case method."""
        self.assertEqual(title_case("LEARNING OBJECTIVES"), "Learning Objectives")
    
    def test_split_tags(self):
        """Test splitting markup into tags and text."""
        self.assertEqual(split_tags('<p>Hi <b>there</b></p>'), [
            ('tag', '<p>'), ('text', 'Hi '), ('tag', '<b>'), ('text', 'there'),
            ('tag', '</b>'), ('tag', '</p>'),
        ])
    
    def test_entity_spans(self):
        """Test entity offsets and cut detection."""
        spans = entity_spans("Tom &amp; Jerry")
        self.assertEqual(spans, [(4, 9)])
        self.assertTrue(cuts_entity(5, 8, spans))
        self.assertFalse(cuts_entity(0, 3, spans))
        self.assertFalse(cuts_entity(4, 9, spans))
    
    def test_sub_outside_markup(self):
        """Test that substitutions skip tags and wrapped math."""
        pattern = re.compile(r'x')
        text = '<code class="math">x</code> x <a title="x">x</a>'
        self.assertEqual(sub_outside_markup(pattern, 'Y', text),
                         '<code class="math">x</code> Y <a title="x">Y</a>')


class TestInlineFormatter(unittest.TestCase):
    """Test cases for InlineFormatter class."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.inline = InlineFormatter()
    
    def test_format_inline_escapes(self):
        """Test that raw markup is escaped."""
        self.assertEqual(self.inline.format_inline("<script>"), "&lt;script&gt;")
    
    def test_format_inline_bold(self):
        """Test double and single asterisk bold."""
        self.assertEqual(self.inline.format_inline("**Bold** text"), "<strong>Bold</strong> text")
        self.assertEqual(self.inline.format_inline("a *big* deal"), "a <strong>big</strong> deal")
    
    def test_lone_asterisk_is_not_bold(self):
        """Test that a multiplication asterisk is left alone."""
        self.assertEqual(self.inline.format_inline("a * b and c * d"), "a * b and c * d")
    
    def test_format_inline_key_term(self):
        """Test key-term emphasis."""
        self.assertEqual(self.inline.format_inline("Photosynthesis means making food"),
                         "<strong>Photosynthesis</strong> means making food")
    
    def test_format_inline_math(self):
        """Test that math is formatted after escaping."""
        self.assertEqual(self.inline.format_inline("So 2 + 2 = 4"),
                         'So <code class="math addition">2 + 2 = 4</code>')
    
    def test_format_text_italic(self):
        """Test italic markers on the structured path."""
        self.assertEqual(self.inline.format_text("_very_ important"), "<em>very</em> important")
        self.assertEqual(self.inline.format_text("snake_case_name"), "snake_case_name")
    
    def test_format_text_does_not_apply_key_terms(self):
        """Test that key-term emphasis is heuristic-path only."""
        self.assertEqual(self.inline.format_text("Photosynthesis means making food"),
                         "Photosynthesis means making food")


if __name__ == '__main__':
    unittest.main()
