"""Tests for configuration and logging utilities."""

import logging
import unittest
import tempfile
import shutil
from pathlib import Path

from lesson_formatter.utils.config import load_config, merge_config
from lesson_formatter.utils.logging import setup_logging


class TestConfig(unittest.TestCase):
    """Test cases for configuration loading."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_dir = Path(self.temp_dir)
    
    def tearDown(self):
        """Tear down test fixtures."""
        shutil.rmtree(self.temp_dir)
    
    def test_default_config(self):
        """Test the packaged defaults."""
        config = load_config()
        self.assertEqual(config['formatting']['default_age_group'], 'OLDER')
        self.assertEqual(config['restoration']['bucket_width'], 10)
        self.assertEqual(config['chunking']['max_sentences'], 4)
        self.assertTrue(config['output']['standalone'])
    
    def test_custom_config_overlays_defaults(self):
        """Test a partial custom file only changes the settings it names."""
        config_path = self.test_dir / "config.yaml"
        with open(config_path, 'w', encoding='utf-8') as f:
            f.write("chunking:\n  max_sentences: 2\noutput:\n  title: Fractions\n")
        
        config = load_config(config_path)
        
        self.assertEqual(config['chunking']['max_sentences'], 2)
        self.assertEqual(config['output']['title'], 'Fractions')
        self.assertTrue(config['output']['standalone'])
        self.assertEqual(config['restoration']['min_length'], 100)
    
    def test_missing_config_exits(self):
        """Test an unreadable config file exits."""
        with self.assertRaises(SystemExit):
            load_config(self.test_dir / "missing.yaml")
    
    def test_merge_config(self):
        """Test recursive merging leaves its inputs alone."""
        base = {'a': {'x': 1, 'y': 2}, 'b': 1}
        override = {'a': {'y': 3}, 'c': 4}
        self.assertEqual(merge_config(base, override), {'a': {'x': 1, 'y': 3}, 'b': 1, 'c': 4})
        self.assertEqual(base, {'a': {'x': 1, 'y': 2}, 'b': 1})


class TestLogging(unittest.TestCase):
    """Test cases for setup_logging."""
    
    def tearDown(self):
        """Restore the default level."""
        setup_logging()
    
    def test_levels(self):
        """Test verbose and quiet levels."""
        self.assertEqual(setup_logging().level, logging.INFO)
        self.assertEqual(setup_logging(verbose=True).level, logging.DEBUG)
        self.assertEqual(setup_logging(quiet=True).level, logging.WARNING)
        self.assertEqual(setup_logging(verbose=True, quiet=True).level, logging.DEBUG)
        self.assertEqual(setup_logging().name, 'lesson_formatter')


if __name__ == '__main__':
    unittest.main()
