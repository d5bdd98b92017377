"""Command-line interface for the lesson formatter."""

import sys
import argparse
from pathlib import Path

import yaml

from lesson_formatter.utils.logging import setup_logging
from lesson_formatter.utils.config import load_config
from lesson_formatter.formatter import DocumentFormatter
from lesson_formatter.models import AgeGroup
from lesson_formatter.output.writer import OutputManager


def parse_args(argv=None):
    """Parse command-line arguments.
    
    Args:
        argv: Argument list; ``sys.argv[1:]`` if None.
        
    Returns:
        Parsed arguments object.
    """
    parser = argparse.ArgumentParser(description='Format raw lesson text as styled HTML')
    parser.add_argument('input_path', help='Path to the raw lesson text file')
    parser.add_argument('output_path', help='Path for the output HTML file')
    parser.add_argument('-c', '--config', help='Path to custom config file')
    parser.add_argument('-o', '--options',
                        help='YAML or JSON file with ageGroup, chapters, vocabulary, exercises or contentBlocks')
    parser.add_argument('--age-group', choices=[g.value for g in AgeGroup], type=str.upper,
                        help='Target age group (overrides the options file)')
    parser.add_argument('--title', help='Page title for standalone output')
    parser.add_argument('--analysis', help='Also write the text analysis to this YAML file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors')
    
    return parser.parse_args(argv)


def load_options(options_path: Path) -> dict:
    """Load formatting options from a YAML or JSON file.
    
    Raises:
        SystemExit: If the file cannot be read or is not a mapping.
    """
    try:
        with open(options_path, 'r', encoding='utf-8') as f:
            options = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        print(f"Error loading options: {e}", file=sys.stderr)
        sys.exit(1)
    
    if not isinstance(options, dict):
        print(f"Error loading options: {options_path} does not contain a mapping", file=sys.stderr)
        sys.exit(1)
    
    return options


def main(argv=None):
    """Main entry point for the formatter CLI."""
    args = parse_args(argv)
    
    # Configure logging with verbosity
    logger = setup_logging(args.verbose, args.quiet)
    
    # Check if file exists
    input_path = Path(args.input_path)
    if not input_path.is_file():
        logger.error(f"Error: File not found: {input_path}")
        sys.exit(1)
    
    # Load configuration
    if args.config:
        config = load_config(Path(args.config))
    else:
        config = load_config()
    
    options = load_options(Path(args.options)) if args.options else {}
    if args.age_group:
        options['ageGroup'] = args.age_group
    
    with open(input_path, 'r', encoding='utf-8', errors='replace') as f:
        raw_text = f.read()
    
    formatter = DocumentFormatter(config)
    output_manager = OutputManager(config)
    
    markup = formatter.format(raw_text, options)
    output_manager.write_html(Path(args.output_path), markup, args.title)
    
    if args.analysis:
        output_manager.save_analysis(formatter.analyze(raw_text), Path(args.analysis))
    
    sys.exit(0)


if __name__ == '__main__':
    main()
