"""Output file management for the lesson formatter."""

import yaml
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional

from lesson_formatter.analysis.analyzer import TextAnalysis
from lesson_formatter.formatting.markup import escape_html
from lesson_formatter.output.styles import stylesheet
from lesson_formatter.utils.logging import logger

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
{styles}
</style>
</head>
<body>
{body}
</body>
</html>
"""


class OutputManager:
    """Writes formatted lessons to disk."""
    
    def __init__(self, config: Dict[str, Any]):
        """Initialize with configuration settings.
        
        Args:
            config: Configuration dictionary.
        """
        self.config = config
        self.standalone = config['output']['standalone']
        self.title = config['output']['title']
    
    def build_document(self, markup: str, title: Optional[str] = None) -> str:
        """Wrap a markup fragment in a standalone HTML page.
        
        Args:
            markup: Formatted lesson markup.
            title: Page title; defaults to the configured title.
            
        Returns:
            Complete HTML document with the bundled stylesheet inlined.
        """
        return PAGE_TEMPLATE.format(
            title=escape_html(title or self.title),
            styles=stylesheet(),
            body=markup,
        )
    
    def write_html(self, output_path: Path, markup: str, title: Optional[str] = None) -> Path:
        """Write formatted markup to a file.
        
        Writes a full page when ``output.standalone`` is set, otherwise the
        bare fragment.
        
        Args:
            output_path: Path of the HTML file.
            markup: Formatted lesson markup.
            title: Page title for standalone output.
            
        Returns:
            The path written.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        
        content = self.build_document(markup, title) if self.standalone else markup
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(content)
        
        logger.info(f"Written: {output_path}")
        return output_path
    
    def save_analysis(self, analysis: TextAnalysis, output_path: Path) -> None:
        """Save the structural analysis of the input text to a YAML file.
        
        Args:
            analysis: Analysis of the raw input text.
            output_path: Path of the YAML file.
        """
        with open(output_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(asdict(analysis), f, sort_keys=False)
        logger.info(f"Text analysis saved to {output_path}")
