"""Configuration handling for the lesson formatter."""

import sys
import yaml
from pathlib import Path
from typing import Dict, Any


DEFAULT_CONFIG_PATH = Path(__file__).parents[1] / 'config.yaml'


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a mapping")
    return data


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` with ``override`` laid over it, section by section.
    
    Nested mappings are merged recursively; any other value in
    ``override`` replaces the one in ``base``. Neither argument is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Path = None) -> Dict[str, Any]:
    """Load configuration from YAML file.
    
    The packaged defaults are always read first. A custom file only needs
    the settings it changes, e.g. ``chunking: {max_sentences: 3}``.
    
    Args:
        config_path: Path to a custom config YAML file. If None, only the
            defaults shipped with the package are used.
            
    Returns:
        Dictionary containing configuration settings.
        
    Raises:
        SystemExit: If a configuration file cannot be loaded.
    """
    try:
        config = _read_yaml(DEFAULT_CONFIG_PATH)
        if config_path is not None:
            config = merge_config(config, _read_yaml(Path(config_path)))
        return config
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)
