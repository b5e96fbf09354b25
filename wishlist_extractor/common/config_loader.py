"""
Configuration Loader

Loads the YAML extraction settings (image thresholds, default currency,
heuristic price selectors). The extraction engine itself only receives an
ExtractionSettings value; reading files is left to the caller.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

SETTINGS_FILENAME = 'extraction.yaml'

_CURRENCY_CODE = re.compile(r'^[A-Z]{3}$')


@dataclass(frozen=True)
class ExtractionSettings:
    """Tunable thresholds for the extraction cascades."""
    min_dimension: int = 100
    min_ratio: float = 0.5
    max_ratio: float = 2.0
    default_currency: str = "EUR"
    max_retailer_images: int = 5
    price_selectors: tuple = (
        '.price',
        '.product-price',
        '.Price',
        '#price',
        '[class*="price"]',
        '[class*="Price"]',
        '.amount',
        '.cost',
    )

    def __post_init__(self):
        """Validate values after initialization."""
        if self.min_dimension < 0:
            raise ValueError("min_dimension must not be negative")
        if not 0 < self.min_ratio <= self.max_ratio:
            raise ValueError("min_ratio must be positive and not above max_ratio")
        if not _CURRENCY_CODE.match(self.default_currency or ""):
            raise ValueError(f"default_currency must be a 3-letter code, got {self.default_currency!r}")
        if self.max_retailer_images < 1:
            raise ValueError("max_retailer_images must be at least 1")
        if not self.price_selectors:
            raise ValueError("price_selectors must not be empty")


DEFAULT_SETTINGS = ExtractionSettings()


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try the config shipped with the package first
    module_dir = Path(__file__).parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file from the config directory.

    Args:
        filename: Name of the config file (e.g., 'extraction.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    return _load_yaml(_get_config_dir() / filename)


def _load_yaml(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_extraction_settings(path: Optional[str | Path] = None) -> ExtractionSettings:
    """
    Load extraction settings.

    Args:
        path: Explicit YAML file (if None, loads the packaged extraction.yaml)

    Returns:
        ExtractionSettings with file values over the built-in defaults

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        ValueError: If the file is not valid YAML or holds invalid values

    Example:
        extraction:
          min_dimension: 100
          default_currency: EUR
          price_selectors: ['.price', '.amount']
    """
    source = path or SETTINGS_FILENAME
    try:
        if path is None:
            config = load_config(SETTINGS_FILENAME)
        else:
            config = _load_yaml(Path(path))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {source}: {e}") from e

    section = (config.get('extraction') or {}) if isinstance(config, dict) else None
    if not isinstance(section, dict):
        raise ValueError(f"'extraction' in {source} must be a mapping")
    known = {f.name for f in fields(ExtractionSettings)}
    values = {key: value for key, value in section.items() if key in known}

    try:
        if 'price_selectors' in values:
            values['price_selectors'] = tuple(values['price_selectors'] or ())
        if 'default_currency' in values:
            values['default_currency'] = str(values['default_currency']).upper()
        return ExtractionSettings(**values)
    except TypeError as e:
        raise ValueError(f"Invalid extraction settings in {source}: {e}") from e
