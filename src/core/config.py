"""Configuration and state management for Groundwork Helpers."""

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_THEME = "groundwork"
DEFAULT_STYLES_DIR = "css/block-style-components"

CONFIG_PATH = Path.home() / ".config" / "groundwork-helpers" / "config.json"

# Module-level state
_config: dict = {}


def get_config() -> dict:
    """Get config, loading if needed."""
    global _config
    if not _config:
        _config = load_config()
    return _config


def reset_config():
    """Forget the cached config so the next call reloads it from disk."""
    global _config
    _config = {}


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from config.json and fill in defaults."""
    candidates = [config_path] if config_path else [CONFIG_PATH, Path("config.json")]

    for path in candidates:
        if path.exists():
            logger.debug(f"Loading config from: {path}")
            with open(path, "r") as f:
                return _apply_defaults(json.load(f))

    # No default - user must configure
    raise ValueError(
        "Configuration not found. Please create config.json with:\n"
        "{\n"
        '  "drupal_root": "/path/to/your/drupal",\n'
        '  "theme": "groundwork"\n'
        "}"
    )


def _apply_defaults(config: dict) -> dict:
    config.setdefault("theme", DEFAULT_THEME)
    config.setdefault("styles_dir", DEFAULT_STYLES_DIR)
    return config


def get_drupal_root() -> Path:
    """
    Get the configured Drupal root.

    Raises:
        ValueError: If drupal_root is missing or does not exist
    """
    config = get_config()
    drupal_root = Path(config.get("drupal_root", ""))

    if not config.get("drupal_root") or not drupal_root.exists():
        raise ValueError(
            f"Drupal root not found: {drupal_root}\n"
            f"Please configure drupal_root in config.json"
        )

    return drupal_root


def get_category_order() -> Optional[tuple]:
    """
    Get the category priority table from config, if overridden.

    Returns:
        Tuple of (label, rank) pairs, or None to use the built-in table
    """
    order = get_config().get("category_order")
    if not order:
        return None
    return tuple((label, int(rank)) for label, rank in order.items())
