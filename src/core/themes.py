"""Theme path resolution for block style discovery."""

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml

from src.core.config import DEFAULT_STYLES_DIR, get_config, get_drupal_root
from src.core.drush import get_drush_command, run_drush_command

logger = logging.getLogger(__name__)


def find_theme_path(drupal_root: Path, theme_name: str) -> Optional[Path]:
    """
    Locate a theme directory in a Drupal codebase.

    Tries drush theme:list first, then the conventional theme locations.

    Args:
        drupal_root: Drupal project root
        theme_name: Machine name of theme (e.g., "groundwork")

    Returns:
        Absolute theme directory, or None if the theme cannot be found
    """
    theme_path = _find_theme_path_drush(drupal_root, theme_name)
    if theme_path:
        return theme_path

    possible_paths = [
        drupal_root / "themes" / "custom" / theme_name,
        drupal_root / "themes" / "contrib" / theme_name,
        drupal_root / "web" / "themes" / "custom" / theme_name,
        drupal_root / "web" / "themes" / "contrib" / theme_name,
        drupal_root / "core" / "themes" / theme_name,
    ]

    for path in possible_paths:
        if (path / f"{theme_name}.info.yml").exists():
            return path

    logger.info(f"Theme '{theme_name}' not found under {drupal_root}")
    return None


def _find_theme_path_drush(drupal_root: Path, theme_name: str) -> Optional[Path]:
    if not get_drush_command():
        return None

    themes = run_drush_command(["theme:list", "--format=json", "--fields=name,path"])
    if not isinstance(themes, dict) or theme_name not in themes:
        return None

    relative = themes[theme_name].get("path")
    if not relative:
        return None

    theme_path = Path(relative)
    if not theme_path.is_absolute():
        theme_path = drupal_root / relative
        if not theme_path.exists():
            theme_path = drupal_root / "web" / relative

    return theme_path if theme_path.is_dir() else None


def get_block_styles_path(theme_path: Path, styles_dir: str = DEFAULT_STYLES_DIR) -> Path:
    """Directory holding a theme's block style component stylesheets."""
    return Path(theme_path) / styles_dir


def read_theme_info(theme_path: Path, theme_name: str) -> Dict:
    """Parse the theme's .info.yml; empty dict if missing or invalid."""
    info_file = Path(theme_path) / f"{theme_name}.info.yml"
    if not info_file.exists():
        return {}

    try:
        with open(info_file, "r") as f:
            info = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.debug(f"Error parsing theme info file: {e}")
        return {}

    return info if isinstance(info, dict) else {}


def resolve_block_styles_path(theme_name: Optional[str] = None) -> Tuple[str, Path, Path]:
    """
    Resolve the configured (or given) theme to its block style directory.

    Returns:
        Tuple of (theme_name, theme_path, styles_path)

    Raises:
        ValueError: If the Drupal root or the theme cannot be found
    """
    config = get_config()
    theme_name = theme_name or config["theme"]
    drupal_root = get_drupal_root()

    theme_path = find_theme_path(drupal_root, theme_name)
    if not theme_path:
        raise ValueError(
            f"Theme '{theme_name}' not found\n\n"
            "Check:\n- Theme name spelling\n- Theme is in themes/custom or themes/contrib"
        )

    return theme_name, theme_path, get_block_styles_path(theme_path, config["styles_dir"])
