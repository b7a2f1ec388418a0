"""
Block style tools for Groundwork Helpers MCP.

Provides block style component discovery, search and cache clearing.
"""

import json
import logging
from typing import Optional

# Import from core modules
from src.core.cache import clear_all_caches
from src.core.config import get_category_order
from src.core.style_discovery import StyleDiscoverer
from src.core.style_filter import filter_catalog
from src.core.style_report import format_catalog, format_filter_result
from src.core.themes import read_theme_info, resolve_block_styles_path

# Import MCP instance from server
from server import mcp

# Get logger
logger = logging.getLogger(__name__)


@mcp.tool()
def get_block_styles(theme_name: Optional[str] = None, output_format: str = "text") -> str:
    """
    List the block style components a theme offers, grouped by category.

    Scans <theme>/css/block-style-components/*.css for docblocks flagged
    with @blockStyleComponent true. Categories come from each file's
    leading docblock (@category, @order, @description).

    Perfect for:
    - Finding which utility classes can be applied to a block
    - Checking a new stylesheet is picked up
    - Reviewing category and ordering of the style picker

    Args:
        theme_name: Machine name of theme (defaults to "theme" in config, "groundwork")
        output_format: "text" (default) for a readable report, "json" for the raw catalog

    Returns:
        Categorized block style components

    Examples:
        get_block_styles()
        get_block_styles("my_subtheme", output_format="json")
    """
    try:
        theme_name, theme_path, styles_path = resolve_block_styles_path(theme_name)

        logger.info(f"Discovering block styles in: {styles_path}")
        catalog = StyleDiscoverer(get_category_order()).discover(styles_path)

        if output_format == "json":
            return json.dumps(catalog, indent=2, ensure_ascii=False)

        theme_info = read_theme_info(theme_path, theme_name)
        return format_catalog(catalog, theme_name, styles_path, theme_info.get("name"))

    except ValueError as e:
        return f"❌ ERROR: {str(e)}"
    except Exception as e:
        logger.exception("Error getting block styles")
        return f"❌ ERROR: Failed to get block styles: {str(e)}"


@mcp.tool()
def search_block_styles(query: str, theme_name: Optional[str] = None) -> str:
    """
    Search block style components by name.

    Case-insensitive substring match on component names, the same matching
    the style picker's filter box uses.

    Args:
        query: Text to look for (e.g., "margin", "bg-", "shadow")
        theme_name: Machine name of theme (defaults to config)

    Returns:
        Matching components grouped by category and file

    Examples:
        search_block_styles("shadow")
        search_block_styles("mt-", "my_subtheme")
    """
    try:
        _, _, styles_path = resolve_block_styles_path(theme_name)

        catalog = StyleDiscoverer(get_category_order()).discover(styles_path)
        return format_filter_result(filter_catalog(catalog, query))

    except ValueError as e:
        return f"❌ ERROR: {str(e)}"
    except Exception as e:
        logger.exception("Error searching block styles")
        return f"❌ ERROR: Failed to search block styles: {str(e)}"


@mcp.tool()
def clear_drupal_cache() -> str:
    """
    Clear all Drupal caches (drush cache:rebuild).

    Use after adding or editing block style stylesheets so the site picks
    them up.

    Returns:
        JSON envelope: {"status": true, "message": ...} or {"status": false, "error": ...}
    """
    try:
        result = clear_all_caches()
    except ValueError as e:
        result = {"status": False, "error": f"Cache clearing failed: {str(e)}"}
    except Exception as e:
        logger.exception("Error clearing caches")
        result = {"status": False, "error": f"Cache clearing failed: {str(e)}"}

    return json.dumps(result)
