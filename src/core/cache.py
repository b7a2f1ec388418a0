"""Drupal cache flushing via drush."""

import logging

from src.core.drush import run_drush_command

logger = logging.getLogger(__name__)


def clear_all_caches(timeout: int = 120) -> dict:
    """
    Rebuild all Drupal caches with drush cache:rebuild.

    Returns:
        {"status": True, "message": ...} on success,
        {"status": False, "error": ...} on failure
    """
    result = run_drush_command(
        ["cache:rebuild"], timeout=timeout, return_raw_error=True, parse_json=False
    )

    if isinstance(result, dict) and result.get("_error"):
        message = result.get("_error_message") or result.get("_error_type", "unknown error")
        logger.error(f"Cache clearing failed: {message}")
        return {"status": False, "error": f"Cache clearing failed: {message}"}

    logger.info("All caches cleared")
    return {"status": True, "message": "All caches cleared successfully."}
