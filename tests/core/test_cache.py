"""Tests for drush-backed cache clearing."""

from unittest.mock import patch

import pytest

from src.core.cache import clear_all_caches


@pytest.mark.unit
def test_success_envelope():
    with patch("src.core.cache.run_drush_command", return_value="") as run:
        result = clear_all_caches()

    assert result == {"status": True, "message": "All caches cleared successfully."}
    run.assert_called_once_with(
        ["cache:rebuild"], timeout=120, return_raw_error=True, parse_json=False
    )


@pytest.mark.unit
def test_drush_error_becomes_error_envelope():
    error = {"_error": True, "_error_type": "drush_failed", "_error_message": "Bootstrap failed"}
    with patch("src.core.cache.run_drush_command", return_value=error):
        result = clear_all_caches()

    assert result == {"status": False, "error": "Cache clearing failed: Bootstrap failed"}


@pytest.mark.unit
def test_error_without_message_uses_type():
    error = {"_error": True, "_error_type": "timeout", "_error_message": ""}
    with patch("src.core.cache.run_drush_command", return_value=error):
        result = clear_all_caches()

    assert result["status"] is False
    assert result["error"] == "Cache clearing failed: timeout"
