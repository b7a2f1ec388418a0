"""Tests for catalog text reports."""

from pathlib import Path

import pytest

from src.core.style_filter import filter_catalog
from src.core.style_report import format_catalog, format_filter_result

CATALOG = {
    "🔲 Layout": {
        "grid": {"description": "Grid helpers", "components": {"grid-2": "Two columns"}},
    },
    "Uncategorized": {
        "misc": {"description": "", "components": {"odd": ""}},
    },
}


@pytest.mark.unit
def test_empty_catalog_names_scanned_path():
    output = format_catalog({}, "groundwork", Path("/site/themes/groundwork/css/bsc"))

    assert "No block style components found for theme 'groundwork'" in output
    assert "/site/themes/groundwork/css/bsc" in output


@pytest.mark.unit
def test_report_lists_categories_files_and_components():
    output = format_catalog(CATALOG, "groundwork", Path("/styles"), "Groundwork")

    assert output.startswith("🎨 BLOCK STYLES: Groundwork")
    assert "2 component(s) in 2 file(s) across 2 categories" in output
    assert "🔲 LAYOUT:" in output
    assert "  📄 grid.css" in output
    assert "     Grid helpers" in output
    assert "     • grid-2 - Two columns" in output
    assert "     • odd" in output
    assert output.index("🔲 LAYOUT:") < output.index("UNCATEGORIZED:")


@pytest.mark.unit
def test_report_falls_back_to_machine_name():
    output = format_catalog(CATALOG, "groundwork", Path("/styles"))
    assert output.startswith("🎨 BLOCK STYLES: groundwork")


@pytest.mark.unit
def test_filter_report_without_matches():
    output = format_filter_result(filter_catalog(CATALOG, "nothing"))
    assert output == "No block style components match 'nothing'"


@pytest.mark.unit
def test_filter_report_groups_matches():
    output = format_filter_result(filter_catalog(CATALOG, "grid"))

    assert output.startswith("🔍 BLOCK STYLES MATCHING 'grid' (1)")
    assert "🔲 Layout:" in output
    assert "  grid: grid-2" in output
    assert "Uncategorized" not in output


@pytest.mark.unit
def test_cleared_filter_report_lists_everything():
    output = format_filter_result(filter_catalog(CATALOG, ""))
    assert output.startswith("🔍 ALL BLOCK STYLES (2)")
