"""Text reports for block style catalogs."""

from pathlib import Path
from typing import Optional

from src.core.models import Catalog
from src.core.style_filter import FilterResult


def format_catalog(
    catalog: Catalog, theme_name: str, styles_path: Path, theme_label: Optional[str] = None
) -> str:
    """
    Render a catalog as a readable report.

    Args:
        catalog: Catalog produced by StyleDiscoverer.discover()
        theme_name: Machine name of the scanned theme
        styles_path: Directory that was scanned
        theme_label: Human-readable theme name from .info.yml, if known
    """
    if not catalog:
        return (
            f"No block style components found for theme '{theme_name}'\n\n"
            f"Scanned: {styles_path}\n\n"
            "Stylesheets declare components with a docblock like:\n"
            "  /**\n"
            "   * @blockStyleComponent true\n"
            "   * @name .my-class\n"
            "   * @description What the class does\n"
            "   */"
        )

    file_count = sum(len(files) for files in catalog.values())
    component_count = sum(
        len(entry["components"]) for files in catalog.values() for entry in files.values()
    )

    output = []
    output.append(f"🎨 BLOCK STYLES: {theme_label or theme_name}")
    output.append(f"   Path: {styles_path}")
    output.append("=" * 80)
    output.append("")
    output.append(
        f"{component_count} component(s) in {file_count} file(s) across {len(catalog)} categor"
        + ("y" if len(catalog) == 1 else "ies")
    )
    output.append("")

    for category, files in catalog.items():
        output.append(f"{category.upper()}:")
        for filename, entry in files.items():
            output.append(f"  📄 {filename}.css")
            if entry["description"]:
                output.append(f"     {entry['description']}")
            for name, description in entry["components"].items():
                if description:
                    output.append(f"     • {name} - {description}")
                else:
                    output.append(f"     • {name}")
        output.append("")

    output.append("💡 Tip: Use search_block_styles('margin') to filter components by name")

    return "\n".join(output)


def format_filter_result(result: FilterResult) -> str:
    """Render matches from filter_catalog() grouped by category and file."""
    if not result.visible:
        return f"No block style components match '{result.query}'"

    output = []
    if result.is_cleared:
        output.append(f"🔍 ALL BLOCK STYLES ({result.match_count})")
    else:
        output.append(f"🔍 BLOCK STYLES MATCHING '{result.query}' ({result.match_count})")
    output.append("=" * 80)
    output.append("")

    for category, files in result.visible.items():
        output.append(f"{category}:")
        for filename, entry in files.items():
            names = ", ".join(entry["components"])
            output.append(f"  {filename}: {names}")
        output.append("")

    return "\n".join(output).rstrip()
