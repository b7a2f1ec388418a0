"""
Text filtering over a block style catalog.

Behaves like the style picker's search box: options whose label contains the
query stay visible, every section is collapsed, and only the sections on the
path to a match are opened again. Clearing the query shows every option with
all sections collapsed.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from src.core.models import Catalog


@dataclass
class FilterResult:
    """Visible components and expanded sections for one query."""

    query: str
    visible: Catalog = field(default_factory=dict)
    expanded_categories: List[str] = field(default_factory=list)
    expanded_files: List[Tuple[str, str]] = field(default_factory=list)  # (category, filename)
    match_count: int = 0

    @property
    def is_cleared(self) -> bool:
        return not self.query.strip()


def filter_catalog(catalog: Catalog, query: str) -> FilterResult:
    """
    Filter a catalog by a case-insensitive substring of component names.

    Args:
        catalog: Catalog produced by StyleDiscoverer.discover()
        query: Search text; blank shows everything

    Returns:
        FilterResult preserving the catalog's category and file order
    """
    result = FilterResult(query=query)
    search_term = query.strip().lower()

    for category, files in catalog.items():
        for filename, entry in files.items():
            if search_term:
                components = {
                    name: description
                    for name, description in entry["components"].items()
                    if search_term in name.lower()
                }
            else:
                components = dict(entry["components"])

            if not components:
                continue

            result.visible.setdefault(category, {})[filename] = {
                "description": entry["description"],
                "components": components,
            }
            result.match_count += len(components)

            if search_term:
                if category not in result.expanded_categories:
                    result.expanded_categories.append(category)
                result.expanded_files.append((category, filename))

    return result
