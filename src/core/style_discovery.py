"""
Block style component discovery.

Scans a theme's stylesheet directory for documented "block style components"
(BSCs) and groups them into a categorized, ordered catalog.

A stylesheet opts in through docblock comments. The first docblock of the file
carries file-level metadata:

    /**
     * @category 📐 Spacing
     * @order 2
     * @description Margin and padding helpers.
     */

and every docblock flagged with ``@blockStyleComponent true`` declares one
component:

    /**
     * @blockStyleComponent true
     * @name .mt-large
     * @description Large top margin.
     */

Docblocks are matched as opaque ``/** ... */`` tokens: there is no nesting and
the first ``*/`` closes the block, even inside a string literal.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from src.core.models import Catalog, StyleFile

logger = logging.getLogger(__name__)

STYLESHEET_EXTENSION = ".css"

# Display priority of known categories. Unlisted categories share UNLISTED_RANK.
DEFAULT_CATEGORY_ORDER: Tuple[Tuple[str, int], ...] = (
    ("🔲 Layout", 1),
    ("📐 Spacing", 2),
    ("🧱 Box & Borders", 3),
    ("🔤 Typography", 4),
    ("🎨 Colors", 5),
    ("✨ Effects", 6),
    ("Uncategorized", 99),
)
UNLISTED_RANK = 999

COMPONENT_MARKER = "@blockStyleComponent true"

HEADER_DOCBLOCK = re.compile(r"^\s*/\*\*(.*?)\*/", re.DOTALL)
DOCBLOCK = re.compile(r"/\*\*(.*?)\*/", re.DOTALL)
CATEGORY_TAG = re.compile(r"@category\s+(.+)")
ORDER_TAG = re.compile(r"@order\s+(-?[0-9]+)")
DESCRIPTION_TAG = re.compile(r"@description\s+(.+)")
NAME_TAG = re.compile(r"@name\s+([.a-zA-Z0-9_-]+)")


def parse_header(content: str, style_file: StyleFile) -> None:
    """Apply @category, @order and @description from the file's leading docblock."""
    header = HEADER_DOCBLOCK.match(content)
    if not header:
        return

    body = header.group(1)

    category = CATEGORY_TAG.search(body)
    if category:
        style_file.category = category.group(1).strip()

    order = ORDER_TAG.search(body)
    if order:
        style_file.order = int(order.group(1))

    description = DESCRIPTION_TAG.search(body)
    if description:
        style_file.description = description.group(1).strip()


def parse_components(content: str) -> Dict[str, str]:
    """
    Extract every block style component declared in a stylesheet.

    Args:
        content: Full stylesheet text

    Returns:
        Mapping of component name (surrounding dots stripped) to description.
        A later declaration of the same name replaces the earlier one.
    """
    components: Dict[str, str] = {}

    for docblock in DOCBLOCK.finditer(content):
        body = docblock.group(1)
        if COMPONENT_MARKER not in body:
            continue

        name = NAME_TAG.search(body)
        if not name:
            logger.debug("Skipping component docblock without @name")
            continue

        key = name.group(1).strip(".")
        description = DESCRIPTION_TAG.search(body)
        components[key] = description.group(1).strip() if description else ""

    return components


def parse_style_file(filename: str, content: str) -> StyleFile:
    """Parse one stylesheet's text into a StyleFile."""
    style_file = StyleFile(filename=filename)
    parse_header(content, style_file)
    style_file.components = parse_components(content)
    return style_file


class StyleDiscoverer:
    """
    Builds the block style catalog for a stylesheet directory.

    The catalog is rebuilt from disk on every call; nothing is cached between
    calls.
    """

    def __init__(self, category_order: Optional[Sequence[Tuple[str, int]]] = None):
        pairs = DEFAULT_CATEGORY_ORDER if category_order is None else category_order
        self._category_ranks = {label: rank for label, rank in pairs}

    @property
    def category_order(self) -> Tuple[Tuple[str, int], ...]:
        return tuple(self._category_ranks.items())

    def discover(self, directory: Union[str, Path]) -> Catalog:
        """
        Scan a directory and return its categorized catalog.

        Args:
            directory: Directory holding the stylesheets

        Returns:
            category -> filename -> {"description", "components"}, with
            categories in display order and files in (order, filename) order.
            Empty if the directory is missing or declares no components.
        """
        grouped: Catalog = {}
        for style_file in self.scan(directory):
            grouped.setdefault(style_file.category, {})[style_file.filename] = (
                style_file.to_entry()
            )

        return {category: grouped[category] for category in self.sort_categories(grouped)}

    def scan(self, directory: Union[str, Path]) -> List[StyleFile]:
        """
        Parse every stylesheet in a directory.

        Returns:
            Files declaring at least one component, sorted by order then filename
        """
        path = Path(directory)
        if not path.is_dir():
            logger.info(f"No block style directory at: {path}")
            return []

        discovered = []
        for entry in path.iterdir():
            if entry.suffix != STYLESHEET_EXTENSION or not entry.is_file():
                continue

            content = self._read(entry)
            if content is None:
                continue

            style_file = parse_style_file(entry.stem, content)
            if not style_file.components:
                logger.debug(f"No block style components in {entry.name}")
                continue

            discovered.append(style_file)

        discovered.sort(key=lambda f: (f.order, f.filename))
        logger.info(f"Discovered {len(discovered)} block style file(s) in {path}")
        return discovered

    def sort_categories(self, categories) -> List[str]:
        """Order category labels by priority rank, then label."""
        return sorted(categories, key=lambda label: (self.rank(label), label))

    def rank(self, category: str) -> int:
        return self._category_ranks.get(category, UNLISTED_RANK)

    @staticmethod
    def _read(path: Path) -> Optional[str]:
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            logger.warning(f"Skipping unreadable stylesheet {path}: {e}")
            return None
