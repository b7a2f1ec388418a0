"""Data models for block style discovery."""

from dataclasses import dataclass, field
from typing import Dict

UNCATEGORIZED = "Uncategorized"

# category label -> filename -> {"description": str, "components": {name: description}}
Catalog = Dict[str, Dict[str, dict]]


@dataclass
class StyleFile:
    """A scanned stylesheet with its header metadata and declared components."""

    filename: str  # stem, e.g. "spacing" for spacing.css
    category: str = UNCATEGORIZED
    order: int = 0
    description: str = ""
    components: Dict[str, str] = field(default_factory=dict)  # name -> description

    def to_entry(self) -> dict:
        """Catalog entry for this file."""
        return {"description": self.description, "components": dict(self.components)}
