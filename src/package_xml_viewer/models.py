"""
Data models and structures for the package.xml viewer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class SortPolicy(str, Enum):
    """Supported component orderings."""
    BY_TYPE = "by-type"  # Type name, then member name; stable on ties
    AS_IS = "as-is"  # Document order


class OutputFormat(str, Enum):
    """Supported output formats."""
    TABLE = "table"
    CSV = "csv"
    TSV = "tsv"


@dataclass(frozen=True)
class Component:
    """One metadata component declared in a manifest."""
    type_name: str
    member_name: str
    parent_name: str = ""  # Only set by parent splitting


@dataclass
class Manifest:
    """Parsed package.xml manifest."""
    components: List[Component] = field(default_factory=list)
    version: Optional[str] = None
    namespace: Optional[str] = None

    @property
    def type_names(self) -> List[str]:
        """Distinct type names in first-seen order."""
        return list(dict.fromkeys(c.type_name for c in self.components))
