"""
Core value types shared by the classifier, the override index and the
checker.
"""

from dataclasses import dataclass
from enum import Enum


class Axis(Enum):
    """Context a name is checked in."""
    IDENTIFIER = "identifier"   # declared or bound names
    PROPERTY = "property"       # object keys and member-access properties


@dataclass(frozen=True)
class Location:
    """A source position: 1-based line, 0-based column."""
    line: int
    column: int

    def shifted(self, offset: int) -> "Location":
        """Return this location moved *offset* columns to the right."""
        if offset == 0:
            return self
        return Location(self.line, self.column + offset)

    @classmethod
    def of_node(cls, node) -> "Location":
        """Start location of an ESTree node."""
        start = node.loc.start
        return cls(start.line, start.column)


@dataclass(frozen=True)
class Occurrence:
    """A significant name found in the tree."""
    axis: Axis
    name: str
    location: Location
