"""Tool aliases: the names under which tools are run."""

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING

from .identifiers import is_invalid_identifier
from .strings import CaseInsensitiveString

if TYPE_CHECKING:
    from .tool_id import ToolId


class ToolAliasParseError(ValueError):
    """Raised when a string is not a valid tool alias."""

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


@total_ordering
class ToolAlias:
    """A case-insensitive tool alias that keeps its original casing for display."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = CaseInsensitiveString(name)

    @classmethod
    def parse(cls, s: str) -> ToolAlias:
        """Parse and validate an alias string."""
        if not s:
            raise ToolAliasParseError("empty", "alias is empty")
        if is_invalid_identifier(s):
            raise ToolAliasParseError("invalid", f"alias '{s}' is invalid")
        if any(c.isspace() for c in s):
            raise ToolAliasParseError(
                "contains_whitespace", f"alias '{s}' contains whitespace"
            )
        if CaseInsensitiveString(s) == CaseInsensitiveString("rokit"):
            raise ToolAliasParseError("invalid", f"alias '{s}' is invalid")
        return cls(s)

    @classmethod
    def from_id(cls, tool_id: ToolId) -> ToolAlias:
        """Create an alias from the name part of a tool id."""
        return cls(tool_id.name)

    @property
    def name(self) -> str:
        """The alias with its original casing."""
        return self._name.original

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ToolAlias):
            return NotImplemented
        return self._name == other._name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ToolAlias):
            return NotImplemented
        return self._name < other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return self._name.original

    def __repr__(self) -> str:
        return f"ToolAlias({self.name!r})"