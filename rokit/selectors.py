"""Parsing of command-line tool selectors: aliases, ids and specs."""

from __future__ import annotations

from typing import Union

from .alias import ToolAlias
from .known_tools import get_known_tool
from .spec import ToolSpec
from .tool_id import ToolId

IdOrSpec = Union[ToolId, ToolSpec]
AliasOrIdOrSpec = Union[ToolAlias, ToolId, ToolSpec]


def parse_id_or_spec(s: str) -> IdOrSpec:
    """Parse a tool id or spec; well-known tool names resolve to their ids."""
    if "@" in s:
        return ToolSpec.parse(s)
    known = get_known_tool(s)
    if known is not None:
        return known
    return ToolId.parse(s)


def parse_alias_or_id_or_spec(s: str) -> AliasOrIdOrSpec:
    """Parse a spec if it holds '@', an id if it holds '/', otherwise an alias."""
    if "@" in s:
        return ToolSpec.parse(s)
    if "/" in s:
        return ToolId.parse(s)
    return ToolAlias.parse(s)


def id_of(tool: IdOrSpec) -> ToolId:
    """Return the tool id of an id or spec."""
    if isinstance(tool, ToolSpec):
        return tool.id
    if isinstance(tool, ToolId):
        return tool
    raise TypeError(f"expected a tool id or spec, got {type(tool).__name__}")


def alias_of(tool: AliasOrIdOrSpec) -> ToolAlias:
    """Derive the alias a tool is run under from an alias, id or spec."""
    if isinstance(tool, (ToolAlias, ToolId, ToolSpec)):
        return ToolAlias.parse(tool.name)
    raise TypeError(f"expected a tool alias, id or spec, got {type(tool).__name__}")