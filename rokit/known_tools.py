"""Well-known tools that may be referred to by name alone."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .tool_id import ToolId

_KNOWN_TOOL_AUTHORS_AND_IDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("evaera", ("moonwave",)),
    ("Iron-Stag-Games", ("lync",)),
    ("JohnnyMorganz", ("luau-lsp", "StyLua", "wally-package-types")),
    ("Kampfkarren", ("selene",)),
    ("luau-lang", ("luau",)),
    ("lune-org", ("lune",)),
    ("rojo-rbx", ("remodel", "rojo", "tarmac")),
    ("UpliftGames", ("wally",)),
)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _build_known_tools() -> Mapping[str, ToolId]:
    known: dict[str, ToolId] = {}
    for author, tools in _KNOWN_TOOL_AUTHORS_AND_IDS:
        for tool_cased in tools:
            tool_uncased = tool_cased.translate(_ASCII_LOWER)
            if tool_uncased in known:
                raise RuntimeError(f"Duplicate known tool: {tool_uncased}")
            known[tool_uncased] = ToolId.parse(f"{author}/{tool_cased}")
    return MappingProxyType(dict(sorted(known.items())))


_KNOWN_TOOLS = _build_known_tools()


def get_known_tool(tool: str) -> ToolId | None:
    """Return the id of a well-known tool by its name, ignoring case."""
    return _KNOWN_TOOLS.get(tool.translate(_ASCII_LOWER))