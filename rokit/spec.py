"""Tool specifications: a tool id together with an exact version."""

from __future__ import annotations

import re
from dataclasses import dataclass

import semver

from .identifiers import is_invalid_identifier, to_xyz_version
from .tool_id import ArtifactProvider, ToolId, ToolIdParseError

_SUSPECTED_REQ_NOTE = (
    "\nNote: It seems like you may be trying to use a version "
    "requirement, which is not supported in Rokit. To use this tool, "
    "specify an exact version instead."
)

_PART = r"(?:\*|[xX]|0|[1-9]\d*)"
_IDENT = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"
_COMPARATOR = re.compile(
    rf"\s*(?:=|>=|>|<=|<|~|\^)?\s*{_PART}"
    rf"(?:\.{_PART}(?:\.{_PART}(?:-{_IDENT})?(?:\+{_IDENT})?)?)?\s*"
)


def _looks_like_version_req(s: str) -> bool:
    """Return True if the string parses as a version requirement."""
    parts = s.split(",")
    return bool(s.strip()) and all(_COMPARATOR.fullmatch(p) for p in parts)


class ToolSpecParseError(ValueError):
    """Raised when a string is not a valid tool spec."""

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True, order=True)
class ToolSpec:
    """A tool id paired with an exact version, written ``author/name@x.y.z``."""

    id: ToolId
    version: semver.Version

    @classmethod
    def parse(cls, s: str) -> ToolSpec:
        """Parse ``[provider:]author/name@version``; ``x.y`` means ``x.y.0``."""
        if not s:
            raise ToolSpecParseError("empty", "tool spec is empty")

        before, sep, after = s.partition("@")
        if not sep:
            raise ToolSpecParseError("missing_version_separator", "missing '@' separator")

        before, after = before.strip(), after.strip()

        try:
            tool_id = ToolId.parse(before)
        except ToolIdParseError as e:
            raise ToolSpecParseError("id", str(e)) from e

        if is_invalid_identifier(after):
            raise ToolSpecParseError("invalid_version", f"version '{after}' is invalid")

        try:
            version = semver.Version.parse(to_xyz_version(after))
        except ValueError as e:
            if _looks_like_version_req(after):
                raise ToolSpecParseError(
                    "suspected_version_req", f"{e}{_SUSPECTED_REQ_NOTE}"
                ) from e
            raise ToolSpecParseError("version", str(e)) from e

        return cls(tool_id, version)

    @property
    def provider(self) -> ArtifactProvider:
        return self.id.provider

    @property
    def author(self) -> str:
        return self.id.author

    @property
    def name(self) -> str:
        return self.id.name

    def matches_id(self, tool_id: ToolId) -> bool:
        """Return True if this spec refers to the given tool id."""
        return self.id == tool_id

    def __str__(self) -> str:
        return f"{self.id}@{self.version}"