"""Tool identifiers: provider, author and name of a tool."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import TYPE_CHECKING

from .alias import ToolAlias
from .identifiers import is_invalid_identifier
from .strings import CaseInsensitiveString

if TYPE_CHECKING:
    import semver

    from .spec import ToolSpec


class ArtifactProvider(Enum):
    """A source that tool artifacts can be fetched from."""

    GITHUB = "github"

    @classmethod
    def parse(cls, s: str) -> ArtifactProvider:
        """Parse a provider from its lowercase name."""
        key = s.strip().lower()
        for provider in cls:
            if provider.value == key:
                return provider
        raise ValueError(f"unknown artifact provider '{s}'")

    @property
    def display_name(self) -> str:
        """Human-readable provider name."""
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.value


_DISPLAY_NAMES = {ArtifactProvider.GITHUB: "GitHub"}


class ToolIdParseError(ValueError):
    """Raised when a string is not a valid tool id."""

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


@total_ordering
class ToolId:
    """A case-insensitive tool identifier of the form ``author/name``."""

    __slots__ = ("_provider", "_author", "_name")

    def __init__(
        self,
        author: str,
        name: str,
        provider: ArtifactProvider = ArtifactProvider.GITHUB,
    ) -> None:
        self._provider = provider
        self._author = CaseInsensitiveString(author)
        self._name = CaseInsensitiveString(name)

    @classmethod
    def parse(cls, s: str) -> ToolId:
        """Parse ``[provider:]author/name``."""
        if not s:
            raise ToolIdParseError("empty", "tool id is empty")

        provider_str, sep, rest = s.partition(":")
        if sep:
            try:
                provider = ArtifactProvider.parse(provider_str)
            except ValueError as e:
                raise ToolIdParseError(
                    "invalid_provider", f"artifact provider '{e}' is invalid"
                ) from e
        else:
            provider, rest = ArtifactProvider.GITHUB, s

        before, sep, after = rest.partition("/")
        if not sep:
            raise ToolIdParseError("missing_separator", "missing '/' separator")

        author, name = before.strip(), after.strip()
        if is_invalid_identifier(author):
            raise ToolIdParseError("invalid_author", f"author '{author}' is empty or invalid")
        if is_invalid_identifier(name):
            raise ToolIdParseError("invalid_name", f"name '{name}' is empty or invalid")

        return cls(author, name, provider)

    @property
    def provider(self) -> ArtifactProvider:
        return self._provider

    @property
    def author(self) -> str:
        return self._author.original

    @property
    def name(self) -> str:
        return self._name.original

    def into_spec(self, version: semver.Version) -> ToolSpec:
        """Combine this id with a version into a tool spec."""
        from .spec import ToolSpec

        return ToolSpec(self, version)

    def into_alias(self) -> ToolAlias:
        """Derive an alias from the tool name."""
        return ToolAlias.from_id(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ToolId):
            return NotImplemented
        return (self._provider, self._author, self._name) == (
            other._provider,
            other._author,
            other._name,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ToolId):
            return NotImplemented
        return (self._author, self._name) < (other._author, other._name)

    def __hash__(self) -> int:
        return hash((self._provider, self._author, self._name))

    def __str__(self) -> str:
        return f"{self.author}/{self.name}"

    def __repr__(self) -> str:
        return f"ToolId({self.author!r}, {self.name!r}, {self._provider!s})"