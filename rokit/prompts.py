"""Interactive prompts asking the user to trust tools."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterable

from rich.console import Console
from rich.prompt import Confirm
from rich.text import Text

from .spec import ToolSpec
from .tool_id import ToolId


class TrustPromptKind(Enum):
    """Whether a single tool or one of many is being asked about."""

    INSTALL = "install"
    INSTALL_MANY = "install_many"


class TrustPromptError(RuntimeError):
    """Raised when the user cannot be asked, or left the prompt without answering."""


def _stderr_is_terminal() -> bool:
    isatty = getattr(sys.stderr, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def _prompt_inner(kind: TrustPromptKind, tool_id: ToolId) -> bool:
    if not _stderr_is_terminal():
        raise TrustPromptError(
            f"The following tool has not been marked as trusted: {tool_id}"
            f"\nRun `rokit add {tool_id}` to install and trust this tool."
        )

    if kind is TrustPromptKind.INSTALL:
        question = f"Trust and install {tool_id}?"
        exited = f"Exited without trusting tool {tool_id}"
    else:
        question = f"Trust {tool_id}?"
        exited = "Exited without trusting tools"

    try:
        return bool(Confirm.ask(Text(question), console=Console(stderr=True)))
    except (EOFError, KeyboardInterrupt) as e:
        raise TrustPromptError(exited) from e


def prompt_for_trust(tool_id: ToolId) -> bool:
    """Ask whether to trust and install a tool; return the answer."""
    return _prompt_inner(TrustPromptKind.INSTALL, tool_id)


def prompt_for_trust_specs(tool_specs: Iterable[ToolSpec]) -> list[ToolSpec]:
    """Ask about each distinct untrusted tool and return the specs now trusted."""
    specs = list(tool_specs)
    if not specs:
        return []

    if len(specs) == 1:
        print("A tool is not yet trusted and needs your approval.")
        spec = specs[0]
        return [spec] if _prompt_inner(TrustPromptKind.INSTALL, spec.id) else []

    print(
        "Some tools are not yet trusted and need your approval."
        "\nYou will be prompted for each tool individually, and "
        "any tool you do not trust will not be installed."
    )
    trusted_ids = {
        tool_id
        for tool_id in sorted(set(spec.id for spec in specs))
        if _prompt_inner(TrustPromptKind.INSTALL_MANY, tool_id)
    }
    return [spec for spec in specs if spec.id in trusted_ids]