from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PromptCall:
    message: str
    defaults: tuple[str, ...]
    options: tuple[str, ...]


class ScriptedPrompter:
    """Prompter that answers with preset indices and remembers what it was asked."""

    def __init__(self, selected: Sequence[int] = (), *, error: Exception | None = None) -> None:
        self._selected = list(selected)
        self._error = error
        self.calls: list[PromptCall] = []

    def multi_select(
        self, message: str, defaults: Sequence[str], options: Sequence[str]
    ) -> list[int]:
        self.calls.append(PromptCall(message, tuple(defaults), tuple(options)))
        if self._error is not None:
            raise self._error
        return list(self._selected)
