from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class Prompter(Protocol):
    def multi_select(
        self, message: str, defaults: Sequence[str], options: Sequence[str]
    ) -> list[int]:
        """Return the indices of the chosen entries in options."""
        ...
