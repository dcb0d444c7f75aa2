from __future__ import annotations

import re
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

_SEPARATORS = re.compile(r"[\s,]+")


class RichPrompter:
    """
    Terminal multi-choice prompt.

    Options are shown as a numbered table; the answer is a list of numbers
    separated by commas or spaces. A blank answer selects nothing.
    """

    def __init__(self, *, console: Console | None = None) -> None:
        self._console = console or Console()

    def multi_select(
        self, message: str, defaults: Sequence[str], options: Sequence[str]
    ) -> list[int]:
        if not options:
            return []

        table = Table(show_lines=False, header_style="bold magenta")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Artifact")
        for number, option in enumerate(options, start=1):
            table.add_row(str(number), escape(option))
        self._console.print(table)

        default = " ".join(
            str(number) for number, option in enumerate(options, start=1) if option in defaults
        )
        while True:
            raw = Prompt.ask(
                message,
                console=self._console,
                default=default,
                show_default=bool(default),
            )
            try:
                return parse_selection(raw, len(options))
            except ValueError as exc:
                self._console.print(str(exc), style="red", markup=False)


def parse_selection(raw: str, option_count: int) -> list[int]:
    """Turn "1, 3 4" into zero-based indices, keeping first-seen order."""
    indices: list[int] = []
    for token in _SEPARATORS.split(raw.strip()):
        if not token:
            continue
        if not token.isdigit():
            raise ValueError(f"Not a number: {token}")
        number = int(token)
        if not 1 <= number <= option_count:
            raise ValueError(f"Choose numbers between 1 and {option_count}")
        if number - 1 not in indices:
            indices.append(number - 1)
    return indices
