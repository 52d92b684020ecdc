"""Menu rendering and selection resolution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from menucalc.validators import parse_integer

if TYPE_CHECKING:
    from menucalc.console import Console
    from menucalc.messages import Messages
    from menucalc.operations import Operation, OperationRegistry

logger = logging.getLogger(__name__)


class MenuPresenter:
    """Writes the banner and one ``"{index}.{name}"`` line per operation."""

    def __init__(self, console: Console, banner: str) -> None:
        self._console = console
        self._banner = banner

    @staticmethod
    def lines(registry: OperationRegistry) -> list[str]:
        return [
            f"{index}.{operation.name}"
            for index, operation in enumerate(registry.list(), start=1)
        ]

    def render(self, registry: OperationRegistry) -> None:
        self._console.write_line(self._banner)
        for line in self.lines(registry):
            self._console.write_line(line)


def resolve(raw_index: int, registry: OperationRegistry) -> Operation | None:
    """
    Map a menu number to an operation.

    Non-positive numbers are the exit signal. Numbers past the end of the
    menu also give None, so they end the session exactly like an exit.

    Args:
        raw_index: The 1-based number the user typed
        registry: Operations in menu order

    Returns:
        The selected operation, or None
    """
    if raw_index <= 0:
        return None
    return registry.get(raw_index)


class SelectionResolver:
    """Prompts for a menu number and resolves it against the registry."""

    def __init__(self, console: Console, messages: Messages) -> None:
        self._console = console
        self._messages = messages

    def select(self, registry: OperationRegistry) -> Operation | None:
        """
        Read one selection.

        End of input reads as the exit selection.

        Raises:
            InvalidFormatError: If the line is not an integer
        """
        self._console.write(self._messages.select_prompt)
        raw_index = parse_integer(self._console.read_line())
        operation = resolve(raw_index, registry)
        if operation is None:
            logger.debug("Selection %d ends the session", raw_index)
        else:
            logger.debug("Selection %d resolved to %s", raw_index, operation.key)
        return operation
