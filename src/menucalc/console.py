"""Line-oriented console I/O and interactive operand collection."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from menucalc.exceptions import EndOfInput, InvalidFormatError
from menucalc.operations import Arity
from menucalc.validators import parse_number

if TYPE_CHECKING:
    from menucalc.messages import Messages
    from menucalc.operations import Operation

logger = logging.getLogger(__name__)


class Console:
    """Thin wrapper over a pair of text streams."""

    def __init__(
        self, stdin: TextIO | None = None, stdout: TextIO | None = None
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text without a newline and flush, as prompts need."""
        self._stdout.write(text)
        self._stdout.flush()

    def write_line(self, text: str = "") -> None:
        self._stdout.write(f"{text}\n")

    def read_line(self) -> str | None:
        """Read one line without its terminator; None once input is exhausted."""
        line = self._stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")


class InputCollector:
    """
    Prompts for floating-point operands.

    Unparsable input is answered with a retry message and the same prompt,
    with no upper bound on attempts.
    """

    def __init__(self, console: Console, messages: Messages) -> None:
        self._console = console
        self._messages = messages

    def collect(self, prompt: str) -> float:
        """
        Block until the user enters a valid number.

        Args:
            prompt: Text shown before each attempt

        Returns:
            The parsed operand

        Raises:
            EndOfInput: If the input stream closes before a number is entered
        """
        self._console.write(prompt)
        while True:
            line = self._console.read_line()
            if line is None:
                raise EndOfInput()
            try:
                return parse_number(line)
            except InvalidFormatError as e:
                logger.debug("Rejected operand: %s", e)
                self._console.write_line(self._messages.invalid_operand)
                self._console.write(prompt)

    def collect_for(self, operation: Operation) -> tuple[float, ...]:
        """Collect as many operands as the operation's arity requires."""
        if operation.arity is Arity.UNARY:
            return (self.collect(self._messages.number_prompt),)
        return (
            self.collect(self._messages.first_number_prompt),
            self.collect(self._messages.second_number_prompt),
        )
