"""The interactive show, select, collect, compute and report loop."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from menucalc.console import Console, InputCollector
from menucalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    EndOfInput,
    InvalidFormatError,
    OperandCountError,
)
from menucalc.menu import MenuPresenter, SelectionResolver

if TYPE_CHECKING:
    from menucalc.messages import Messages
    from menucalc.operations import Operation, OperationRegistry

logger = logging.getLogger(__name__)

# Integral values at or above this magnitude print in exponent form
INTEGRAL_DISPLAY_LIMIT = 1e16


class LoopState(enum.Enum):
    SHOWING_MENU = "showing_menu"
    AWAITING_SELECTION = "awaiting_selection"
    COLLECTING_OPERANDS = "collecting_operands"
    COMPUTING = "computing"
    REPORTING_RESULT = "reporting_result"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class CalculationRecord:
    """How the most recent menu cycle ended. Operands are not kept."""

    operation: str
    value: float | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        outcome = format_value(self.value) if self.succeeded else self.error
        return f"{self.operation} = {outcome}"


def format_value(value: float | None) -> str:
    """
    Render a result the way the console prints it.

    Example:
        >>> format_value(7.0)
        '7'
        >>> format_value(-0.0)
        '-0'
        >>> format_value(0.5)
        '0.5'
        >>> format_value(1e300)
        '1e+300'
    """
    if value is None:
        return ""
    if (
        math.isfinite(value)
        and value.is_integer()
        and abs(value) < INTEGRAL_DISPLAY_LIMIT
    ):
        if value == 0 and math.copysign(1, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


class Application:
    """
    Runs menu cycles until the user picks the exit selection.

    Each cycle walks the states in ``LoopState``. Every classified failure
    is reported and the loop continues; only ``TERMINATED`` ends ``run``.
    Operands live only inside the cycle that collected them.

    Example:
        >>> import io
        >>> from menucalc.messages import ENGLISH
        >>> from menucalc.operations import build_registry
        >>> console = Console(io.StringIO("1\\n3\\n4\\n0\\n"), io.StringIO())
        >>> registry = build_registry(ENGLISH.operation_names)
        >>> app = Application(registry, console, ENGLISH)
        >>> app.run()
        >>> str(app.last_record), app.completed_cycles
        ('addition = 7', 1)
    """

    def __init__(
        self, registry: OperationRegistry, console: Console, messages: Messages
    ) -> None:
        self._registry = registry
        self._console = console
        self._messages = messages
        self._menu = MenuPresenter(console, messages.banner)
        self._selector = SelectionResolver(console, messages)
        self._collector = InputCollector(console, messages)
        self._state = LoopState.SHOWING_MENU
        self._last_record: CalculationRecord | None = None
        self._completed_cycles = 0

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def last_record(self) -> CalculationRecord | None:
        """Outcome of the latest cycle that reached the reporting step."""
        return self._last_record

    @property
    def completed_cycles(self) -> int:
        return self._completed_cycles

    def run(self) -> None:
        """Drive the loop until it reaches ``TERMINATED``."""
        while self._state is not LoopState.TERMINATED:
            self._cycle()

    def _cycle(self) -> None:
        self._state = LoopState.SHOWING_MENU
        self._menu.render(self._registry)

        self._state = LoopState.AWAITING_SELECTION
        operation = self._await_selection()
        if operation is None:
            self._state = LoopState.TERMINATED
            return

        self._state = LoopState.COLLECTING_OPERANDS
        try:
            operands = self._collector.collect_for(operation)
        except EndOfInput:
            logger.info("Input closed while collecting operands")
            self._state = LoopState.TERMINATED
            return

        self._state = LoopState.COMPUTING
        record = self._compute(operation, operands)

        self._state = LoopState.REPORTING_RESULT
        self._report(record)
        self._last_record = record
        self._completed_cycles += 1
        self._state = LoopState.SHOWING_MENU

    def _await_selection(self) -> Operation | None:
        """Prompt until the selection parses; None is the exit signal."""
        while True:
            try:
                return self._selector.select(self._registry)
            except InvalidFormatError as e:
                logger.warning("Unparsable selection: %s", e)
                self._console.write_line(
                    self._messages.format_error(self._messages.invalid_format)
                )

    def _compute(
        self, operation: Operation, operands: tuple[float, ...]
    ) -> CalculationRecord:
        try:
            value = operation.run(*operands)
        except DivisionByZeroError as e:
            logger.warning("%s failed: %s", operation.key, e)
            error = self._messages.division_by_zero
        except OperandCountError as e:
            logger.warning("%s failed: %s", operation.key, e)
            error = self._messages.format_operand_count(
                operation.name, e.required, e.given
            )
        except CalculatorError as e:
            logger.warning("%s failed: %s", operation.key, e)
            error = self._messages.computation_failed
        except Exception as e:
            logger.exception("Unexpected failure in %s: %s", operation.key, e)
            error = self._messages.computation_failed
        else:
            return CalculationRecord(operation.key, value=value)
        return CalculationRecord(operation.key, error=error)

    def _report(self, record: CalculationRecord) -> None:
        if record.succeeded:
            line = self._messages.format_result(format_value(record.value))
        else:
            line = self._messages.format_error(record.error or "")
        self._console.write_line(line)
