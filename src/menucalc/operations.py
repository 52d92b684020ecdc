"""Registered arithmetic operations and the ordered operation registry."""

from __future__ import annotations

import enum
import functools
import logging
import math
import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from menucalc.exceptions import DivisionByZeroError
from menucalc.validators import require_operands

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping, Sequence

logger = logging.getLogger(__name__)


class Arity(enum.IntEnum):
    """How many operands the console collects for an operation."""

    UNARY = 1
    BINARY = 2


@dataclass(frozen=True)
class Operation:
    """
    A named pure function from a sequence of numbers to a number.

    ``key`` is stable across languages; ``name`` is what the menu shows.
    """

    key: str
    name: str
    arity: Arity
    compute: Callable[[Sequence[float]], float]

    def run(self, *numbers: float) -> float:
        """Evaluate the operation on the given operands."""
        logger.debug("Running %s with %r", self.key, numbers)
        return self.compute(numbers)


# -- fold operations ------------------------------------------------------


def _fold(
    key: str, binary: Callable[[float, float], float], numbers: Sequence[float]
) -> float:
    require_operands(key, numbers, 1)
    return float(functools.reduce(binary, numbers))


def add(numbers: Sequence[float]) -> float:
    """
    Sum the operands left to right.

    Properties:
        - Commutative: add([a, b]) == add([b, a])
        - Associative within floating-point tolerance
        - Identity: add([]) == 0.0
    """
    return float(functools.reduce(operator.add, numbers, 0.0))


def subtract(numbers: Sequence[float]) -> float:
    """Fold subtraction left to right: ``[a, b, c]`` gives ``(a - b) - c``."""
    return _fold("subtraction", operator.sub, numbers)


def multiply(numbers: Sequence[float]) -> float:
    """Fold multiplication left to right; overflow yields infinity."""
    return _fold("multiplication", operator.mul, numbers)


def divide(numbers: Sequence[float]) -> float:
    """
    Fold division left to right.

    The second operand is checked before the fold runs, so a zero there
    never produces a numeric result (not even infinity). A zero divisor
    further along the fold gives a signed infinity, or NaN for 0 / 0.

    Raises:
        DivisionByZeroError: If fewer than two operands are given or the
            second operand is zero
    """
    if len(numbers) < 2 or numbers[1] == 0:
        raise DivisionByZeroError(tuple(numbers))
    return _fold("division", _true_divide, numbers)


def _true_divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


# -- IEEE-754 style unary and power operations ----------------------------


def power(numbers: Sequence[float]) -> float:
    """
    Raise the first operand to the power of the second.

    Results the float type cannot represent come back as infinity or NaN
    instead of raising.
    """
    require_operands("power", numbers, 2)
    base, exponent = float(numbers[0]), float(numbers[1])

    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and exponent.is_integer() and exponent % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        # Zero to a negative power, or a negative base with a fractional exponent
        if base == 0:
            if exponent.is_integer() and exponent % 2 == 1:
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def square_root(numbers: Sequence[float]) -> float:
    require_operands("square_root", numbers, 1)
    x = float(numbers[0])
    return math.sqrt(x) if x >= 0 or math.isnan(x) else math.nan


def sine(numbers: Sequence[float]) -> float:
    require_operands("sine", numbers, 1)
    x = float(numbers[0])
    return math.nan if math.isinf(x) else math.sin(x)


def cosine(numbers: Sequence[float]) -> float:
    require_operands("cosine", numbers, 1)
    x = float(numbers[0])
    return math.nan if math.isinf(x) else math.cos(x)


def tangent(numbers: Sequence[float]) -> float:
    require_operands("tangent", numbers, 1)
    x = float(numbers[0])
    return math.nan if math.isinf(x) else math.tan(x)


def cotangent(numbers: Sequence[float]) -> float:
    """Reciprocal of the tangent; a zero tangent gives a signed infinity."""
    t = tangent(numbers)
    if t == 0:
        return math.copysign(math.inf, t)
    return 1.0 / t


def _logarithm(
    key: str, log: Callable[[float], float], numbers: Sequence[float]
) -> float:
    require_operands(key, numbers, 1)
    x = float(numbers[0])
    if x == 0:
        return -math.inf
    if x < 0:
        return math.nan
    return log(x)


def natural_logarithm(numbers: Sequence[float]) -> float:
    return _logarithm("natural_logarithm", math.log, numbers)


def decimal_logarithm(numbers: Sequence[float]) -> float:
    return _logarithm("decimal_logarithm", math.log10, numbers)


# Registration order is menu order.
DEFINITIONS: tuple[tuple[str, Arity, Callable[[Sequence[float]], float]], ...] = (
    ("addition", Arity.BINARY, add),
    ("subtraction", Arity.BINARY, subtract),
    ("multiplication", Arity.BINARY, multiply),
    ("division", Arity.BINARY, divide),
    ("power", Arity.BINARY, power),
    ("square_root", Arity.UNARY, square_root),
    ("sine", Arity.UNARY, sine),
    ("cosine", Arity.UNARY, cosine),
    ("tangent", Arity.UNARY, tangent),
    ("cotangent", Arity.UNARY, cotangent),
    ("natural_logarithm", Arity.UNARY, natural_logarithm),
    ("decimal_logarithm", Arity.UNARY, decimal_logarithm),
)


class OperationRegistry:
    """
    An ordered, read-only collection of operations.

    Menu position ``i`` (1-based) is the ``i``-th registered operation.

    Example:
        >>> addition = Operation("addition", "Add", Arity.BINARY, add)
        >>> registry = OperationRegistry([addition])
        >>> registry.get(1).run(3, 4)
        7.0
        >>> registry.get(2) is None
        True
    """

    def __init__(self, operations: Sequence[Operation]) -> None:
        self._operations: tuple[Operation, ...] = tuple(operations)

    def list(self) -> tuple[Operation, ...]:
        """All operations in registration order."""
        return self._operations

    def get(self, position: int) -> Operation | None:
        """Return the operation at a 1-based position, or None when out of range."""
        if 1 <= position <= len(self._operations):
            return self._operations[position - 1]
        return None

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[Operation]:
        return iter(self._operations)

    def __repr__(self) -> str:
        return f"OperationRegistry(size={len(self._operations)})"


def build_registry(names: Mapping[str, str]) -> OperationRegistry:
    """
    Register every built-in operation with its display name.

    Args:
        names: Display name for each operation key

    Returns:
        Registry in the fixed menu order

    Raises:
        KeyError: If a display name is missing for some operation
    """
    return OperationRegistry(
        [
            Operation(key, names[key], arity, compute)
            for key, arity, compute in DEFINITIONS
        ]
    )
