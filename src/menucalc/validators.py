"""Validation of console text and operand sequences."""

from collections.abc import Sequence

from menucalc.exceptions import InvalidFormatError, OperandCountError


def parse_integer(text: str | None) -> int:
    """
    Parse a menu selection typed at the console.

    Surrounding whitespace and a leading sign are accepted; digit group
    underscores are not. A missing line (``None``) reads as ``0``, the
    exit selection.

    Args:
        text: Raw line without the trailing newline

    Returns:
        The parsed integer

    Raises:
        InvalidFormatError: If the text is not an integer
    """
    if text is None:
        return 0

    stripped = text.strip()
    if not stripped or "_" in stripped:
        raise InvalidFormatError(text, "integer")

    try:
        return int(stripped)
    except ValueError as e:
        raise InvalidFormatError(text, "integer") from e


def parse_number(text: str) -> float:
    """
    Parse an operand typed at the console.

    Args:
        text: Raw line without the trailing newline

    Returns:
        The value as a float; ``inf`` and ``nan`` spellings are accepted

    Raises:
        InvalidFormatError: If the text is not a floating-point number
    """
    stripped = text.strip()
    if not stripped or "_" in stripped:
        raise InvalidFormatError(text)

    try:
        return float(stripped)
    except ValueError as e:
        raise InvalidFormatError(text) from e


def require_operands(
    operation: str, numbers: Sequence[float], required: int
) -> Sequence[float]:
    """
    Validate that at least ``required`` operands were supplied.

    Raises:
        OperandCountError: If too few operands were given
    """
    if len(numbers) < required:
        raise OperandCountError(operation, required, len(numbers))
    return numbers
