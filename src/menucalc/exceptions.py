"""Custom exceptions for the menucalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class InvalidFormatError(CalculatorError):
    """Raised when console text cannot be parsed as the expected number type."""

    def __init__(self, text: str, expected: str = "number") -> None:
        super().__init__(f"Expected {expected}", text)
        self.text = text
        self.expected = expected


class DivisionByZeroError(CalculatorError):
    """Raised when dividing by zero or when the divisor is missing."""

    def __init__(self, operands: tuple[float, ...]) -> None:
        super().__init__("Division by zero or missing second operand", operands)
        self.operands = operands


class OperandCountError(CalculatorError):
    """Raised when an operation receives fewer operands than it needs."""

    def __init__(self, operation: str, required: int, given: int) -> None:
        super().__init__(
            f"{operation} requires {required} operand(s), got {given}", None
        )
        self.operation = operation
        self.required = required
        self.given = given


class ConfigurationError(CalculatorError):
    """Raised when settings cannot be resolved."""

    def __init__(self, setting: str, value: Any) -> None:
        super().__init__(f"Invalid value for {setting}", value)
        self.setting = setting


class EndOfInput(CalculatorError):
    """Raised when the console input stream is exhausted."""

    def __init__(self) -> None:
        super().__init__("End of input")
