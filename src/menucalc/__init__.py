"""
Interactive menu-driven calculator.

Operations live in an ordered registry and are picked by their 1-based
menu number; console I/O, message catalogs and the application loop are
kept apart from the arithmetic so each can be tested on its own.
"""

from menucalc.config import Settings, load_settings
from menucalc.console import Console, InputCollector
from menucalc.core import Application, CalculationRecord, LoopState, format_value
from menucalc.exceptions import (
    CalculatorError,
    ConfigurationError,
    DivisionByZeroError,
    EndOfInput,
    InvalidFormatError,
    OperandCountError,
)
from menucalc.menu import MenuPresenter, SelectionResolver, resolve
from menucalc.messages import CATALOGS, ENGLISH, RUSSIAN, Messages
from menucalc.operations import (
    Arity,
    Operation,
    OperationRegistry,
    add,
    build_registry,
    cosine,
    cotangent,
    decimal_logarithm,
    divide,
    multiply,
    natural_logarithm,
    power,
    sine,
    square_root,
    subtract,
    tangent,
)
from menucalc.validators import parse_integer, parse_number, require_operands

__all__ = [
    "CATALOGS",
    "ENGLISH",
    "RUSSIAN",
    "Application",
    "Arity",
    "CalculationRecord",
    "CalculatorError",
    "ConfigurationError",
    "Console",
    "DivisionByZeroError",
    "EndOfInput",
    "InputCollector",
    "InvalidFormatError",
    "LoopState",
    "MenuPresenter",
    "Messages",
    "OperandCountError",
    "Operation",
    "OperationRegistry",
    "SelectionResolver",
    "Settings",
    "add",
    "build_registry",
    "cosine",
    "cotangent",
    "decimal_logarithm",
    "divide",
    "format_value",
    "load_settings",
    "multiply",
    "natural_logarithm",
    "parse_integer",
    "parse_number",
    "power",
    "require_operands",
    "resolve",
    "sine",
    "square_root",
    "subtract",
    "tangent",
]

__version__ = "0.1.0"
