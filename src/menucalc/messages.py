"""User-facing text for each supported console language."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Messages:
    """Banner, prompts, templates and operation display names."""

    banner: str
    select_prompt: str
    number_prompt: str
    first_number_prompt: str
    second_number_prompt: str
    result: str
    error: str
    invalid_format: str
    invalid_operand: str
    division_by_zero: str
    computation_failed: str
    operand_count: str
    operation_names: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "operation_names", MappingProxyType(dict(self.operation_names))
        )

    def format_result(self, value: str) -> str:
        return self.result.format(value=value)

    def format_error(self, message: str) -> str:
        return self.error.format(message=message)

    def format_operand_count(
        self, operation: str, required: int, given: int
    ) -> str:
        return self.operand_count.format(
            operation=operation, required=required, given=given
        )


ENGLISH = Messages(
    banner="======== CALCULATOR ==========",
    select_prompt="Select an operation: ",
    number_prompt="Enter a number: ",
    first_number_prompt="Enter the first number: ",
    second_number_prompt="Enter the second number: ",
    result="Result: {value}",
    error="Error: {message}",
    invalid_format="Invalid number format.",
    invalid_operand="Error: Invalid number format. Please enter the number again.",
    division_by_zero="Division by zero or missing second operand.",
    computation_failed="Calculation failed.",
    operand_count="{operation} requires {required} operand(s), got {given}.",
    operation_names={
        "addition": "Addition",
        "subtraction": "Subtraction",
        "multiplication": "Multiplication",
        "division": "Division",
        "power": "Power",
        "square_root": "Square root",
        "sine": "Sine",
        "cosine": "Cosine",
        "tangent": "Tangent",
        "cotangent": "Cotangent",
        "natural_logarithm": "Natural logarithm (ln)",
        "decimal_logarithm": "Decimal logarithm (log10)",
    },
)

RUSSIAN = Messages(
    banner="======== КАЛЬКУЛЯТОР ==========",
    select_prompt="Выберите действие: ",
    number_prompt="Введите число: ",
    first_number_prompt="Введите первое число: ",
    second_number_prompt="Введите второе число: ",
    result="Результат: {value}",
    error="Ошибка: {message}",
    invalid_format="Неверный формат числа.",
    invalid_operand=(
        "Ошибка: Неверный формат числа. Пожалуйста, введите число снова."
    ),
    division_by_zero="Деление на ноль или отсутствие второго числа.",
    computation_failed="Не удалось выполнить вычисление.",
    operand_count=(
        "{operation}: требуется операндов: {required}, получено: {given}."
    ),
    operation_names={
        "addition": "Сложение",
        "subtraction": "Вычитание",
        "multiplication": "Умножение",
        "division": "Деление",
        "power": "Возведение в степень",
        "square_root": "Квадратный корень",
        "sine": "Синус",
        "cosine": "Косинус",
        "tangent": "Тангенс",
        "cotangent": "Котангенс",
        "natural_logarithm": "Натуральный логарифм (ln)",
        "decimal_logarithm": "Десятичный логарифм (log10)",
    },
)

CATALOGS: Mapping[str, Messages] = MappingProxyType({"en": ENGLISH, "ru": RUSSIAN})
