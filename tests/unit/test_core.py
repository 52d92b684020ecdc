"""End-to-end session tests for the application loop."""

import dataclasses
import math

import pytest

from menucalc import (
    ENGLISH,
    RUSSIAN,
    Application,
    Arity,
    CalculationRecord,
    LoopState,
    Operation,
    OperationRegistry,
    add,
    format_value,
    power,
)

SELECT = ENGLISH.select_prompt


class TestSessions:
    """Scripted sessions through the whole show/select/collect/report cycle."""

    def test_addition(self, run_session):
        app, output = run_session("1", "3", "4")
        assert "Result: 7\n" in output
        assert str(app.last_record) == "addition = 7"

    def test_addition_full_transcript(self, run_session, expected_menu):
        _, output = run_session("1", "3", "4", "0")
        assert output == (
            expected_menu
            + SELECT
            + ENGLISH.first_number_prompt
            + ENGLISH.second_number_prompt
            + "Result: 7\n"
            + expected_menu
            + SELECT
        )

    def test_division_by_zero(self, run_session):
        app, output = run_session("4", "10", "0")
        assert "Error: Division by zero or missing second operand.\n" in output
        assert "Result:" not in output
        assert app.last_record.error == ENGLISH.division_by_zero
        assert app.last_record.value is None

    def test_square_root(self, run_session):
        app, output = run_session("6", "16")
        assert f"{ENGLISH.number_prompt}Result: 4\n" in output
        assert ENGLISH.first_number_prompt not in output
        assert app.last_record.value == 4

    def test_exit_immediately(self, run_session, expected_menu):
        app, output = run_session("0", "1", "3", "4")
        assert output == expected_menu + SELECT
        assert app.last_record is None
        assert app.completed_cycles == 0

    def test_out_of_range_is_exit(self, run_session, expected_menu):
        app, output = run_session("13", "1", "2")
        assert output == expected_menu + SELECT
        assert "Error" not in output
        assert app.completed_cycles == 0

    def test_operand_retry(self, run_session):
        _, output = run_session("6", "abc", "25")
        assert output.count(ENGLISH.invalid_operand) == 1
        assert (
            f"{ENGLISH.number_prompt}{ENGLISH.invalid_operand}\n"
            f"{ENGLISH.number_prompt}Result: 5\n"
        ) in output

    def test_invalid_selection_reprompts_without_menu(
        self, run_session, expected_menu
    ):
        app, output = run_session("one", "2", "10", "4")
        assert output.startswith(
            expected_menu + SELECT + "Error: Invalid number format.\n" + SELECT
        )
        assert output.count(ENGLISH.banner) == 2
        assert app.last_record.value == 6

    def test_loop_continues_after_error(self, run_session):
        app, output = run_session("4", "1", "0", "3", "2", "5")
        assert output.index("Error: Division") < output.index("Result: 10\n")
        assert app.completed_cycles == 2
        assert app.last_record.value == 10

    def test_power(self, run_session):
        _, output = run_session("5", "2", "10")
        assert "Result: 1024\n" in output

    def test_negative_zero_result(self, run_session):
        _, output = run_session("3", "-1", "0")
        assert "Result: -0\n" in output

    def test_cotangent_at_zero_reports_infinity(self, run_session):
        _, output = run_session("10", "0")
        assert "Result: inf\n" in output

    def test_square_root_of_negative_reports_nan(self, run_session):
        _, output = run_session("6", "-1")
        assert "Result: nan\n" in output

    def test_end_of_input_during_operands(self, run_session):
        app, output = run_session("1", "3")
        assert app.last_record is None
        assert app.state is LoopState.TERMINATED
        assert "Result" not in output


class TestFailureClassification:
    """Errors raised by operations are reported and the loop continues."""

    def _run(self, operation, make_console, *lines, messages=ENGLISH):
        console, stdout = make_console(*lines)
        app = Application(OperationRegistry([operation]), console, messages)
        app.run()
        return app, stdout.getvalue()

    def test_generic_fault_uses_generic_message(self, make_console):
        def explode(numbers):
            raise RuntimeError("boom")

        operation = Operation("explode", "Explode", Arity.UNARY, explode)
        app, output = self._run(operation, make_console, "1", "2")
        assert "Error: Calculation failed.\n" in output
        assert "boom" not in output
        assert app.last_record.error == ENGLISH.computation_failed
        assert app.state is LoopState.TERMINATED

    def test_operand_count_error_is_reported(self, make_console):
        # A binary compute registered as unary receives a single operand
        operation = Operation("power", "Power", Arity.UNARY, power)
        _, output = self._run(operation, make_console, "1", "2")
        assert "Error: Power requires 2 operand(s), got 1.\n" in output

    def test_operand_count_error_is_localized(self, make_console):
        operation = Operation("power", "Степень", Arity.UNARY, power)
        _, output = self._run(
            operation, make_console, "1", "2", messages=RUSSIAN
        )
        assert (
            "Ошибка: Степень: требуется операндов: 2, получено: 1.\n" in output
        )
        assert "requires" not in output

    def test_generic_fault_is_logged(self, make_console, caplog):
        def explode(numbers):
            raise ValueError("bad domain")

        operation = Operation("explode", "Explode", Arity.UNARY, explode)
        self._run(operation, make_console, "1", "2")
        assert "bad domain" in caplog.text


class TestApplicationState:
    """Tests for Application state and the last cycle's outcome."""

    def test_starts_showing_menu(self, registry, make_console):
        console, _ = make_console()
        app = Application(registry, console, ENGLISH)
        assert app.state is LoopState.SHOWING_MENU

    def test_run_returns_nothing(self, registry, make_console):
        console, _ = make_console("1", "1", "1")
        assert Application(registry, console, ENGLISH).run() is None

    def test_only_latest_outcome_is_kept(self, registry, make_console):
        console, _ = make_console(*(["1", "3", "4"] * 500), "2", "9", "4")
        app = Application(registry, console, ENGLISH)
        app.run()
        assert app.completed_cycles == 501
        assert app.last_record == CalculationRecord("subtraction", value=5.0)

    def test_record_holds_no_operands(self):
        fields = {f.name for f in dataclasses.fields(CalculationRecord)}
        assert fields == {"operation", "value", "error"}

    def test_custom_registry(self, make_console):
        operation = Operation("addition", "Plus", Arity.BINARY, add)
        console, stdout = make_console("1", "0.5", "0.25")
        Application(OperationRegistry([operation]), console, ENGLISH).run()
        assert stdout.getvalue().startswith(f"{ENGLISH.banner}\n1.Plus\n")
        assert "Result: 0.75\n" in stdout.getvalue()


class TestFormatValue:
    """Tests for result formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (7.0, "7"),
            (-3.0, "-3"),
            (0.0, "0"),
            (-0.0, "-0"),
            (0.5, "0.5"),
            (1e300, "1e+300"),
            (1e16, "1e+16"),
            (math.inf, "inf"),
            (-math.inf, "-inf"),
            (math.nan, "nan"),
        ],
    )
    def test_format(self, value, expected):
        assert format_value(value) == expected

    def test_record_str_on_error(self):
        record = CalculationRecord("division", error="nope")
        assert str(record) == "division = nope"
        assert not record.succeeded
