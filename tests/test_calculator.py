"""Tests for the calculator engine state machine."""

import math

import pytest

from core import (
    ButtonPress,
    CalculatorEngine,
    CalculatorState,
    Operator,
    apply_operator,
    format_result,
    handle,
    parse_entry,
)


def digits(text):
    return [ButtonPress.decimal() if c == "." else ButtonPress.digit(c) for c in text]


ADD = ButtonPress.operator(Operator.ADD)
SUB = ButtonPress.operator(Operator.SUBTRACT)
MUL = ButtonPress.operator(Operator.MULTIPLY)
DIV = ButtonPress.operator(Operator.DIVIDE)
EQ = ButtonPress.equals()
CLEAR = ButtonPress.clear()


@pytest.fixture
def engine():
    return CalculatorEngine()


# --- Digit entry ---

def test_initial_display_is_zero(engine):
    assert engine.display == "0"
    assert engine.state.current_entry == ""
    assert engine.state.accumulated_value is None
    assert engine.state.pending_operator is None


@pytest.mark.parametrize("typed, expected", [
    ("5", "5"),
    ("05", "5"),
    ("123", "123"),
    ("100", "100"),
    ("007", "7"),
])
def test_leading_zero_collapsed(engine, typed, expected):
    engine.press(CLEAR)
    engine.press_all(digits(typed))
    assert engine.state.current_entry == expected
    assert engine.display == expected


def test_second_decimal_is_ignored(engine):
    engine.press_all(digits("1.2.3"))
    assert engine.state.current_entry == "1.23"
    assert engine.state.current_entry.count(".") == 1


def test_decimal_on_empty_buffer_keeps_leading_dot(engine):
    assert engine.press(ButtonPress.decimal()) == "."
    engine.press_all(digits("5"))
    assert engine.display == ".5"
    engine.press_all([ADD, *digits("1"), EQ])
    assert engine.display == "1.5"


# --- Arithmetic ---

@pytest.mark.parametrize("op, a, b, expected", [
    (Operator.ADD, 2, 3, 5),
    (Operator.SUBTRACT, 2, 3, -1),
    (Operator.MULTIPLY, 4, 2.5, 10),
    (Operator.DIVIDE, 15, 4, 3.75),
])
def test_apply_operator(op, a, b, expected):
    assert apply_operator(op, a, b) == pytest.approx(expected)


def test_divide_by_zero_is_not_an_error():
    assert apply_operator(Operator.DIVIDE, 1.0, 0.0) == math.inf
    assert apply_operator(Operator.DIVIDE, -1.0, 0.0) == -math.inf
    assert math.isnan(apply_operator(Operator.DIVIDE, 0.0, 0.0))


def test_multiply_overflow_is_infinite():
    assert apply_operator(Operator.MULTIPLY, 1e308, 10.0) == math.inf


@pytest.mark.parametrize("value, expected", [
    (8.0, "8"),
    (0.5, "0.5"),
    (1 / 3, "0.333333"),
    (1e20, "1e+20"),
    (-2.0, "-2"),
    (math.inf, "inf"),
    (math.nan, "nan"),
])
def test_format_result(value, expected):
    assert format_result(value) == expected


@pytest.mark.parametrize("text, expected", [
    ("5", 5.0),
    (".5", 0.5),
    ("5.", 5.0),
    ("", None),
    (".", None),
    ("inf", None),
    ("1e5", None),
])
def test_parse_entry(text, expected):
    assert parse_entry(text) == expected


# --- Scenarios ---

def test_simple_addition(engine):
    assert engine.press(ButtonPress.digit("5")) == "5"
    assert engine.press(ADD) == "5"
    assert engine.state.accumulated_value == 5
    assert engine.press(ButtonPress.digit("3")) == "3"
    assert engine.press(EQ) == "8"
    assert engine.state.current_entry == ""
    assert engine.state.pending_operator is None
    assert engine.state.is_resolved


def test_division_by_zero_displays_inf(engine):
    engine.press_all(digits("10"))
    assert engine.display == "10"
    engine.press(DIV)
    assert engine.state.pending_operator is Operator.DIVIDE
    assert engine.state.accumulated_value == 10
    assert engine.press(ButtonPress.digit("0")) == "0"
    assert engine.press(EQ) == "inf"


def test_chain_evaluates_left_to_right(engine):
    engine.press_all([*digits("2"), ADD, *digits("3"), MUL])
    assert engine.state.accumulated_value == 5
    assert engine.state.pending_operator is Operator.MULTIPLY
    assert engine.display == "5"
    engine.press_all([*digits("4"), EQ])
    assert engine.display == "20"


def test_operator_replaces_pending_operator(engine):
    engine.press_all([*digits("9"), ADD, SUB, *digits("4"), EQ])
    assert engine.display == "5"


def test_result_is_reused_by_next_operator(engine):
    engine.press_all([*digits("5"), ADD, *digits("3"), EQ])
    engine.press_all([MUL, *digits("2"), EQ])
    assert engine.display == "16"


def test_digit_after_result_starts_new_number(engine):
    engine.press_all([*digits("5"), ADD, *digits("3"), EQ])
    assert engine.press(ButtonPress.digit("7")) == "7"
    assert engine.state.accumulated_value == 8


def test_equals_without_operator_is_noop(engine):
    engine.press_all(digits("42"))
    engine.press(EQ)
    assert engine.display == "42"
    assert engine.state.current_entry == "42"


def test_equals_without_second_operand_is_noop(engine):
    engine.press_all([*digits("42"), ADD, EQ])
    assert engine.display == "42"
    assert engine.state.pending_operator is Operator.ADD


def test_lone_decimal_operand_is_skipped(engine):
    engine.press_all([*digits("6"), MUL, ButtonPress.decimal(), EQ])
    assert engine.state.pending_operator is Operator.MULTIPLY
    assert engine.state.accumulated_value == 6
    assert engine.display == "."


@pytest.mark.parametrize("sequence", [
    [],
    digits("12.5"),
    [*digits("3"), ADD],
    [*digits("3"), ADD, *digits("4"), EQ],
    [*digits("1"), DIV, *digits("0"), EQ],
])
def test_clear_resets_everything(engine, sequence):
    engine.press_all(sequence)
    assert engine.press(CLEAR) == "0"
    state = engine.state
    assert state.current_entry == ""
    assert state.accumulated_value is None
    assert state.pending_operator is None


def test_handle_returns_same_state():
    state = CalculatorState()
    assert handle(state, ButtonPress.digit("1")) is state
    assert state.display_text == "1"


# --- Invalid construction ---

@pytest.mark.parametrize("bad", ["12", "a", "", 5])
def test_invalid_digit_rejected(bad):
    with pytest.raises(ValueError):
        ButtonPress.digit(bad)


def test_unknown_press_kind_rejected():
    from core.buttons import ButtonPress as Press
    with pytest.raises(ValueError):
        handle(CalculatorState(), Press("backspace"))


def test_button_titles():
    assert ButtonPress.digit("7").title == "7"
    assert MUL.title == "×"
    assert MUL.glyph == "x"
    assert DIV.title == "÷"
    assert EQ.title == "="
    assert CLEAR.title == "C"
    assert ButtonPress.decimal().title == "."
