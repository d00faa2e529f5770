import pytest

from gridcalc.app import Calculator


def press_all(calculator, labels):
    for label in labels:
        calculator.press(label)
    return calculator.text


def test_new_calculator_shows_zero():
    calculator = Calculator()
    assert calculator.text == "0"
    assert calculator.parentheses == []


def test_pressing_builds_expression():
    calculator = Calculator()
    assert press_all(calculator, "2+3") == "2+3"


def test_submit_shows_result_and_clears_parentheses():
    calculator = Calculator()
    press_all(calculator, "(2+3")
    assert calculator.parentheses == ["0"]
    assert calculator.submit() == "5"
    assert calculator.parentheses == []


def test_equal_button_submits():
    calculator = Calculator()
    press_all(calculator, "2^3=")
    assert calculator.text == "8"


def test_fractional_result():
    calculator = Calculator()
    press_all(calculator, "1/4=")
    assert calculator.text == "0.25"


def test_large_result_uses_exponent_form():
    calculator = Calculator()
    calculator.text = "10^21"
    assert calculator.submit() == "1e+21"


def test_division_by_zero_shows_infinity():
    calculator = Calculator()
    calculator.text = "2/0"
    assert calculator.submit() == "+Inf"


def test_clear_resets_state():
    calculator = Calculator()
    press_all(calculator, "(7+")
    assert calculator.press("C") == "0"
    assert calculator.parentheses == []


def test_clear_method():
    calculator = Calculator()
    press_all(calculator, "(9")
    assert calculator.clear() == "0"
    assert calculator.parentheses == []


def test_edit_empty_gives_zero():
    calculator = Calculator()
    assert calculator.edit("") == "0"


def test_edit_rejects_repeated_operator():
    calculator = Calculator()
    assert calculator.edit("5+") == "5+"
    assert calculator.edit("5++") == "5+"


def test_edit_accepts_digit():
    calculator = Calculator()
    assert calculator.edit("125") == "125"


def test_result_round_trips_through_submit():
    calculator = Calculator()
    press_all(calculator, "6/2=")
    first = calculator.text
    assert calculator.submit() == first


def test_submit_bad_number_raises():
    calculator = Calculator()
    calculator.text = "1..2"
    with pytest.raises(ValueError):
        calculator.submit()