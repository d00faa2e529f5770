import pytest

from gridcalc.display import resolve_expression, update_display


@pytest.mark.parametrize(
    ("label", "current_text", "stack", "want"),
    [
        ("5", "12", [], "125"),
        ("7", "0", [], "7"),
        (".", "+", [], "+"),
        (".", "5", [], "5."),
        ("+", "5", [], "5+"),
        ("+", "+", [], "+"),
        ("(", "0", [], "("),
        (")", "5", ["test"], "5)"),
        (")", "5", [], "5"),
    ],
    ids=[
        "append number to non-zero",
        "replace zero with number",
        "no dot after operator",
        "dot after number",
        "operator after number",
        "no operator after operator",
        "left parenthesis",
        "right parenthesis with stack",
        "no right parenthesis if stack empty",
    ],
)
def test_update_display(label, current_text, stack, want):
    assert update_display(label, current_text, stack) == want


def test_right_parenthesis_pops_stack():
    stack = ["test"]
    update_display(")", "5", stack)
    assert stack == []


def test_left_parenthesis_pushes_current_text():
    stack = []
    assert update_display("(", "5+", stack) == "5+("
    assert stack == ["5+"]


def test_left_parenthesis_after_number_is_ignored_but_recorded():
    stack = []
    assert update_display("(", "5", stack) == "5"
    assert stack == ["5"]


def test_right_parenthesis_after_operator_keeps_stack():
    stack = ["test"]
    assert update_display(")", "5+", stack) == "5+"
    assert stack == ["test"]


def test_empty_text_counts_as_zero():
    assert update_display("7", "", []) == "7"
    assert update_display("+", "", []) == "0+"


def test_operator_after_closing_parenthesis():
    assert update_display("*", "(5)", []) == "(5)*"


@pytest.mark.parametrize(
    ("expression", "want"),
    [("2+3", 5), ("2*3", 6), ("6/2", 3), ("2^3", 8), ("(2+3)*4", 20)],
)
def test_resolve_expression(expression, want):
    assert resolve_expression(expression) == want


def test_resolve_expression_rejects_bad_number():
    with pytest.raises(ValueError):
        resolve_expression("1..2+3")