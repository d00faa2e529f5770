"""Calculator state and its button-grid window."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Sequence

from .display import resolve_expression, update_display

BUTTON_ROWS = (
    ("C", "(", ")", "^"),
    ("7", "8", "9", "/"),
    ("4", "5", "6", "*"),
    ("1", "2", "3", "-"),
    ("0", ".", "=", "+"),
)


def _format_result(value: float) -> str:
    """Format a float the way the display shows results: shortest digits."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    scientific_exponent = exponent + len(digits) - 1
    prefix = "-" if sign else ""
    if scientific_exponent < -4 or scientific_exponent >= 21:
        mantissa = str(digits[0])
        rest = "".join(map(str, digits[1:]))
        if rest:
            mantissa += "." + rest
        exp_sign = "+" if scientific_exponent >= 0 else "-"
        return f"{prefix}{mantissa}e{exp_sign}{abs(scientific_exponent):02d}"
    return format(Decimal(repr(abs(value))).normalize(), "f").join((prefix, ""))


class Calculator:
    """The display text and open parentheses of one calculator."""

    def __init__(self) -> None:
        self.text = "0"
        self.parentheses: list[str] = []

    def press(self, label: str) -> str:
        """Apply a button press and return the new display text."""
        if label == "C":
            return self.clear()
        if label == "=":
            return self.submit()
        self.text = update_display(label, self.text, self.parentheses)
        return self.text

    def edit(self, text: str) -> str:
        """Apply a typed change to the display, checking its last character."""
        if not text:
            self.text = "0"
        else:
            self.text = update_display(text[-1], text[:-1], self.parentheses)
        return self.text

    def clear(self) -> str:
        """Reset the display to 0 and forget open parentheses."""
        self.text = "0"
        self.parentheses = []
        return self.text

    def submit(self) -> str:
        """Replace the display with the value of its expression."""
        result = resolve_expression(self.text)
        self.text = _format_result(result)
        self.parentheses = []
        return self.text


def build_window(calculator: Calculator):
    """Create the window holding the display entry and the button grid."""
    import tkinter as tk

    root = tk.Tk()
    root.title("GoCalc")
    root.geometry("280x260")

    display = tk.StringVar(value=calculator.text)
    updating = False

    def show(text: str) -> None:
        nonlocal updating
        updating = True
        display.set(text)
        updating = False

    def on_change(*_args) -> None:
        if updating:
            return
        show(calculator.edit(display.get()))
        entry.icursor(tk.END)

    def on_press(label: str) -> None:
        show(calculator.press(label))

    entry = tk.Entry(root, textvariable=display, justify="right")
    entry.grid(row=0, column=0, columnspan=4, sticky="nsew")
    entry.bind("<Return>", lambda _event: on_press("="))
    display.trace_add("write", on_change)

    for row_index, row in enumerate(BUTTON_ROWS, start=1):
        root.rowconfigure(row_index, weight=1)
        for column_index, label in enumerate(row):
            button = tk.Button(
                root, text=label, command=lambda label=label: on_press(label)
            )
            button.grid(row=row_index, column=column_index, sticky="nsew")
    for column_index in range(4):
        root.columnconfigure(column_index, weight=1)

    return root


def main(argv: Sequence[str] | None = None) -> int:
    """Open the calculator window and run until it is closed."""
    window = build_window(Calculator())
    window.mainloop()
    return 0