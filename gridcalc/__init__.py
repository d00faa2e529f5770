"""A desktop calculator with a shunting-yard expression evaluator."""

__version__ = "0.1.0"

__all__ = ["app", "display", "expression", "operations", "tokens"]