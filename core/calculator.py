# =============================================================================
# core/calculator.py  —  Arithmetic tools
# =============================================================================
#
# The only tools that never touch the network.  Results come back as text
# so every tool on the server has the same output shape.
# =============================================================================

import operator

from core.formatting import format_number

OPERATIONS = {
    "add": operator.add,
    "subtract": operator.sub,
    "multiply": operator.mul,
    "divide": operator.truediv,
}


def add(a: float, b: float) -> str:
    """Sum of two numbers, as text."""
    return format_number(a + b)


def calculate(operation: str, a: float, b: float) -> str:
    """Apply one of add/subtract/multiply/divide to a and b.

    Division by zero is reported as an error message, not raised.
    """
    func = OPERATIONS.get(operation)
    if func is None:
        return f"Error: Unknown operation '{operation}'"
    if operation == "divide" and b == 0:
        return "Error: Cannot divide by zero"
    return format_number(func(a, b))
