from __future__ import annotations


def format_number(value: float | int) -> str:
    """
    Render a measurement the way a person would write it.

    Whole values drop the trailing ``.0`` (``30.0`` -> ``"30"``), fractional
    values keep their shortest representation (``25.5`` -> ``"25.5"``).
    """
    if isinstance(value, bool):
        raise TypeError("format_number expects a number, not a bool")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_fixed(value: float, digits: int = 1) -> str:
    if digits < 0:
        raise ValueError("digits must be non-negative")
    return f"{value:.{digits}f}"
