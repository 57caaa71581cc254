import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero"""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def format_number(value) -> str:
    """Render 5.0 as '5' and 5.25 as '5.25' for user-facing text"""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return str(round(value, 2))
