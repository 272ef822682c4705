"""Math utility functions for layout and hit-testing."""

from typing import Union

Number = Union[int, float]


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp a value between min and max.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def centered_offset(index: int, count: int, step: float) -> float:
    """Offset of item ``index`` in a row of ``count`` items spaced ``step`` apart, centered on zero.

    Args:
        index: Position of the item in the row
        count: Number of items in the row
        step: Distance between neighbouring items (may be negative)

    Returns:
        Signed offset from the row's center
    """
    return -((count - 1) / 2) * step + index * step

