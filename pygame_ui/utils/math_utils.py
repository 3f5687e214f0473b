"""Math utility functions for layout and hover smoothing."""

from typing import List, Union

Number = Union[int, float]


def lerp(start: Number, end: Number, t: float) -> float:
    """Linear interpolation between start and end.

    Args:
        start: Starting value
        end: Ending value
        t: Interpolation factor (0.0 to 1.0)

    Returns:
        Interpolated value
    """
    return start + (end - start) * t


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp a value between min and max."""
    return max(min_val, min(max_val, value))


def row_positions(count: int, center_x: float, item_width: float, gap: float) -> List[float]:
    """Left x coordinates for `count` items laid out in a row centered on center_x.

    Args:
        count: Number of items
        center_x: Horizontal center of the row
        item_width: Width of each item
        gap: Space between neighbouring items

    Returns:
        One x per item, left to right
    """
    if count <= 0:
        return []
    total = count * item_width + (count - 1) * gap
    left = center_x - total / 2
    return [left + i * (item_width + gap) for i in range(count)]
