import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values.

    Python's ``round`` rounds halves to even, so 62.5 would become 62.
    """
    return int(math.floor(value + 0.5))


def percentage(part: float, whole: float) -> int:
    """Return ``part`` of ``whole`` as a whole percentage clamped to 0..100.

    An empty ``whole`` counts as 0%.
    """
    if whole <= 0:
        return 0
    return max(0, min(100, round_half_up(100 * part / whole)))
