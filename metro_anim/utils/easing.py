from __future__ import annotations


def ease_in_out_cubic(x: float) -> float:
    """Cubic ease in/out on [0,1]; used for viewport pans and zooms."""
    x = max(0.0, min(1.0, float(x)))
    if x < 0.5:
        return 4 * x * x * x
    return 1 - pow(-2 * x + 2, 3) / 2
