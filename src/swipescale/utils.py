def clamp(value: float, low: float, high: float) -> float:
    """Pin value into [low, high]."""
    return max(low, min(high, value))

def ease_out_cubic(t: float) -> float:
    """Cubic ease-out: fast start, decelerates to a stop at t = 1."""
    return 1.0 - (1.0 - t) ** 3
