import math


def scaled_percent(done: int, total: int, span: int = 100) -> int:
    """Return round(done / total * span), rounding halves up."""
    return math.floor(done / total * span + 0.5)
