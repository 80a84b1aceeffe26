import math

DEFAULT_PRECISION = 3
MAX_DECIMALS = 10


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Formats `value` in fixed-point notation with a number of decimal places
    that depends on its magnitude: ceil(-log10(|value|)) + `precision`,
    limited to the range 0...10. This gives about `precision` significant
    digits for small and large numbers alike. Zero is formatted without
    decimals.
    """
    if not math.isfinite(value):
        return str(value)
    if value == 0:
        # also covers -0.0
        return '0'
    decimals = math.ceil(-math.log10(abs(value))) + precision
    decimals = min(max(decimals, 0), MAX_DECIMALS)
    return f'{value:.{decimals}f}'
