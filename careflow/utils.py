import math
import sys
import warnings

LARGE_FINITE = sys.float_info.max


class ParameterClampWarning(UserWarning):
    """A probability-typed parameter was pushed outside [0, 1] and clamped."""


class NumericSanitizationWarning(RuntimeWarning):
    """A NaN or infinite value was replaced by a finite sentinel."""


def clamp(value, low=0.0, high=1.0):
    return max(low, min(high, value))


def sanitize_value(value, name='value'):
    """NaN -> 0, +/-inf -> +/-LARGE_FINITE. Anything finite passes through."""
    if math.isnan(value):
        warnings.warn(f"Sanitizing NaN for {name}, defaulting to 0.", NumericSanitizationWarning, stacklevel=2)
        return 0.0
    if math.isinf(value):
        warnings.warn(f"Sanitizing infinity for {name}, clamping.", NumericSanitizationWarning, stacklevel=2)
        return LARGE_FINITE if value > 0 else -LARGE_FINITE
    return value


def competing_outflows(stock, rates):
    """
    Split `stock` across concurrent fractional outflows.

    rates: sequence of weekly fractions, all applied to the same snapshot.
    If they sum above 1 they are normalized so the stock is exactly emptied,
    otherwise the remainder stays put.
    Returns (amounts, remainder).
    """
    total_rate = sum(rates)
    if total_rate > 1.0:
        rates = [r / total_rate for r in rates]
    amounts = [stock * r for r in rates]
    remainder = max(0.0, stock - sum(amounts))
    return amounts, remainder
