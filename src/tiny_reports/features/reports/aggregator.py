"""Totals over the visible items of a report."""
from decimal import Decimal
from typing import Iterable

from .schemas import Item, Number, numeric_value


def total(visible_items: Iterable[Item]) -> Number:
    """
    Sums the value of the visible items.

    Returns 0 for an empty sequence. Items without a numeric value are skipped
    and the numeric type of the values is carried through unchanged (no
    rounding). When any value is a Decimal, floats are converted through their
    text form so the sum stays a Decimal.
    """
    values = [numeric_value(item.value) for item in visible_items]
    values = [v for v in values if v is not None]
    if any(isinstance(v, Decimal) for v in values):
        values = [v if isinstance(v, Decimal) else Decimal(str(v)) for v in values]
    return sum(values, 0)
