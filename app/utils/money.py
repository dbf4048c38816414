from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, NamedTuple, Union

CENT = Decimal("0.01")

Number = Union[Decimal, int, float, str]


class TaxBreakdown(NamedTuple):
    subtotal: Decimal
    tax: Decimal
    total: Decimal


def to_money(value: Number) -> Decimal:
    """Round to cents, half up. Floats go through ``str`` to avoid binary noise."""
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[Number]) -> Decimal:
    return to_money(sum((to_money(v) for v in values), Decimal("0")))


def tax_breakdown(total: Number, rate: Number) -> TaxBreakdown:
    """
    Split a tax-inclusive total into subtotal and tax.

    subtotal = total / (1 + rate), rounded half up to cents
    tax      = total - subtotal

    The tax absorbs the rounding, so subtotal + tax == total always holds.
    """
    total = to_money(total)
    subtotal = to_money(total / (Decimal("1") + Decimal(str(rate))))
    return TaxBreakdown(subtotal=subtotal, tax=total - subtotal, total=total)
