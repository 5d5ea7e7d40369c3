"""
Order Totals Service

Line and order total arithmetic. The order form and the order service
both go through these functions so the total shown while editing is the
total that gets stored.
"""

from decimal import Decimal, ROUND_HALF_UP

from constants import MAX_AMOUNT
from utils import parse_decimal

ZERO = Decimal('0')
CENT = Decimal('0.01')
QUANTITY_STEP = Decimal('0.001')


def to_amount(value):
    """Parse a number for arithmetic; absent or invalid input counts as zero."""
    return parse_decimal(value, default=ZERO, min_val=-MAX_AMOUNT, max_val=MAX_AMOUNT)


def round_quantity(value):
    return to_amount(value).quantize(QUANTITY_STEP, rounding=ROUND_HALF_UP)


def round_price(value):
    return to_amount(value).quantize(CENT, rounding=ROUND_HALF_UP)


def line_total(quantity, unit_price):
    """quantity x unit_price, with inputs at stored precision, rounded to cents."""
    total = round_quantity(quantity) * round_price(unit_price)
    return total.quantize(CENT, rounding=ROUND_HALF_UP)


def order_total(lines):
    """Sum of line totals for an iterable of (quantity, unit_price) pairs."""
    return sum((line_total(qty, price) for qty, price in lines), ZERO).quantize(CENT)


def totals_match(claimed, expected):
    """True when a caller-supplied total agrees with expected to the cent."""
    claimed = parse_decimal(claimed)
    if claimed is None:
        return False
    return claimed.quantize(CENT, rounding=ROUND_HALF_UP) == expected
