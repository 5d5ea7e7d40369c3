"""
Number Parsing Module

Parses decimals and ids from form and JSON input. Money and quantities
are handled as Decimal end to end.
"""

import re
from decimal import Decimal, InvalidOperation

# 1,234 or 12,345,678.90; any other comma (e.g. decimal comma '1,5') is rejected
THOUSANDS_PATTERN = re.compile(r'^[-+]?\d{1,3}(,\d{3})+(\.\d+)?$')


def parse_decimal(value, default=None, min_val=None, max_val=None):
    """
    Parse a Decimal from user input.

    Accepts str, int, float and Decimal. Floats go through str() so 3.5
    becomes Decimal('3.5') rather than its binary expansion. Blank,
    malformed, NaN and infinite input returns default; values outside
    [min_val, max_val] also return default. Commas are only accepted as
    thousands separators ('1,250.00'); '1,5' is malformed, not 15.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, float):
        value = str(value)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
        if ',' in value:
            if not THOUSANDS_PATTERN.match(value):
                return default
            value = value.replace(',', '')
    try:
        result = Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return default
    if not result.is_finite():
        return default
    if min_val is not None and result < min_val:
        return default
    if max_val is not None and result > max_val:
        return default
    return result


def parse_int(value, default=None, min_val=None):
    """Parse an integer id from user input, or return default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        result = int(str(value).strip())
    except (ValueError, TypeError):
        return default
    if min_val is not None and result < min_val:
        return default
    return result


def parse_decimal(value, default=None, min_val=None, max_val=None):
    """
    Parse a Decimal from user input.

    Accepts str, int, float and Decimal. Floats go through str() so 3.5
    becomes Decimal('3.5') rather than its binary expansion. Blank,
    malformed, NaN and infinite input returns default; values outside
    [min_val, max_val] also return default.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, float):
        value = str(value)
    if isinstance(value, str):
        value = value.strip().replace(',', '')
        if not value:
            return default
    try:
        result = Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return default
    if not result.is_finite():
        return default
    if min_val is not None and result < min_val:
        return default
    if max_val is not None and result > max_val:
        return default
    return result


def parse_int(value, default=None, min_val=None):
    """Parse an integer id from user input, or return default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        result = int(str(value).strip())
    except (ValueError, TypeError):
        return default
    if min_val is not None and result < min_val:
        return default
    return result
