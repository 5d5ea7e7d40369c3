"""
Constants Package

Whitelists, status tables and view keys shared across the application.
"""

from .validation import VALID_CATEGORIES, MAX_LENGTHS, MAX_AMOUNT
from .units import COMMON_UNITS
from .status import (
    DRAFT,
    SUBMITTED,
    RECEIVED,
    ORDER_STATUSES,
    INITIAL_STATUSES,
    STATUS_TRANSITIONS,
    NEXT_ACTIONS,
)
from .views import (
    SUPPLIERS_VIEW,
    INGREDIENTS_VIEW,
    ORDERS_VIEW,
    NEW_ORDER_VIEW,
    TEMPLATES_VIEW,
    NEW_TEMPLATE_VIEW,
    ORDER_DETAILS_VIEW,
    order_view,
)
