"""
Services Package

Business logic modules for the kitchen orders application.
"""

from .errors import (
    ServiceError,
    ValidationError,
    ReferentialIntegrityError,
    PersistenceError,
    NotFoundError,
    Redirect,
)

from .signals import views_invalidated, invalidate_views

from .totals import (
    line_total,
    order_total,
    totals_match,
)

from .suppliers import (
    create_supplier,
    update_supplier,
    delete_supplier,
)

from .ingredients import (
    create_ingredient,
    update_ingredient,
    delete_ingredient,
)

from .orders import (
    can_transition,
    next_action,
    create_order,
    update_order_status,
    delete_order,
)

from .order_templates import (
    create_template,
    delete_template,
)

from .dashboard import get_dashboard_data

from .views import (
    cache,
    suppliers_page,
    ingredients_page,
    orders_page,
    order_detail,
    new_order_page,
    templates_page,
    new_template_page,
)

from .forms import OrderFormState, TemplateFormState

__all__ = [
    # Errors
    'ServiceError',
    'ValidationError',
    'ReferentialIntegrityError',
    'PersistenceError',
    'NotFoundError',
    'Redirect',
    # Signals
    'views_invalidated',
    'invalidate_views',
    # Totals
    'line_total',
    'order_total',
    'totals_match',
    # Suppliers
    'create_supplier',
    'update_supplier',
    'delete_supplier',
    # Ingredients
    'create_ingredient',
    'update_ingredient',
    'delete_ingredient',
    # Orders
    'can_transition',
    'next_action',
    'create_order',
    'update_order_status',
    'delete_order',
    # Templates
    'create_template',
    'delete_template',
    # Dashboard
    'get_dashboard_data',
    # Views
    'cache',
    'suppliers_page',
    'ingredients_page',
    'orders_page',
    'order_detail',
    'new_order_page',
    'templates_page',
    'new_template_page',
    # Forms
    'OrderFormState',
    'TemplateFormState',
]
