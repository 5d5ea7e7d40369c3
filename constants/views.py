"""
View Keys

Logical names of the cached read views. Services name the views a
mutation makes stale; the view cache maps them to cache entries.
"""

SUPPLIERS_VIEW = 'suppliers'
INGREDIENTS_VIEW = 'ingredients'
ORDERS_VIEW = 'orders'
NEW_ORDER_VIEW = 'orders:new'
TEMPLATES_VIEW = 'templates'
NEW_TEMPLATE_VIEW = 'templates:new'


def order_view(order_id):
    """View key for a single order's detail page."""
    return f'order:{order_id}'


# Evicts every cached order detail page; also the cache key of their index
ORDER_DETAILS_VIEW = 'order:*'
