"""
Order Service

Creates orders with their items in one commit, changes order status
along the allowed transitions, and deletes orders.

Line totals are always recomputed here from quantity and unit price; a
caller-supplied total that disagrees rejects the order.
"""

import logging
from collections.abc import Mapping

from constants import (
    MAX_LENGTHS, MAX_AMOUNT, ORDER_STATUSES, INITIAL_STATUSES, STATUS_TRANSITIONS,
    NEXT_ACTIONS, ORDERS_VIEW, order_view,
)
from models import db, Order, OrderItem
from utils import clean_optional, parse_decimal, parse_int, get_field
from .errors import ValidationError, NotFoundError, Redirect, ok, service_action
from .ingredients import missing_ingredient_ids
from .signals import invalidate_views
from .totals import line_total, round_price, round_quantity, totals_match, ZERO

logger = logging.getLogger(__name__)


def can_transition(current, new):
    """True if an order in status `current` may move to `new`."""
    return new in STATUS_TRANSITIONS.get(current, ())


def next_action(status):
    """The single-step status action offered for an order, or None."""
    if status not in NEXT_ACTIONS:
        return None
    target, label = NEXT_ACTIONS[status]
    return {'status': target, 'label': label}


def _normalize_status(status):
    return (status or '').strip().lower()


def _parse_order_items(items):
    """
    Validate submitted order lines.

    Returns a list of dicts with ingredient_id, quantity, unit_price and
    the recomputed total_price.
    """
    if not items:
        raise ValidationError('Order must have at least one item')

    lines = []
    for raw in items:
        if not isinstance(raw, Mapping):
            raise ValidationError('Each item needs an ingredient')
        ingredient_id = parse_int(get_field(raw, 'ingredientId', 'ingredient_id'), min_val=1)
        if ingredient_id is None:
            raise ValidationError('Each item needs an ingredient')

        quantity = parse_decimal(raw.get('quantity'), max_val=MAX_AMOUNT)
        if quantity is None or round_quantity(quantity) <= 0:
            raise ValidationError('Item quantities must be greater than zero')

        unit_price = parse_decimal(get_field(raw, 'unitPrice', 'unit_price'),
                                   min_val=0, max_val=MAX_AMOUNT)
        if unit_price is None:
            raise ValidationError('Item unit prices must be non-negative amounts')

        total = line_total(quantity, unit_price)
        claimed = get_field(raw, 'totalPrice', 'total_price')
        if claimed not in (None, '') and not totals_match(claimed, total):
            raise ValidationError('Item total does not match quantity × unit price')

        lines.append({
            'ingredient_id': ingredient_id,
            'quantity': round_quantity(quantity),
            'unit_price': round_price(unit_price),
            'total_price': total,
        })

    if missing_ingredient_ids(line['ingredient_id'] for line in lines):
        raise ValidationError('Order contains an unknown ingredient')
    return lines


@service_action('Failed to create order')
def create_order(status, notes, items):
    """
    Create an order with all its items.

    On success raises Redirect to the new order's detail page.
    """
    lines = _parse_order_items(items)

    status = _normalize_status(status)
    if status not in INITIAL_STATUSES:
        raise ValidationError(f'Invalid order status: {status}')

    order = Order(
        status=status,
        notes=clean_optional(notes, max_length=MAX_LENGTHS['notes']),
        total_amount=sum((line['total_price'] for line in lines), ZERO),
    )
    order.items = [OrderItem(**line) for line in lines]
    db.session.add(order)
    db.session.commit()

    logger.info("Order created: %s (%s items, total %s)",
                order.id, len(lines), order.total_amount)
    invalidate_views(__name__, ORDERS_VIEW)
    raise Redirect('order_detail', message=f'Order #{order.id} created', order_id=order.id)


@service_action('Failed to update order status')
def update_order_status(order_id, status):
    status = _normalize_status(status)
    if status not in ORDER_STATUSES:
        raise ValidationError(f'Invalid order status: {status}')

    order = db.session.get(Order, order_id)
    if order is None:
        raise NotFoundError(f'Order {order_id} not found')

    if not can_transition(order.status, status):
        raise ValidationError(f'Cannot change order status from {order.status} to {status}')

    previous = order.status
    order.status = status
    db.session.commit()

    logger.info("Order %s status: %s -> %s", order_id, previous, status)
    invalidate_views(__name__, ORDERS_VIEW, order_view(order_id))
    return ok(status=status)


@service_action('Failed to delete order')
def delete_order(order_id):
    """Delete an order and its items, then raise Redirect to the order list."""
    order = db.session.get(Order, order_id)
    if order is None:
        raise NotFoundError(f'Order {order_id} not found')

    db.session.delete(order)
    db.session.commit()

    logger.info("Order deleted: %s", order_id)
    invalidate_views(__name__, ORDERS_VIEW, order_view(order_id))
    raise Redirect('orders_list', message=f'Order #{order_id} deleted')
