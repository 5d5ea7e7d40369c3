"""
Dashboard Service

Read-only metrics for the home page: entity counts, spending in the
current month and the trailing week, the most recent orders and the
most ordered ingredients.

The dashboard never fails: any error is logged and an all-zero result
is returned instead.
"""

import logging
from datetime import datetime, timedelta
from decimal import Decimal

from flask import current_app
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from models import db, Supplier, Ingredient, Order, OrderItem

logger = logging.getLogger(__name__)


def empty_dashboard():
    """The dashboard shape with every metric zeroed."""
    return {
        'total_orders': 0,
        'total_ingredients': 0,
        'total_suppliers': 0,
        'monthly_spending': Decimal('0'),
        'weekly_spending': Decimal('0'),
        'recent_orders': [],
        'top_ingredients': [],
    }


def _as_decimal(value):
    if value is None:
        return Decimal('0')
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _count(model):
    return db.session.scalar(select(func.count(model.id))) or 0


def _spending_since(start):
    """Sum of order totals for orders created at or after start."""
    total = db.session.scalar(
        select(func.sum(Order.total_amount)).where(Order.created_at >= start)
    )
    return _as_decimal(total)


def _recent_orders(limit):
    orders = db.session.scalars(
        select(Order)
        .options(selectinload(Order.items))
        .order_by(Order.order_date.desc(), Order.id.desc())
        .limit(limit)
    ).all()
    return [order.to_dict() for order in orders]


def _top_ingredients(limit):
    """
    Ingredients with the most order lines.

    Each entry carries the line count, summed quantity and summed spend.
    Name and unit are looked up per result; an ingredient that no longer
    exists shows as 'Unknown'.
    """
    usage_count = func.count(OrderItem.id).label('usage_count')
    rows = db.session.execute(
        select(
            OrderItem.ingredient_id,
            usage_count,
            func.sum(OrderItem.quantity).label('total_quantity'),
            func.sum(OrderItem.total_price).label('total_spent'),
        )
        .group_by(OrderItem.ingredient_id)
        .order_by(usage_count.desc(), OrderItem.ingredient_id)
        .limit(limit)
    ).all()

    top = []
    for row in rows:
        ingredient = db.session.get(Ingredient, row.ingredient_id)
        top.append({
            'ingredient_id': row.ingredient_id,
            'name': ingredient.name if ingredient else 'Unknown',
            'unit': ingredient.unit if ingredient else '',
            'usage_count': row.usage_count,
            'total_quantity': _as_decimal(row.total_quantity),
            'total_spent': _as_decimal(row.total_spent),
        })
    return top


def get_dashboard_data(now=None):
    """Collect all dashboard metrics; degrade to empty_dashboard() on any error."""
    try:
        now = now or datetime.now()
        start_of_month = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        start_of_week = now - timedelta(days=7)

        recent_limit = current_app.config.get('DASHBOARD_RECENT_ORDERS', 5)
        top_limit = current_app.config.get('DASHBOARD_TOP_INGREDIENTS', 5)

        return {
            'total_orders': _count(Order),
            'total_ingredients': _count(Ingredient),
            'total_suppliers': _count(Supplier),
            'monthly_spending': _spending_since(start_of_month),
            'weekly_spending': _spending_since(start_of_week),
            'recent_orders': _recent_orders(recent_limit),
            'top_ingredients': _top_ingredients(top_limit),
        }
    except Exception:
        db.session.rollback()
        logger.exception("Failed to fetch dashboard data")
        return empty_dashboard()
