"""
View Assembly Service

Builds the data each page needs as plain dictionaries and caches it per
view key. Entries are dropped when a service sends views_invalidated.
A page whose data cannot be loaded gets an empty result; that result is
not cached.
"""

import logging

from flask_caching import Cache
from sqlalchemy import select, func
from sqlalchemy.orm import joinedload, selectinload

from constants import (
    VALID_CATEGORIES, COMMON_UNITS,
    SUPPLIERS_VIEW, INGREDIENTS_VIEW, ORDERS_VIEW, NEW_ORDER_VIEW,
    TEMPLATES_VIEW, NEW_TEMPLATE_VIEW, ORDER_DETAILS_VIEW, order_view,
)
from models import db, Supplier, Ingredient, Order, OrderItem, OrderTemplate, TemplateItem
from .grouping import group_by_category
from .orders import next_action
from .signals import views_invalidated

logger = logging.getLogger(__name__)

# Initialized with the Flask app in app.py
cache = Cache()

# ingredients_page filter value meaning no filter
ALL_CATEGORIES = 'all'


@views_invalidated.connect
def drop_cached_views(sender, views=(), **extra):
    for key in views:
        if key == ORDER_DETAILS_VIEW:
            detail_keys = cache.get(ORDER_DETAILS_VIEW) or ()
            if detail_keys:
                cache.delete_many(*detail_keys)
        cache.delete(key)
    logger.debug("Views invalidated by %s: %s", sender, ', '.join(views))


def _cached(key, build, empty):
    data = cache.get(key)
    if data is not None:
        return data

    try:
        data = build()
    except Exception:
        db.session.rollback()
        logger.exception("Failed to load %s view", key)
        return empty()

    if data is not None:
        cache.set(key, data)
    return data


def _all_ingredients():
    ingredients = Ingredient.query.options(
        joinedload(Ingredient.supplier)
    ).order_by(Ingredient.name).all()
    return [ing.to_dict() for ing in ingredients]


def _all_suppliers():
    return [s.to_dict() for s in Supplier.query.order_by(Supplier.name).all()]


def _all_templates():
    templates = OrderTemplate.query.options(
        selectinload(OrderTemplate.items)
        .joinedload(TemplateItem.ingredient)
        .joinedload(Ingredient.supplier)
    ).order_by(OrderTemplate.name).all()
    return [t.to_dict() for t in templates]


# ============================================
# SUPPLIERS
# ============================================

def suppliers_page():
    """Suppliers by name, each with the number of ingredients it supplies."""
    def build():
        rows = db.session.execute(
            select(Supplier, func.count(Ingredient.id))
            .outerjoin(Ingredient, Ingredient.supplier_id == Supplier.id)
            .group_by(Supplier.id)
            .order_by(Supplier.name)
        ).all()
        return {
            'suppliers': [dict(s.to_dict(), ingredient_count=n) for s, n in rows],
        }

    return _cached(SUPPLIERS_VIEW, build, lambda: {'suppliers': []})


# ============================================
# INGREDIENTS
# ============================================

def ingredients_page(category=ALL_CATEGORIES):
    """
    Ingredients by name, optionally limited to one category, plus the
    same ingredients grouped by category and the form choices.

    The unfiltered page is what gets cached; the filter is applied per call.
    """
    def build():
        return {
            'ingredients': _all_ingredients(),
            'suppliers': _all_suppliers(),
            'categories': list(VALID_CATEGORIES),
            'units': list(COMMON_UNITS),
        }

    page = _cached(INGREDIENTS_VIEW, build, lambda: {
        'ingredients': [],
        'suppliers': [],
        'categories': list(VALID_CATEGORIES),
        'units': list(COMMON_UNITS),
    })
    page = dict(page)

    category = (category or ALL_CATEGORIES).strip()
    if category != ALL_CATEGORIES:
        page['ingredients'] = [ing for ing in page['ingredients'] if ing['category'] == category]
    page['groups'] = group_by_category(page['ingredients'])
    page['category'] = category
    return page


# ============================================
# ORDERS
# ============================================

def orders_page():
    """All orders, newest order date first."""
    def build():
        orders = Order.query.options(
            selectinload(Order.items)
        ).order_by(Order.order_date.desc(), Order.id.desc()).all()
        return {'orders': [order.to_dict() for order in orders]}

    return _cached(ORDERS_VIEW, build, lambda: {'orders': []})


def order_detail(order_id):
    """One order with its items grouped by category, or None if it does not exist."""
    def build():
        order = Order.query.options(
            selectinload(Order.items)
            .joinedload(OrderItem.ingredient)
            .joinedload(Ingredient.supplier)
        ).filter_by(id=order_id).first()
        if order is None:
            return None

        data = order.to_dict(with_items=True)
        data['groups'] = group_by_category(data['items'])
        data['next_action'] = next_action(order.status)
        return data

    key = order_view(order_id)
    data = _cached(key, build, lambda: None)
    if data is not None:
        detail_keys = cache.get(ORDER_DETAILS_VIEW) or set()
        if key not in detail_keys:
            detail_keys.add(key)
            cache.set(ORDER_DETAILS_VIEW, detail_keys)
    return data


def new_order_page():
    """Ingredients grouped by category plus the templates that can pre-fill an order."""
    def build():
        ingredients = _all_ingredients()
        return {
            'ingredients': ingredients,
            'groups': group_by_category(ingredients),
            'templates': _all_templates(),
        }

    return _cached(NEW_ORDER_VIEW, build, lambda: {
        'ingredients': [], 'groups': {}, 'templates': [],
    })


# ============================================
# TEMPLATES
# ============================================

def templates_page():
    """Templates by name, each with its items grouped by category."""
    def build():
        templates = _all_templates()
        for template in templates:
            template['groups'] = group_by_category(template['items'])
        return {'templates': templates}

    return _cached(TEMPLATES_VIEW, build, lambda: {'templates': []})


def new_template_page():
    def build():
        ingredients = _all_ingredients()
        return {'ingredients': ingredients, 'groups': group_by_category(ingredients)}

    return _cached(NEW_TEMPLATE_VIEW, build, lambda: {'ingredients': [], 'groups': {}})
