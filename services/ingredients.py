"""
Ingredient Service

Create, update and delete ingredients. Validation is all-or-nothing:
every field is required. An ingredient used by an order or a template
cannot be deleted.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from constants import (
    VALID_CATEGORIES, MAX_LENGTHS, MAX_AMOUNT,
    INGREDIENTS_VIEW, SUPPLIERS_VIEW, NEW_ORDER_VIEW, TEMPLATES_VIEW, NEW_TEMPLATE_VIEW,
    ORDER_DETAILS_VIEW,
)
from models import db, Supplier, Ingredient, OrderItem, TemplateItem
from utils import clean_name, parse_decimal, parse_int, get_field
from .errors import (
    ValidationError, ReferentialIntegrityError, NotFoundError, ok, service_action,
)
from .signals import invalidate_views
from .totals import round_price

logger = logging.getLogger(__name__)

DELETE_BLOCKED_MESSAGE = (
    'Failed to delete ingredient. It is used by existing orders or templates.'
)

# Every view that lists ingredients, their prices or their supplier names
AFFECTED_VIEWS = (
    INGREDIENTS_VIEW, SUPPLIERS_VIEW, NEW_ORDER_VIEW, TEMPLATES_VIEW, NEW_TEMPLATE_VIEW,
    ORDER_DETAILS_VIEW,
)


def _ingredient_fields(form):
    """Validate and clean ingredient form fields."""
    raw = {
        'name': form.get('name'),
        'unit': form.get('unit'),
        'default_price': get_field(form, 'defaultPrice', 'default_price'),
        'category': form.get('category'),
        'supplier_id': get_field(form, 'supplierId', 'supplier_id'),
    }
    if any(value is None or str(value).strip() == '' for value in raw.values()):
        raise ValidationError('All fields are required')

    name = clean_name(raw['name'], max_length=MAX_LENGTHS['ingredient_name'])
    unit = clean_name(raw['unit'], max_length=MAX_LENGTHS['unit'])
    if not name or not unit:
        raise ValidationError('All fields are required')

    price = parse_decimal(raw['default_price'], min_val=0, max_val=MAX_AMOUNT)
    if price is None:
        raise ValidationError('Default price must be a non-negative amount')

    category = clean_name(raw['category'], max_length=MAX_LENGTHS['category'])
    if category not in VALID_CATEGORIES:
        raise ValidationError(f'Invalid category: {category}')

    supplier_id = parse_int(raw['supplier_id'], min_val=1)
    if supplier_id is None or db.session.get(Supplier, supplier_id) is None:
        raise ValidationError('Supplier not found')

    return {
        'name': name,
        'unit': unit,
        'default_price': round_price(price),
        'category': category,
        'supplier_id': supplier_id,
    }


def missing_ingredient_ids(ingredient_ids):
    """Return the subset of ingredient_ids with no matching row."""
    ids = set(ingredient_ids)
    if not ids:
        return set()
    found = db.session.scalars(select(Ingredient.id).where(Ingredient.id.in_(ids))).all()
    return ids - set(found)


@service_action('Failed to create ingredient')
def create_ingredient(form):
    ingredient = Ingredient(**_ingredient_fields(form))
    db.session.add(ingredient)
    db.session.commit()

    logger.info("Ingredient created: %s (%s)", ingredient.id, ingredient.name)
    invalidate_views(__name__, *AFFECTED_VIEWS)
    return ok(id=ingredient.id)


@service_action('Failed to update ingredient')
def update_ingredient(ingredient_id, form):
    fields = _ingredient_fields(form)

    ingredient = db.session.get(Ingredient, ingredient_id)
    if ingredient is None:
        raise NotFoundError(f'Ingredient {ingredient_id} not found')

    for attr, value in fields.items():
        setattr(ingredient, attr, value)
    db.session.commit()

    logger.info("Ingredient updated: %s", ingredient_id)
    invalidate_views(__name__, *AFFECTED_VIEWS)
    return ok(id=ingredient_id)


@service_action('Failed to delete ingredient')
def delete_ingredient(ingredient_id):
    ingredient = db.session.get(Ingredient, ingredient_id)
    if ingredient is None:
        raise NotFoundError(f'Ingredient {ingredient_id} not found')

    in_orders = OrderItem.query.filter_by(ingredient_id=ingredient_id).count()
    in_templates = TemplateItem.query.filter_by(ingredient_id=ingredient_id).count()
    if in_orders or in_templates:
        raise ReferentialIntegrityError(DELETE_BLOCKED_MESSAGE)

    db.session.delete(ingredient)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ReferentialIntegrityError(DELETE_BLOCKED_MESSAGE)

    logger.info("Ingredient deleted: %s", ingredient_id)
    invalidate_views(__name__, *AFFECTED_VIEWS)
    return ok()
