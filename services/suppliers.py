"""
Supplier Service

Create, update and delete suppliers. A supplier cannot be deleted while
ingredients are still assigned to it.
"""

import logging

from sqlalchemy.exc import IntegrityError

from constants import (
    MAX_LENGTHS, SUPPLIERS_VIEW, INGREDIENTS_VIEW, NEW_ORDER_VIEW, TEMPLATES_VIEW,
    NEW_TEMPLATE_VIEW, ORDER_DETAILS_VIEW,
)
from models import db, Supplier, Ingredient
from utils import clean_name, clean_optional, get_field
from .errors import (
    ValidationError, ReferentialIntegrityError, NotFoundError, ok, service_action,
)
from .signals import invalidate_views

logger = logging.getLogger(__name__)

DELETE_BLOCKED_MESSAGE = (
    'Failed to delete supplier. Make sure no ingredients are assigned to this supplier.'
)


def _supplier_fields(form):
    """Validate and clean supplier form fields."""
    name = clean_name(form.get('name'), max_length=MAX_LENGTHS['supplier_name'])
    if not name:
        raise ValidationError('Name is required')

    return {
        'name': name,
        'contact_info': clean_optional(get_field(form, 'contactInfo', 'contact_info'),
                                       max_length=MAX_LENGTHS['contact_info']),
        'email': clean_optional(form.get('email'), max_length=MAX_LENGTHS['email']),
        'phone': clean_optional(form.get('phone'), max_length=MAX_LENGTHS['phone']),
    }


@service_action('Failed to create supplier')
def create_supplier(form):
    supplier = Supplier(**_supplier_fields(form))
    db.session.add(supplier)
    db.session.commit()

    logger.info("Supplier created: %s (%s)", supplier.id, supplier.name)
    invalidate_views(__name__, SUPPLIERS_VIEW, INGREDIENTS_VIEW)
    return ok(id=supplier.id)


@service_action('Failed to update supplier')
def update_supplier(supplier_id, form):
    fields = _supplier_fields(form)

    supplier = db.session.get(Supplier, supplier_id)
    if supplier is None:
        raise NotFoundError(f'Supplier {supplier_id} not found')

    for attr, value in fields.items():
        setattr(supplier, attr, value)
    db.session.commit()

    logger.info("Supplier updated: %s", supplier_id)
    # Every view that shows supplier names next to ingredients
    invalidate_views(__name__, SUPPLIERS_VIEW, INGREDIENTS_VIEW, NEW_ORDER_VIEW,
                     TEMPLATES_VIEW, NEW_TEMPLATE_VIEW, ORDER_DETAILS_VIEW)
    return ok(id=supplier_id)


@service_action('Failed to delete supplier')
def delete_supplier(supplier_id):
    supplier = db.session.get(Supplier, supplier_id)
    if supplier is None:
        raise NotFoundError(f'Supplier {supplier_id} not found')

    if Ingredient.query.filter_by(supplier_id=supplier_id).count():
        raise ReferentialIntegrityError(DELETE_BLOCKED_MESSAGE)

    db.session.delete(supplier)
    try:
        db.session.commit()
    except IntegrityError:
        # An ingredient was assigned between the check and the delete
        db.session.rollback()
        raise ReferentialIntegrityError(DELETE_BLOCKED_MESSAGE)

    logger.info("Supplier deleted: %s", supplier_id)
    invalidate_views(__name__, SUPPLIERS_VIEW, INGREDIENTS_VIEW)
    return ok()
