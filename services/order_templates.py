"""
Order Template Service

Templates are saved lists of ingredients and quantities used to pre-fill
new orders. They are created whole and deleted whole.
"""

import logging
from collections.abc import Mapping

from constants import MAX_LENGTHS, MAX_AMOUNT, TEMPLATES_VIEW, NEW_ORDER_VIEW
from models import db, OrderTemplate, TemplateItem
from utils import clean_name, clean_optional, parse_decimal, parse_int, get_field
from .errors import ValidationError, NotFoundError, Redirect, ok, service_action
from .ingredients import missing_ingredient_ids
from .signals import invalidate_views
from .totals import round_quantity

logger = logging.getLogger(__name__)


def _parse_template_items(items):
    if not items:
        raise ValidationError('Template must have at least one item')

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

        lines.append({'ingredient_id': ingredient_id, 'quantity': round_quantity(quantity)})

    if missing_ingredient_ids(line['ingredient_id'] for line in lines):
        raise ValidationError('Template contains an unknown ingredient')
    return lines


@service_action('Failed to create template')
def create_template(name, description, items):
    """Create a template with its items, then raise Redirect to the template list."""
    name = clean_name(name, max_length=MAX_LENGTHS['template_name'])
    if not name:
        raise ValidationError('Template name is required')

    lines = _parse_template_items(items)

    template = OrderTemplate(
        name=name,
        description=clean_optional(description, max_length=MAX_LENGTHS['template_description']),
    )
    template.items = [TemplateItem(**line) for line in lines]
    db.session.add(template)
    db.session.commit()

    logger.info("Template created: %s (%s, %s items)", template.id, template.name, len(lines))
    invalidate_views(__name__, TEMPLATES_VIEW, NEW_ORDER_VIEW)
    raise Redirect('templates_list', message=f'Template "{template.name}" created')


@service_action('Failed to delete template')
def delete_template(template_id):
    template = db.session.get(OrderTemplate, template_id)
    if template is None:
        raise NotFoundError(f'Template {template_id} not found')

    db.session.delete(template)
    db.session.commit()

    logger.info("Template deleted: %s", template_id)
    invalidate_views(__name__, TEMPLATES_VIEW, NEW_ORDER_VIEW)
    return ok()
