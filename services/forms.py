"""
Order and Template Form State

Holds the line items being entered on the new-order and new-template
forms, keeps the running total, and submits to the services.

Ingredients and templates are the plain dicts produced by
services/views.py. Typed values are kept as entered (strings); they are
only interpreted for totals and at submission, where absent or invalid
numbers count as zero.
"""

from utils import parse_decimal
from .grouping import group_by_category
from .order_templates import create_template
from .orders import create_order
from .totals import line_total, order_total, to_amount


def _is_positive(value):
    number = parse_decimal(value)
    return number is not None and number > 0


class _LineItemForm:
    """Shared state: known ingredients and the ingredient id -> line mapping."""

    def __init__(self, ingredients):
        self.ingredients = {ing['id']: ing for ing in ingredients}
        self.lines = {}
        self.error = ''

    @property
    def item_count(self):
        return len(self.lines)

    def grouped_ingredients(self):
        return group_by_category(list(self.ingredients.values()))

    def _ingredient(self, ingredient_id):
        try:
            return self.ingredients[ingredient_id]
        except KeyError:
            raise KeyError(f'Unknown ingredient {ingredient_id}') from None

    def clear(self):
        self.lines = {}
        self.error = ''


class OrderFormState(_LineItemForm):
    """
    New-order form: ingredient id -> {quantity, unit_price}.

    A line exists only while its quantity is a positive number. New lines
    start at the ingredient's default price; the price can then be edited
    per line.
    """

    def __init__(self, ingredients, templates=()):
        super().__init__(ingredients)
        self.templates = {t['id']: t for t in templates}
        self.notes = ''

    def set_quantity(self, ingredient_id, quantity):
        ingredient = self._ingredient(ingredient_id)
        if not _is_positive(quantity):
            self.lines.pop(ingredient_id, None)
            return

        line = self.lines.get(ingredient_id)
        unit_price = line['unit_price'] if line else str(ingredient['default_price'])
        self.lines[ingredient_id] = {
            'ingredient_id': ingredient_id,
            'quantity': str(quantity),
            'unit_price': unit_price,
        }

    def set_unit_price(self, ingredient_id, unit_price):
        """Edit the price of an existing line; ignored if the line is absent."""
        if ingredient_id in self.lines:
            self.lines[ingredient_id]['unit_price'] = str(unit_price)

    def load_template(self, template):
        """
        Replace all lines with the template's items.

        Accepts a template dict or the id of one of self.templates. Unit
        prices come from each ingredient's current default price;
        template items for unknown ingredients are skipped.
        """
        if not isinstance(template, dict):
            template = self.templates[template]

        lines = {}
        for item in template['items']:
            ingredient = self.ingredients.get(item['ingredient_id'])
            if ingredient is None:
                continue
            lines[item['ingredient_id']] = {
                'ingredient_id': item['ingredient_id'],
                'quantity': str(item['quantity']),
                'unit_price': str(ingredient['default_price']),
            }
        self.lines = lines

    def line_total(self, ingredient_id):
        line = self.lines[ingredient_id]
        return line_total(line['quantity'], line['unit_price'])

    def total(self):
        return order_total((line['quantity'], line['unit_price']) for line in self.lines.values())

    def to_items(self):
        """Submission payload, one entry per line."""
        return [
            {
                'ingredientId': line['ingredient_id'],
                'quantity': to_amount(line['quantity']),
                'unitPrice': to_amount(line['unit_price']),
                'totalPrice': line_total(line['quantity'], line['unit_price']),
            }
            for line in self.lines.values()
        ]

    def to_dict(self):
        return {
            'lines': [dict(line, total_price=self.line_total(ing_id))
                      for ing_id, line in self.lines.items()],
            'item_count': self.item_count,
            'total': self.total(),
            'notes': self.notes,
        }

    def submit(self, status):
        """
        Create the order.

        On success create_order raises Redirect, which propagates. On
        failure the message is kept in self.error and the result returned.
        """
        self.error = ''
        result = create_order(status, self.notes, self.to_items())
        if result and result.get('error'):
            self.error = result['error']
        return result


class TemplateFormState(_LineItemForm):
    """New-template form: ingredient id -> {quantity}."""

    def __init__(self, ingredients):
        super().__init__(ingredients)
        self.name = ''
        self.description = ''

    def set_quantity(self, ingredient_id, quantity):
        self._ingredient(ingredient_id)
        if not _is_positive(quantity):
            self.lines.pop(ingredient_id, None)
            return
        self.lines[ingredient_id] = {'ingredient_id': ingredient_id, 'quantity': str(quantity)}

    def to_items(self):
        return [
            {'ingredientId': line['ingredient_id'], 'quantity': to_amount(line['quantity'])}
            for line in self.lines.values()
        ]

    def submit(self):
        self.error = ''
        if not self.name.strip():
            self.error = 'Template name is required'
            return {'error': self.error}

        result = create_template(self.name, self.description, self.to_items())
        if result and result.get('error'):
            self.error = result['error']
        return result
