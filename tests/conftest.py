"""
Shared fixtures: an application on an in-memory database, a test client
and small factories for the domain rows.
"""

from decimal import Decimal

import pytest

from app import create_app
from models import db, Supplier, Ingredient, Order, OrderItem, OrderTemplate, TemplateItem
from services import cache


@pytest.fixture
def app():
    """Application on a fresh in-memory database, inside an app context."""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        cache.clear()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_supplier(app):
    def factory(name='Fresh Farms', **fields):
        supplier = Supplier(name=name, **fields)
        db.session.add(supplier)
        db.session.commit()
        return supplier
    return factory


@pytest.fixture
def make_ingredient(app, make_supplier):
    def factory(name='Tomatoes', unit='lb', default_price='2.50', category='Produce',
                supplier=None):
        supplier = supplier or make_supplier()
        ingredient = Ingredient(name=name, unit=unit, default_price=Decimal(default_price),
                                category=category, supplier_id=supplier.id)
        db.session.add(ingredient)
        db.session.commit()
        return ingredient
    return factory


@pytest.fixture
def make_order(app):
    """Insert an order directly; lines are (ingredient, quantity, unit_price)."""
    def factory(lines, status='draft', created_at=None, order_date=None, notes=None):
        items = []
        for ingredient, quantity, unit_price in lines:
            quantity, unit_price = Decimal(quantity), Decimal(unit_price)
            items.append(OrderItem(ingredient_id=ingredient.id, quantity=quantity,
                                   unit_price=unit_price,
                                   total_price=(quantity * unit_price).quantize(Decimal('0.01'))))
        order = Order(status=status, notes=notes,
                      total_amount=sum((i.total_price for i in items), Decimal('0')))
        if created_at is not None:
            order.created_at = created_at
            order.order_date = order_date or created_at
        order.items = items
        db.session.add(order)
        db.session.commit()
        return order
    return factory


@pytest.fixture
def make_template(app):
    def factory(name, lines, description=None):
        template = OrderTemplate(name=name, description=description)
        template.items = [TemplateItem(ingredient_id=ing.id, quantity=Decimal(qty))
                          for ing, qty in lines]
        db.session.add(template)
        db.session.commit()
        return template
    return factory
