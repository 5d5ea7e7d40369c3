"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .supplier import Supplier
from .ingredient import Ingredient
from .order import Order, OrderItem
from .template import OrderTemplate, TemplateItem

__all__ = [
    'db',
    'Supplier',
    'Ingredient',
    'Order',
    'OrderItem',
    'OrderTemplate',
    'TemplateItem',
]
