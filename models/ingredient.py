"""
Ingredient Model

Contains the Ingredient model: something the kitchen buys, with a
default price and the supplier it comes from.
"""

from .base import db


class Ingredient(db.Model):
    """
    Ingredient bought from a single supplier.

    default_price is the current list price, used to pre-fill the unit
    price of new order lines. Orders keep their own price snapshot.
    """
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    unit = db.Column(db.String(50), nullable=False)  # free text: 'lb', 'case', ...
    default_price = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    category = db.Column(db.String(50), nullable=False, default='Other', index=True)
    supplier_id = db.Column(db.Integer, db.ForeignKey('supplier.id'), nullable=False, index=True)

    supplier = db.relationship('Supplier', back_populates='ingredients')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'unit': self.unit,
            'default_price': self.default_price,
            'category': self.category,
            'supplier_id': self.supplier_id,
            'supplier_name': self.supplier.name if self.supplier else None,
        }
