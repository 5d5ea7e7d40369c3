"""
Order Models

Contains the Order and OrderItem models. An order is written once with
all of its items; afterwards only its status changes.
"""

from datetime import datetime

from .base import db


class Order(db.Model):
    """Purchase order with a stored total."""
    __tablename__ = 'purchase_order'

    id = db.Column(db.Integer, primary_key=True)
    status = db.Column(db.String(20), nullable=False, default='draft', index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now, index=True)
    order_date = db.Column(db.DateTime, nullable=False, default=datetime.now, index=True)
    notes = db.Column(db.Text, nullable=True)
    # Sum of item total_price at creation; never recomputed
    total_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)

    items = db.relationship('OrderItem', backref='order', lazy=True,
                            cascade='all, delete-orphan', order_by='OrderItem.id')

    def to_dict(self, with_items=False):
        data = {
            'id': self.id,
            'status': self.status,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'order_date': self.order_date.isoformat() if self.order_date else None,
            'notes': self.notes,
            'total_amount': self.total_amount,
            'item_count': len(self.items),
        }
        if with_items:
            data['items'] = [item.to_dict() for item in self.items]
        return data


class OrderItem(db.Model):
    """Order line. unit_price is the price at the time of ordering."""
    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey('purchase_order.id', ondelete='CASCADE'),
                         nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id'), nullable=False, index=True)
    quantity = db.Column(db.Numeric(10, 3), nullable=False)
    unit_price = db.Column(db.Numeric(10, 2), nullable=False)
    total_price = db.Column(db.Numeric(12, 2), nullable=False)
    ingredient = db.relationship('Ingredient')

    def to_dict(self):
        ing = self.ingredient
        return {
            'id': self.id,
            'ingredient_id': self.ingredient_id,
            'name': ing.name if ing else 'Unknown',
            'unit': ing.unit if ing else '',
            'category': ing.category if ing else 'Other',
            'supplier_name': ing.supplier.name if ing and ing.supplier else None,
            'quantity': self.quantity,
            'unit_price': self.unit_price,
            'total_price': self.total_price,
        }
