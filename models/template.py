"""
Order Template Models

Contains the OrderTemplate and TemplateItem models for reusable lists of
ingredients and quantities. Templates carry no prices.
"""

from .base import db


class OrderTemplate(db.Model):
    """Named, reusable order pattern."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    items = db.relationship('TemplateItem', backref='template', lazy=True,
                            cascade='all, delete-orphan', order_by='TemplateItem.id')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'items': [item.to_dict() for item in self.items],
        }


class TemplateItem(db.Model):
    """Template line: an ingredient and a quantity."""
    id = db.Column(db.Integer, primary_key=True)
    template_id = db.Column(db.Integer, db.ForeignKey('order_template.id', ondelete='CASCADE'),
                            nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id'), nullable=False, index=True)
    quantity = db.Column(db.Numeric(10, 3), nullable=False)
    ingredient = db.relationship('Ingredient')

    def to_dict(self):
        ing = self.ingredient
        return {
            'ingredient_id': self.ingredient_id,
            'name': ing.name if ing else 'Unknown',
            'unit': ing.unit if ing else '',
            'category': ing.category if ing else 'Other',
            'supplier_name': ing.supplier.name if ing and ing.supplier else None,
            'quantity': self.quantity,
        }
