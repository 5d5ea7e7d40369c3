"""
Supplier Model

Contains the Supplier model for vendors that ingredients are bought from.
"""

from .base import db


class Supplier(db.Model):
    """Vendor with free-text contact details."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    contact_info = db.Column(db.Text, nullable=True)
    email = db.Column(db.String(200), nullable=True)
    phone = db.Column(db.String(50), nullable=True)

    # No cascade: deleting a supplier that still has ingredients is refused
    ingredients = db.relationship('Ingredient', back_populates='supplier', lazy=True,
                                  passive_deletes='all')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'contact_info': self.contact_info,
            'email': self.email,
            'phone': self.phone,
        }
