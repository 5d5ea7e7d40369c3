"""
Validation Constants

Contains whitelist values and field limits for validating user input
before it reaches the database.
"""

# Ingredient categories, in display order (whitelist enforced on ingredient save)
VALID_CATEGORIES = [
    'Produce', 'Meat', 'Dairy', 'Dry Goods', 'Seafood', 'Beverages', 'Other'
]

# Maximum field lengths
MAX_LENGTHS = {
    'supplier_name': 200,
    'contact_info': 1000,
    'email': 200,
    'phone': 50,
    'ingredient_name': 200,
    'unit': 50,
    'category': 50,
    'notes': 5000,
    'template_name': 200,
    'template_description': 1000,
}

# Upper bound for prices and quantities typed into forms
MAX_AMOUNT = 9999999
