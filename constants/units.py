"""
Unit Constants

Units of measure offered as suggestions on the ingredient form.
The unit field itself is free text.
"""

COMMON_UNITS = [
    'lb', 'oz', 'kg', 'g',
    'gal', 'qt', 'l',
    'each', 'dozen', 'bunch',
    'case', 'box', 'bag', 'can', 'bottle',
]
