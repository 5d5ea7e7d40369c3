# Utility modules for Kitchen Orders
from .sanitizer import clean_text, clean_name, clean_optional, get_field
from .numbers import parse_decimal, parse_int
from .logging_setup import setup_logging
