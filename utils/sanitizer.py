"""
Input Sanitization Module

Cleans free-text form input before it is stored. Values are kept
verbatim apart from whitespace and control characters; HTML escaping is
left to whatever renders them.
"""

import re


def clean_text(text, max_length=10000):
    """
    Normalize a text field.

    Strips leading/trailing whitespace, removes control characters and
    null bytes, and truncates to max_length.

    Args:
        text: The text to clean (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Cleaned string ('' for None)
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters, but keep newlines and tabs
    text = re.sub(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]', '', text)

    text = text.strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def clean_name(name, max_length=200):
    """
    Clean a single-line name (supplier, ingredient, template).

    Like clean_text, but newlines are not allowed and runs of
    whitespace collapse to one space.
    """
    name = clean_text(name, max_length=max_length * 2)
    name = re.sub(r'\s+', ' ', name)
    return name[:max_length]


def clean_optional(text, max_length=10000):
    """Clean an optional field; blank input becomes None."""
    text = clean_text(text, max_length=max_length)
    return text or None


def get_field(form, *keys, default=None):
    """
    Return the first present value among keys.

    Forms post camelCase names ('contactInfo') while Python callers tend
    to use snake_case ('contact_info'); both are accepted.
    """
    for key in keys:
        value = form.get(key)
        if value is not None:
            return value
    return default
