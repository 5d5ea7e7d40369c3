"""
Category Grouping

Partitions ingredient-like rows by category for display.
"""

from constants import VALID_CATEGORIES


def group_by_category(rows, key='category'):
    """
    Group rows (dicts) by category.

    Known categories come first in their fixed order, any others follow
    alphabetically. Row order inside a group is preserved. Empty groups
    are left out.
    """
    groups = {}
    for row in rows:
        groups.setdefault(row.get(key) or 'Other', []).append(row)

    ordered = {cat: groups[cat] for cat in VALID_CATEGORIES if cat in groups}
    for cat in sorted(set(groups) - set(ordered)):
        ordered[cat] = groups[cat]
    return ordered
