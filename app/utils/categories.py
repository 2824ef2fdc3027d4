"""Aid category utilities."""

import typing as t

from app.core.models import AidCategory


def get_categories() -> t.List[t.Dict[str, str]]:
    """List every aid category in declaration order.

    Returns:
        List[Dict[str, str]]:
            Category dictionaries with 'value' and 'label' keys.
    """
    return [
        {"value": category.value, "label": category.value}
        for category in AidCategory
    ]


def match_category(value: t.Any) -> AidCategory:
    """Map a loosely typed category onto the enumeration.

    Both values ("Medical Supplies") and member names ("MEDICAL") are
    recognised, ignoring case. Anything else falls back to Other.

    Args:
        value (Any): The category as supplied by a form or the AI service.

    Returns:
        AidCategory: The matching category.
    """
    if isinstance(value, AidCategory):
        return value
    if not isinstance(value, str):
        return AidCategory.OTHER

    wanted: str = value.strip().lower()
    for category in AidCategory:
        if wanted in (category.value.lower(), category.name.lower()):
            return category
    return AidCategory.OTHER
