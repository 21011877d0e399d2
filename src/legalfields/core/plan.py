"""
Subscription plan of a law record

The narrowest plan a law is offered in: live Acts and Regulations made by
a maker function are public; planned laws and Orders join at the starter
plan; revoked laws at the supporter plan. Everything else is sponsor-only.
"""
from typing import Any, Mapping

from ..utils.records import is_blank, values

FUNCTION_FIELD = "Function"
LIVE_FIELD = " Live?"
FAMILY_FIELD = "Family"
TYPE_CLASS_FIELD = "type_class"

PUBLIC = "PUBLIC"
STARTER = "STARTER"
SUPPORTER = "SUPPORTER"
SPONSOR = "SPONSOR"

MAKER_FUNCTIONS = frozenset({"Enacting Maker", "Amending Maker", "Revoking Maker", "Making"})

IN_FORCE = "✔ In force"
PART_REVOKED = "⭕ Part Revocation / Repeal"
PLANNED = "⚠ Planned"
REVOKED = "❌ Revoked / Repealed / Abolished"

# (plan, live statuses, type classes), narrowest plan first
PLAN_TIERS = (
    (PUBLIC, frozenset({IN_FORCE, PART_REVOKED}), frozenset({"Act", "Regulation"})),
    (STARTER, frozenset({PLANNED, IN_FORCE, PART_REVOKED}), frozenset({"Act", "Regulation", "Order"})),
    (SUPPORTER, frozenset({PLANNED, IN_FORCE, PART_REVOKED, REVOKED}), frozenset({"Act", "Regulation", "Order"})),
)


def classify_plan(record: Mapping[str, Any]) -> str:
    """
    Plan name for a law record

    ``Function`` may be a multi-select; any maker function qualifies.

    Examples:
        >>> classify_plan({'Function': ['Making'], ' Live?': '✔ In force',
        ...                'Family': 'OH&S', 'type_class': 'Act'})
        'PUBLIC'
        >>> classify_plan({'Function': ['Making'], ' Live?': '✔ In force',
        ...                'Family': '', 'type_class': 'Act'})
        'SPONSOR'
    """
    functions = set(values(record, FUNCTION_FIELD))
    if not functions & MAKER_FUNCTIONS or is_blank(record.get(FAMILY_FIELD)):
        return SPONSOR

    live = str(record.get(LIVE_FIELD) or "")
    type_class = str(record.get(TYPE_CLASS_FIELD) or "")
    for plan, statuses, type_classes in PLAN_TIERS:
        if live in statuses and type_class in type_classes:
            return plan
    return SPONSOR
