"""
Record field access

Records arrive from the host platform as plain mappings keyed by the
platform's field names. These helpers give every deriver the same notion
of a blank field and the same string rendering of a value.
"""

from typing import Any, Mapping


def is_blank(value: Any) -> bool:
    """
    Whether a field value counts as unset

    None, empty strings, False, 0 and empty lists are all blank, the same
    values the host formula language treats as false in ``IF(field, ...)``.

    Examples:
        >>> is_blank("")
        True
        >>> is_blank("0")
        False
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def text(record: Mapping[str, Any], field: str) -> str:
    """
    Field value rendered as a string

    Blank values become ``""``. Multi-select values (lists) are joined with
    ``", "`` the way the host renders them inside formulas. Whole floats lose
    their ``.0`` so numeric locators read like the platform displays them.

    Args:
        record: the host record
        field: platform field name

    Returns:
        the field as text, ``""`` when missing or blank
    """
    value = record.get(field)
    if is_blank(value):
        return ""
    if value is True:
        return "1"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value if not is_blank(v))
    return str(value)


def values(record: Mapping[str, Any], field: str) -> list:
    """Field as a list of strings (single values are wrapped)"""
    value = record.get(field)
    if is_blank(value):
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if not is_blank(v)]
    return [str(value)]


def flag(record: Mapping[str, Any], field: str) -> bool:
    """Checkbox-style field: any non-blank value other than "false"/"no" is set"""
    value = record.get(field)
    if is_blank(value):
        return False
    if isinstance(value, str):
        return value.strip().lower() not in ("false", "no", "0")
    return True
