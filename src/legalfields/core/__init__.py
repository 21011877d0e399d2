"""
Field derivers

Each deriver takes one host record (a mapping of field name to value) and
returns one string, "" when no rule applies.
"""

from .registry import derive_field, get_field, list_fields

__all__ = [
    'derive_field',
    'get_field',
    'list_fields',
]
