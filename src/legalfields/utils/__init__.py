"""
legalfields utilities
"""

from .records import (
    is_blank,
    text,
    values,
    flag,
)
from .patterns import (
    TRAILING_UNDERSCORES,
    NUMBERED_FLOW,
    strip_trailing_underscores,
)
from .records_io import (
    parse_records,
    read_records,
    dump_records,
)

__all__ = [
    # records
    'is_blank',
    'text',
    'values',
    'flag',
    # patterns
    'TRAILING_UNDERSCORES',
    'NUMBERED_FLOW',
    'strip_trailing_underscores',
    # records_io
    'parse_records',
    'read_records',
    'dump_records',
]
