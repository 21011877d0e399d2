"""
Shared regular expressions

Patterns used by more than one deriver. Kept here as a thin module with no
business logic so every deriver module can import it safely.
"""

import re

# ==============================================================================
# Separators
# ==============================================================================

# One or more trailing key separators
# "UK_1_5___" -> "UK_1_5"
TRAILING_UNDERSCORES = re.compile(r'_+$')

# Digit anywhere in a flow name marks a numbered alternate flow ("1", "2a")
NUMBERED_FLOW = re.compile(r'1|2|3|4|5|6|7|8|9|0')


def strip_trailing_underscores(value: str) -> str:
    """
    Remove every trailing underscore

    Examples:
        >>> strip_trailing_underscores('DE § 1_2__')
        'DE § 1_2'
    """
    return TRAILING_UNDERSCORES.sub('', value)

