"""
Strict equality used to decide whether a write is a change.

Scalars compare by type and value, everything else by identity. There is
no structural comparison: replacing a list with an equal copy is
a change, mutating the stored list in place is not visible at all.
"""

from typing import Any

# Value kinds compared by content. Exact type match is required, so subclasses
# (and bool vs int) fall through to the identity rule.
SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes)


def strict_equals(a: Any, b: Any) -> bool:
    """Return True when ``a`` and ``b`` are the same value under strict rules."""
    if a is b:
        # nan is never equal to itself, even when it is the same object
        return not (type(a) is float and a != a)
    if type(a) is not type(b):
        return False
    if type(a) in SCALAR_TYPES:
        return a == b
    return False
