"""
Change notifications emitted by reactive wrappers.

A change is the ephemeral triple ``(name, previous, current)`` produced by a
single committed write. It is rendered into one human-readable line using
``CHANGE_MESSAGE_TEMPLATE`` and handed to the wrapper's callback.
"""

from dataclasses import dataclass
from typing import Any

# ============================================================================
# SENTINEL VALUES
# ============================================================================


class _Missing:
    """Sentinel for a property that is not present on the target."""

    __slots__ = ()

    def __repr__(self):
        return "MISSING"

    def __str__(self):
        return "undefined"

    def __bool__(self):
        return False


MISSING = _Missing()


# ============================================================================
# MESSAGE FORMAT
# ============================================================================

CHANGE_MESSAGE_TEMPLATE = "{name}가 [{previous}] >> [{current}] 로 변경되었습니다"


@dataclass(frozen=True)
class Change:
    """
    One property transition observed through a surrogate.

    Attributes:
        name: Property (attribute or key) that was written
        previous: Stored value before the write, or MISSING if it was absent
        current: Newly committed value
    """

    name: str
    previous: Any
    current: Any

    def describe(self, template: str = CHANGE_MESSAGE_TEMPLATE) -> str:
        """Render this change with ``template``; values use their ``str()`` form."""
        return template.format(
            name=self.name,
            previous=str(self.previous),
            current=str(self.current),
        )

    def __str__(self):
        return self.describe()
