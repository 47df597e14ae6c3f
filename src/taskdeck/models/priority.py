"""Priority levels for tasks."""

from enum import Enum


class PriorityLevel(str, Enum):
    """Priority levels, stored by their lowercase value."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        """Display label (e.g. "High")."""
        return self.value.capitalize()

    @property
    def weight(self) -> int:
        """Ordering weight, higher sorts first. Never displayed."""
        return _WEIGHTS[self]

    @classmethod
    def parse(cls, value: object) -> "PriorityLevel":
        """Decode a stored priority value.

        Unknown, missing or non-string values fall back to LOW rather
        than raising.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.LOW


_WEIGHTS = {
    PriorityLevel.HIGH: 3,
    PriorityLevel.MEDIUM: 2,
    PriorityLevel.LOW: 1,
}
