from enum import Enum
from typing import Final, Literal


class StatusFilter(Enum):
    ALL = ("all", "text", "◎")
    ACTIVE = ("active", "status.warn", "○")
    COMPLETED = ("completed", "status.ok", "✓")

    @property
    def code(self) -> str:
        return self.value[0]

    @classmethod
    def from_string(cls, value: "str | StatusFilter") -> "StatusFilter":
        if isinstance(value, cls):
            return value
        code = normalize_status_filter(value)
        for status in cls:
            if status.code == code:
                return status
        raise ValueError(f"Invalid status filter: {value!r}")  # pragma: no cover


StatusFilterCode = Literal["all", "active", "completed"]

_CANONICAL_CODES: Final[tuple[str, ...]] = ("all", "active", "completed")

# Alternate spellings accepted for the same views.
_ALIASES: Final[dict[str, str]] = {
    "": "all",
    "any": "all",
    "todo": "active",
    "open": "active",
    "pending": "active",
    "done": "completed",
    "complete": "completed",
}


def normalize_status_filter(value: str) -> str:
    """Normalize a status filter token to all/active/completed.

    Raises ValueError for tokens that name no known view.
    """
    token = (value or "").strip().lower()
    token = _ALIASES.get(token, token)
    if token in _CANONICAL_CODES:
        return token
    raise ValueError(f"Invalid status filter: {value!r}")


def next_status_filter(current: StatusFilter) -> StatusFilter:
    order = list(StatusFilter)
    return order[(order.index(current) + 1) % len(order)]


def status_mark(completed: bool) -> str:
    return StatusFilter.COMPLETED.value[2] if completed else StatusFilter.ACTIVE.value[2]
