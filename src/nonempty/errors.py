from enum import Enum
from typing import Iterable, Tuple

__all__ = ["Violation", "NonEmptyError"]


class Violation(str, Enum):
    NULL_PAYLOAD = "NULL_PAYLOAD"
    ZERO_LENGTH = "ZERO_LENGTH"
    ALL_BLANK = "ALL_BLANK"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    Violation.NULL_PAYLOAD: "payload cannot be None",
    Violation.ZERO_LENGTH: "payload length is 0, needs to be > 0",
    Violation.ALL_BLANK: "payload has no characters, needs to have > 0",
}


class NonEmptyError(ValueError):
    def __init__(self, violations: Iterable[Violation]) -> None:
        self.violations: Tuple[Violation, ...] = tuple(violations)
        super().__init__(self.violations)

    def __str__(self) -> str:
        details = "; ".join(v.message for v in self.violations)
        return f"Payload is empty: {details}"
