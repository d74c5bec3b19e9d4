from __future__ import annotations

from typing import Any, List, Literal

from .config import Config, get_config
from .errors import NonEmptyError, Violation
from .utils import is_blank, payload_length, text_elements

__all__ = ["validate", "check", "is_valid", "ensure_valid"]


def validate(candidate: Any, *, config: Config | None = None) -> List[Violation]:
    """
    Collect every rule the candidate payload breaks. An empty list means the
    candidate may be wrapped.
    """
    if config is None:
        config = get_config()

    violations: List[Violation] = []

    if candidate is None:
        violations.append(Violation.NULL_PAYLOAD)

    if payload_length(candidate) == 0:
        violations.append(Violation.ZERO_LENGTH)

    elements = text_elements(candidate)
    if elements is not None and all(
        is_blank(e, strip=config.strip, strip_chars=config.strip_chars) for e in elements
    ):
        violations.append(Violation.ALL_BLANK)

    return violations


def check(candidate: Any, *, config: Config | None = None) -> Literal[True] | List[str]:
    violations = validate(candidate, config=config)
    if len(violations) == 0:
        return True
    return [v.message for v in violations]


def is_valid(candidate: Any, *, config: Config | None = None) -> bool:
    return len(validate(candidate, config=config)) == 0


def ensure_valid(candidate: Any, *, config: Config | None = None) -> None:
    violations = validate(candidate, config=config)
    if len(violations) > 0:
        raise NonEmptyError(violations)
