from .core import (ABSENT, EMPTY_SELECTION, NonEmpty, combine, concat, create,
                   display, extract_range, is_nonempty, nonempty, read, substr,
                   transform, write)
from .config import Config, get_config
from .errors import NonEmptyError, Violation
from .validator import check, ensure_valid, is_valid, validate

__all__ = [
    "ABSENT",
    "EMPTY_SELECTION",
    "NonEmpty",
    "nonempty",
    "create",
    "is_nonempty",
    "display",
    "combine",
    "transform",
    "read",
    "write",
    "concat",
    "extract_range",
    "substr",
    "Config",
    "get_config",
    "NonEmptyError",
    "Violation",
    "validate",
    "check",
    "is_valid",
    "ensure_valid",
]
