from .wrapper import (ABSENT, EMPTY_SELECTION, NonEmpty, combine, concat,
                      create, display, extract_range, is_nonempty, nonempty,
                      read, substr, transform, write)

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
]
