from .utils import NonBlankString, NonEmptyString

__all__ = [
    "NonEmptyString",
    "NonBlankString",
]
