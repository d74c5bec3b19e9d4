from annotated_types import MinLen
from pydantic import AfterValidator
from typing_extensions import Annotated

from ..validator import ensure_valid


def _non_blank(v: str) -> str:
    ensure_valid(v)
    return v


NonEmptyString = Annotated[str, MinLen(1)]
NonBlankString = Annotated[str, AfterValidator(_non_blank)]
