from __future__ import annotations

import copy
import logging
import operator
from typing import Any, Callable, Generic, Iterator, Tuple, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import TypeGuard, get_args

from ..config import Config, get_config
from ..errors import NonEmptyError
from ..utils import (
    EMPTY_SELECTION,
    MISSING,
    assign,
    concatenate,
    describe,
    is_blank,
    payload_length,
    select,
    substring,
)
from ..validator import ensure_valid

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

T = TypeVar("T")

ABSENT = None

_logger = logging.getLogger(__name__)


def _binary(op: Callable[[Any, Any], Any]):
    def forward(self, other):
        return combine(op, self, other)

    def reverse(self, other):
        return combine(op, other, self)

    return forward, reverse


def _unary(op: Callable[[Any], Any]):
    def inner(self):
        return transform(op, self)

    return inner


class NonEmpty(Generic[T]):
    """
    Immutable wrapper around a payload that is never None, never has zero
    length and, for text, always has at least one non-blank string.

    Constructing an instance validates the payload. Every operation returns a
    new validated instance or raises NonEmptyError, leaving the operands as
    they were.
    """

    __slots__ = ("_payload",)

    _payload: T

    def __init__(self, payload: T, *, config: Config | None = None) -> None:
        candidate = copy.copy(payload)
        ensure_valid(candidate, config=config)
        object.__setattr__(self, "_payload", candidate)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def unwrap(self) -> T:
        return copy.copy(self._payload)

    @property
    def value(self) -> T:
        return self.unwrap()

    def __len__(self) -> int:
        return payload_length(self._payload)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._payload)  # type: ignore[call-overload]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._payload!r})"

    def __str__(self) -> str:
        return str(self._payload)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonEmpty):
            return NotImplemented
        return self._payload == other._payload

    def __hash__(self) -> int:
        return hash((NonEmpty, self._payload))

    def __copy__(self) -> NonEmpty[T]:
        return self

    @classmethod
    def _trusted(cls, payload: T) -> NonEmpty[T]:
        # payload was validated when the source instance was built
        obj = object.__new__(cls)
        object.__setattr__(obj, "_payload", payload)
        return obj

    def __deepcopy__(self, memo: dict) -> NonEmpty[T]:
        return NonEmpty._trusted(copy.deepcopy(self._payload, memo))

    def __reduce__(self):
        return (_restore, (self._payload,))

    def __getitem__(self, key: Any) -> NonEmpty[Any]:
        if isinstance(key, tuple) and len(key) == 2:
            return read(self, key[0], key[1])
        return read(self, key)

    __add__, __radd__ = _binary(operator.add)
    __sub__, __rsub__ = _binary(operator.sub)
    __mul__, __rmul__ = _binary(operator.mul)
    __matmul__, __rmatmul__ = _binary(operator.matmul)
    __truediv__, __rtruediv__ = _binary(operator.truediv)
    __floordiv__, __rfloordiv__ = _binary(operator.floordiv)
    __mod__, __rmod__ = _binary(operator.mod)
    __pow__, __rpow__ = _binary(operator.pow)
    __and__, __rand__ = _binary(operator.and_)
    __or__, __ror__ = _binary(operator.or_)
    __xor__, __rxor__ = _binary(operator.xor)
    __lshift__, __rlshift__ = _binary(operator.lshift)
    __rshift__, __rrshift__ = _binary(operator.rshift)

    __neg__ = _unary(operator.neg)
    __pos__ = _unary(operator.pos)
    __abs__ = _unary(operator.abs)
    __invert__ = _unary(operator.invert)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        if len(args) > 0:
            payload_schema = handler.generate_schema(args[0])
        else:
            payload_schema = core_schema.any_schema()

        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                core_schema.no_info_after_validator_function(cls, payload_schema),
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.unwrap()
            ),
        )


def _restore(payload: Any) -> NonEmpty[Any]:
    return NonEmpty._trusted(payload)


def _commit(candidate: Any, operation: str = "create", config: Config | None = None) -> NonEmpty[Any]:
    try:
        return NonEmpty(candidate, config=config)
    except NonEmptyError as e:
        _logger.debug(f"{operation} rejected: {[v.value for v in e.violations]}")
        raise


def nonempty(x: T, *, config: Config | None = None) -> NonEmpty[T]:
    return NonEmpty(x, config=config)


create = nonempty


def is_nonempty(x: Any) -> TypeGuard[NonEmpty[Any]]:
    return isinstance(x, NonEmpty)


def display(x: NonEmpty[Any]) -> str:
    return repr(x._payload)


def _unwrap_operands(left: Any, right: Any) -> Tuple[Any, Any]:
    if isinstance(left, NonEmpty):
        left = left._payload
    if isinstance(right, NonEmpty):
        right = right._payload
    return left, right


def combine(
    op: Callable[[Any, Any], Any],
    left: Any,
    right: Any,
    *,
    config: Config | None = None,
) -> NonEmpty[Any]:
    """
    Apply a binary operator where at least one operand is a NonEmpty and wrap
    the result. Combining with ABSENT yields an absent candidate, which is
    rejected as NULL_PAYLOAD.
    """
    if not (isinstance(left, NonEmpty) or isinstance(right, NonEmpty)):
        raise TypeError("combine requires at least one NonEmpty operand")

    lhs, rhs = _unwrap_operands(left, right)
    if lhs is ABSENT or rhs is ABSENT:
        candidate = None
    else:
        candidate = op(lhs, rhs)
    return _commit(candidate, describe(op), config)


def transform(
    func: Callable[[Any], Any], x: NonEmpty[Any], *, config: Config | None = None
) -> NonEmpty[Any]:
    return _commit(func(x._payload), describe(func), config)


def read(
    x: NonEmpty[Any],
    index: Any,
    column: Any = MISSING,
    *,
    config: Config | None = None,
) -> NonEmpty[Any]:
    return _commit(select(x._payload, index, column), "read", config)


def write(
    x: NonEmpty[Any],
    index: Any,
    value: Any,
    column: Any = MISSING,
    *,
    config: Config | None = None,
) -> NonEmpty[Any]:
    """
    Return a new instance whose payload is x's payload with value written at
    index. The full payload is validated, so writing blanks over every string
    is rejected and x stays as it was.
    """
    if isinstance(value, NonEmpty):
        value = value._payload
    payload = x._payload
    if _blanks_text(payload, index, value, column, config):
        # a str payload is one text element, blanking any position blanks it
        if not -len(payload) <= index < len(payload):
            raise IndexError("string index out of range")
        return _commit(value, "write", config)
    return _commit(assign(payload, index, value, column), "write", config)


def _blanks_text(payload: Any, index: Any, value: Any, column: Any, config: Config | None) -> bool:
    if not (isinstance(payload, str) and isinstance(value, str)):
        return False
    if column is not MISSING or not isinstance(index, int):
        return False
    if config is None:
        config = get_config()
    return is_blank(value, strip=config.strip, strip_chars=config.strip_chars)


def concat(x: NonEmpty[Any], *others: Any, config: Config | None = None) -> NonEmpty[Any]:
    parts = [x._payload]
    for other in others:
        parts.append(other._payload if isinstance(other, NonEmpty) else other)
    return _commit(concatenate(parts), "concat", config)


def extract_range(
    x: NonEmpty[Any], start: int, stop: int, *, config: Config | None = None
) -> NonEmpty[Any]:
    return _commit(substring(x._payload, start, stop), "extract_range", config)


substr = extract_range
