from __future__ import annotations

import math
from collections.abc import Collection, Iterable, Mapping, Sequence
from itertools import chain
from typing import Any, Callable, List, Protocol, runtime_checkable


class _Missing(object):
    def __repr__(self) -> str:
        return "MISSING"


class _EmptySelection(object):
    def __repr__(self) -> str:
        return "EMPTY_SELECTION"


MISSING: Any = _Missing()
EMPTY_SELECTION: Any = _EmptySelection()


@runtime_checkable
class Trimmable(Protocol):
    def strip(self, chars: Any = None) -> Any:
        ...


def payload_length(payload: Any) -> int:
    """
    element count of a payload:
        - array-likes with a tuple shape: product of the shape
        - sized values: len()
        - anything else is a scalar and counts as one element
    """
    if payload is None:
        return 0
    shape = getattr(payload, "shape", None)
    if isinstance(shape, tuple):
        return math.prod(shape)
    try:
        return len(payload)
    except TypeError:
        return 1


def text_elements(payload: Any) -> List[Trimmable] | None:
    """
    Return the strings of a text payload, or None when the payload is not text.

    A single string is its own only element. A collection is text when it has
    at least one element and every element is a string.
    """
    if isinstance(payload, Trimmable):
        return [payload]
    flat = getattr(payload, "flat", None)
    if _is_array_like(payload) and flat is not None:
        # array elements, not rows, are the strings of a matrix
        elements = list(flat)
    elif isinstance(payload, Mapping) or not isinstance(payload, Collection):
        return None
    else:
        elements = list(payload)
    if len(elements) > 0 and all(isinstance(e, Trimmable) for e in elements):
        return elements
    return None


def is_blank(element: Trimmable, strip: bool = True, strip_chars: str | None = None) -> bool:
    if not strip:
        return len(element) == 0  # type: ignore[arg-type]
    chars: Any = strip_chars
    if chars is not None and isinstance(element, (bytes, bytearray)):
        chars = chars.encode("utf-8")
    return len(element.strip(chars)) == 0  # type: ignore[arg-type]


def _is_single(index: Any) -> bool:
    return isinstance(index, (int, str))


def _is_array_like(payload: Any) -> bool:
    return isinstance(getattr(payload, "shape", None), tuple)


def _is_scalar_payload(payload: Any) -> bool:
    if _is_array_like(payload):
        return payload.shape == ()
    return not hasattr(payload, "__len__")


def _unbox(items: List[Any]) -> Any:
    if len(items) == 1:
        return items[0]
    return items


def _is_plain_sequence(payload: Any) -> bool:
    return isinstance(payload, Sequence) and not _is_array_like(payload)


def _rebuild(payload: Any, items: List[Any]) -> Any:
    if isinstance(payload, str):
        return "".join(items)
    if isinstance(payload, bytes):
        return bytes(items)
    if isinstance(payload, tuple):
        return tuple(items)
    return items


def _positions(payload: Sequence, index: Any) -> List[int]:
    if callable(index):
        return [i for i, v in enumerate(payload) if index(v)]
    index = list(index)
    if len(index) > 0 and all(isinstance(i, bool) for i in index):
        if len(index) != len(payload):
            raise IndexError(
                f"boolean index of length {len(index)} does not match payload of length {len(payload)}"
            )
        return [i for i, keep in enumerate(index) if keep]
    return index


def select(payload: Any, index: Any, column: Any = MISSING) -> Any:
    if _is_scalar_payload(payload):
        # a scalar is a one-element sequence
        selected = select([payload], index, column)
        return _unbox(selected) if isinstance(selected, list) else selected

    if column is not MISSING:
        if _is_array_like(payload):
            return payload[index, column]
        rows = select(payload, index)
        if _is_single(index):
            return select(rows, column)
        return [select(row, column) for row in rows]

    if index is EMPTY_SELECTION:
        if isinstance(payload, Mapping):
            return {}
        return payload[:0]
    if isinstance(index, (int, slice, str)) or _is_array_like(payload):
        return payload[index]
    if isinstance(payload, Mapping):
        return {k: payload[k] for k in index}
    if _is_plain_sequence(payload) and (callable(index) or isinstance(index, Iterable)):
        return _rebuild(payload, [payload[i] for i in _positions(payload, index)])
    return payload[index]


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, bytes)) or not isinstance(value, Sequence)


def _assign_list(target: List[Any], index: Any, value: Any) -> None:
    if isinstance(index, int):
        target[index] = value
        return
    if isinstance(index, slice):
        # a scalar is broadcast over the slice, a sequence replaces it
        if _is_scalar(value):
            for i in range(len(target))[index]:
                target[i] = value
        else:
            target[index] = value
        return
    positions = _positions(target, index)
    if _is_scalar(value):
        for i in positions:
            target[i] = value
    elif len(value) == len(positions):
        for i, v in zip(positions, value):
            target[i] = v
    else:
        raise ValueError(f"cannot assign {len(value)} values to {len(positions)} positions")


def assign(payload: Any, index: Any, value: Any, column: Any = MISSING) -> Any:
    """
    Assign value at index on a copy of payload and return the full copy.
    The payload passed in is never modified.
    """
    if index is EMPTY_SELECTION:
        return _copy(payload)

    if _is_scalar_payload(payload):
        return _unbox(assign([payload], index, value, column))

    if _is_array_like(payload):
        target = payload.copy()
        if column is MISSING:
            target[index] = value
        else:
            target[index, column] = value
        return target

    if isinstance(payload, Mapping):
        target = dict(payload)
        keys = [index] if isinstance(index, str) or not isinstance(index, Iterable) else list(index)
        for k in keys:
            if column is MISSING:
                target[k] = value
            else:
                target[k] = assign(payload[k], column, value)
        return target

    if isinstance(payload, str):
        if column is not MISSING or not isinstance(value, str):
            raise TypeError(
                f"cannot write {type(value).__name__} into text, expected str"
            )
        chars = list(payload)
        if isinstance(index, slice):
            chars[index] = list(value)
        else:
            _assign_list(chars, index, value)
        return "".join(chars)

    items = list(payload)
    if column is MISSING:
        _assign_list(items, index, value)
    else:
        rows = [index] if _is_single(index) else _positions(items, _row_index(items, index))
        for r in rows:
            items[r] = assign(items[r], column, value)
    if isinstance(payload, tuple):
        return tuple(items)
    return items


def _row_index(items: List[Any], index: Any) -> Any:
    if isinstance(index, slice):
        return range(len(items))[index]
    return index


def _copy(payload: Any) -> Any:
    copy_method = getattr(payload, "copy", None)
    if callable(copy_method):
        return copy_method()
    return payload


def _as_items(part: Any) -> Iterable[Any]:
    if isinstance(part, (str, bytes, Mapping)) or not isinstance(part, Iterable):
        return [part]
    return part


def concatenate(parts: Sequence[Any]) -> Any:
    if all(isinstance(p, str) for p in parts):
        return "".join(parts)
    items = list(chain.from_iterable(_as_items(p) for p in parts))
    if all(isinstance(p, tuple) for p in parts):
        return tuple(items)
    return items


def substring(payload: Any, start: int, stop: int) -> Any:
    if isinstance(payload, (str, bytes)):
        return payload[start:stop]
    elements = text_elements(payload)
    if elements is None:
        raise TypeError(
            f"substring extraction requires a text payload, got {type(payload).__name__}"
        )
    sliced = [e[start:stop] for e in elements]  # type: ignore[index]
    if isinstance(payload, tuple):
        return tuple(sliced)
    return sliced


def describe(func: Callable[..., Any]) -> str:
    return getattr(func, "__name__", None) or repr(func)
