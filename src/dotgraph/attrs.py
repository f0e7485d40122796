"""Attribute-map and sequence helpers shared by nodes, edges and graphs.

None of these functions modify their inputs; each returns a new value.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, TypeVar, Union

from dotgraph.errors import MalformedAttributeError

T = TypeVar("T")

AttrPairs = Union[Iterable[tuple[str, str]], Mapping[str, str]]


class FrozenAttrs(Mapping[str, str]):
    """Read-only, hashable attribute map. Pickles and deep-copies as a plain dict copy."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str] | None = None):
        self._data: dict[str, str] = dict(data or {})

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (dict(self._data),))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


EMPTY_ATTRS = FrozenAttrs()


def merge_attrs(attrs: Mapping[str, str], pairs: AttrPairs) -> dict[str, str]:
    """Return ``attrs`` updated with ``pairs``, the last occurrence of a key winning."""
    merged = dict(attrs)
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    for pair in items:
        key, value = _unpack_pair(pair)
        merged[key] = value
    return merged


def freeze_attrs(attrs: AttrPairs | None) -> FrozenAttrs:
    if isinstance(attrs, FrozenAttrs):
        return attrs
    if not attrs:
        return EMPTY_ATTRS
    return FrozenAttrs(merge_attrs({}, attrs))


def concat(existing: Iterable[T], additions: Iterable[T]) -> tuple[T, ...]:
    return (*existing, *additions)


def _unpack_pair(pair: object) -> tuple[str, str]:
    if isinstance(pair, (str, bytes)):
        raise MalformedAttributeError(f"Expected a (key, value) pair, got {pair!r}", pair=pair)
    try:
        key, value = pair  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise MalformedAttributeError(
            f"Expected a (key, value) pair, got {pair!r}", pair=pair, cause=exc
        ) from exc
    if not isinstance(key, str) or not isinstance(value, str):
        raise MalformedAttributeError(
            f"Attribute key and value must be strings, got {pair!r}", pair=pair
        )
    return key, value
