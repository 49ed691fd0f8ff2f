"""Build-once lookup indexes for the numeral registries."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from types import MappingProxyType
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class RegistryConflictError(ValueError):
    """Two registry entries claim the same key."""


def build_index(members: Iterable[T], key: Callable[[T], K], what: str) -> Mapping[K, T]:
    """Index *members* by ``key(member)`` into a read-only mapping.

    Raises ``RegistryConflictError`` instead of letting a later entry
    overwrite an earlier one.
    """
    index: dict[K, T] = {}
    for member in members:
        k = key(member)
        if k in index:
            raise RegistryConflictError(
                f"Duplicate {what} {k!r}: claimed by both {index[k]!r} and {member!r}"
            )
        index[k] = member
    return MappingProxyType(index)
