"""Keyed collections that hold the system's entities."""

from __future__ import annotations

from typing import Callable, Dict, Generic, Hashable, Iterator, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class Registro(Generic[K, T]):
    """Entities stored under a key taken from each one.

    Iteration yields the entities in key order.
    """

    def __init__(self, clave: Callable[[T], K]) -> None:
        self._clave = clave
        self._elementos: Dict[K, T] = {}

    def agregar(self, elemento: T) -> None:
        """Store an entity, replacing any other under the same key."""
        self._elementos[self._clave(elemento)] = elemento

    def find(self, clave: K) -> Optional[T]:
        """The entity stored under the key, or None."""
        return self._elementos.get(clave)

    def borrar(self, clave: K) -> None:
        """Remove the entity under the key; a missing key is ignored."""
        self._elementos.pop(clave, None)

    def clear(self) -> None:
        """Remove every entity."""
        self._elementos.clear()

    def __iter__(self) -> Iterator[T]:
        for clave in sorted(self._elementos):
            yield self._elementos[clave]

    def __len__(self) -> int:
        return len(self._elementos)

    def __contains__(self, clave: object) -> bool:
        return clave in self._elementos