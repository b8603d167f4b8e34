"""The generic create/read/update/delete interface of domain services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Crud(ABC, Generic[K, V]):
    """Asynchronous storage of values of type V under keys of type K."""

    @abstractmethod
    async def read_all(self) -> list[V]:
        """Read all values."""

    @abstractmethod
    async def read(self, id: K) -> V | None:
        """Read the value stored under the key."""

    @abstractmethod
    async def create(self, value: V) -> V:
        """Store a new value and return it."""

    @abstractmethod
    async def update(self, id: K, value: V) -> V:
        """Replace the value under the key and return it."""

    @abstractmethod
    async def delete(self, id: K) -> V | None:
        """Remove the value under the key and return it."""

    async def exists(self, id: K) -> bool:
        """Tell whether a value is stored under the key."""
        return await self.read(id) is not None