"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T, K]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

The contract is deliberately small: callers check existence themselves
before overwriting or deleting, so implementations need not guard
against missing rows.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class IRepository(ABC, Generic[T, K]):
    """Base generic repository contract.

    ``T`` is the entity managed by the repository (e.g. ``Product``) and
    ``K`` the type of its identifier.
    """

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert the entity when it has no identifier, otherwise overwrite it."""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every entity, in insertion order."""

    @abstractmethod
    def find_by_id(self, id: K) -> Optional[T]:
        """Retrieve an entity by identifier, or ``None`` if absent."""

    @abstractmethod
    def exists_by_id(self, id: K) -> bool:
        """Whether an entity with this identifier is stored."""

    @abstractmethod
    def delete_by_id(self, id: K) -> None:
        """Remove the entity with this identifier."""
