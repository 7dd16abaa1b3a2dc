"""Generic repository base interface.

Repository[T] is the root abstraction for data access over a single bound
record type.  The concrete SQLAlchemy implementation lives in
src/infrastructure/persistence/repositories/ and is wired at the application
boundary with the caller's session.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the record type this repository is bound to.
  - Inputs are accepted in singular or plural shape; results come back in the
    same shape the caller passed (one record for a single target, a list for
    a collection of targets).
  - Transactions are owned by the caller.  No operation commits or rolls back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from src.domain.models.pagination import Page
from src.domain.models.sorting import SortOptions

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract get / index / save / delete interface for one record type."""

    @abstractmethod
    async def get(self, targets: Any | Iterable[Any]) -> T | None | list[T]:
        """Return the record(s) whose primary key is in targets.

        A single identifier yields the first match or None; a collection of
        identifiers yields a (possibly empty) list in backing-store order.
        """

    @abstractmethod
    async def index(
        self,
        limit: int | None = None,
        page: int = 1,
        sort: SortOptions | None = None,
    ) -> Page[T]:
        """Return one page of records, sorted first when the record type is sortable."""

    @abstractmethod
    async def save(
        self,
        data: Mapping[str, Any] | Any,
        targets: T | Iterable[T] | None = None,
    ) -> T | list[T]:
        """Apply data to each target and persist it.

        With no targets a new record is created.  Returns one record when
        targets was omitted or a single record, otherwise the updated list.
        """

    @abstractmethod
    async def delete(self, targets: Any | Iterable[Any]) -> bool:
        """Remove the given records / identifiers.  True when anything was removed."""
