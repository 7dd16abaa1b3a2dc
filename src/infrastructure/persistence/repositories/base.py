"""SQLAlchemy implementation of Repository bound to one record type."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.exceptions import InvalidModelError, InvalidResponseDataError, ModelNotSetError
from src.domain.models.pagination import Page
from src.domain.models.sorting import SortOptions
from src.domain.repositories.base import Repository
from src.infrastructure.database import Base, settings
from src.infrastructure.persistence.pagination import paginate
from src.infrastructure.persistence.sortable import Sortable

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

IDENTIFIER_TYPES = (int, str, UUID)


class SqlModelRepository(Repository[ModelT]):
    """Generic get / index / save / delete over a single SQLAlchemy model.

    Bind the record type on a subclass:

        class NoteRepository(SqlModelRepository[Note]):
            model = Note

    or per instance with SqlModelRepository(session, model=Note).  The
    constructor argument wins over the class attribute; having neither raises
    ModelNotSetError.

    The repository only adds and flushes.  Commit / rollback belongs to the
    session owner, so a multi-record save() that fails part-way leaves the
    earlier records flushed in the caller's transaction.
    """

    model: type[ModelT] | None = None

    def __init__(self, session: AsyncSession, model: type[ModelT] | None = None) -> None:
        bound = model if model is not None else type(self).model
        if bound is None:
            raise ModelNotSetError(
                f"No model bound to {type(self).__name__}. "
                f"Set `model = YourModel` on the class or pass model= to the constructor."
            )
        try:
            key_name = bound.key_name()
        except ValueError as exc:
            raise InvalidModelError(str(exc)) from exc

        self._session = session
        self.model = bound
        self._key_name = key_name

    @property
    def key_column(self) -> Any:
        """Primary-key column attribute of the bound model."""
        return getattr(self.model, self._key_name)

    def new_model(self) -> ModelT:
        """Blank, transient instance of the bound model."""
        return self.model()

    def new_query(self) -> Select:
        return select(self.model)

    # --- operations ---

    async def get(self, targets: Any | Iterable[Any]) -> ModelT | None | list[ModelT]:
        single = not _is_collection(targets)
        keys = [targets] if single else list(targets)
        if not keys:
            return []

        stmt = self.new_query().where(self.key_column.in_(keys))
        result = await self._session.execute(stmt)
        if single:
            return result.scalars().first()
        return list(result.scalars())

    async def index(
        self,
        limit: int | None = None,
        page: int = 1,
        sort: SortOptions | None = None,
    ) -> Page[ModelT]:
        stmt = self.new_query()
        if issubclass(self.model, Sortable):
            stmt = self.model.sorted(stmt, sort)
        per_page = settings.default_page_size if limit is None else limit
        return await paginate(self._session, stmt, per_page=per_page, page=page)

    async def save(
        self,
        data: Mapping[str, Any] | Any,
        targets: ModelT | Iterable[ModelT] | None = None,
    ) -> ModelT | list[ModelT]:
        single = targets is None or isinstance(targets, self.model)
        records = [self.new_model()] if targets is None else self._to_records(targets)
        values = self._to_values(data)

        for position, record in enumerate(records):
            records[position] = await self._save_one(record, values)

        logger.debug("Saved %d %s record(s)", len(records), self.model.__name__)
        return records[0] if single else records

    async def delete(self, targets: Any | Iterable[Any]) -> bool:
        items = list(targets) if _is_collection(targets) else [targets]
        keys = [self._key_of(item) for item in items]
        keys = [key for key in keys if key is not None]
        if not keys:
            return False

        stmt = delete(self.model).where(self.key_column.in_(keys))
        result = await self._session.execute(stmt)
        logger.debug("Deleted %d %s record(s)", result.rowcount, self.model.__name__)
        return bool(result.rowcount)

    # --- helpers ---

    async def _save_one(self, record: ModelT, values: Mapping[str, Any]) -> ModelT:
        record.fill(values)
        self._session.add(record)
        await self._session.flush()
        return record

    def _to_records(self, targets: Any) -> list[ModelT]:
        """Normalize a record or collection of records to a list, checking types."""
        items = list(targets) if _is_collection(targets) else [targets]
        for item in items:
            if not isinstance(item, self.model):
                raise InvalidModelError(
                    f"Model of class {type(item).__name__} does not match "
                    f"repository's expected {self.model.__name__} class."
                )
        return items

    def _key_of(self, item: Any) -> Any:
        if isinstance(item, self.model):
            return getattr(item, self._key_name)
        if isinstance(item, IDENTIFIER_TYPES) and not isinstance(item, bool):
            return item
        raise InvalidModelError(
            f"Model of class {type(item).__name__} does not match "
            f"repository's expected {self.model.__name__} class."
        )

    @staticmethod
    def _to_values(data: Any) -> dict[str, Any]:
        """Coerce a save payload to a field -> value dict."""
        if isinstance(data, Mapping):
            return dict(data)
        if isinstance(data, BaseModel):
            return data.model_dump()
        to_dict = getattr(data, "to_dict", None)
        if callable(to_dict):
            return dict(to_dict())
        raise InvalidResponseDataError(
            f"The data object of type {type(data).__name__} attempting to be saved "
            f"cannot be converted to a mapping."
        )


def _is_collection(value: Any) -> bool:
    """Any iterable except strings, bytes, mappings and records counts as a collection."""
    if isinstance(value, (str, bytes, bytearray, Mapping, Base)):
        return False
    return isinstance(value, Iterable)
