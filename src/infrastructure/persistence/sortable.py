"""Sortable capability for record types.

A record type opts into sorted listings by mixing in Sortable next to Base:

    class Note(Sortable, Base):
        __tablename__ = "notes"
        __sortable__ = ("title", "created_at")
        __default_sort__ = SortOptions(column="created_at", direction=SortDirection.DESC)

Repositories detect the capability with issubclass(model, Sortable) and call
sorted() on their select statement before paginating.  Record types without
the mixin never see sort options.
"""

from __future__ import annotations

import logging

from sqlalchemy import Select, inspect

from src.domain.models.sorting import SortOptions

logger = logging.getLogger(__name__)


class Sortable:
    """Mixin marking a record type as sortable by caller-supplied options.

    __sortable__      column names callers may sort by; empty allows every column
    __default_sort__  applied when the caller names no column (None: unordered)
    """

    __sortable__ = ()
    __default_sort__ = None

    @classmethod
    def sortable_columns(cls) -> tuple[str, ...]:
        columns = tuple(attr.key for attr in inspect(cls).column_attrs)
        if not cls.__sortable__:
            return columns
        return tuple(name for name in cls.__sortable__ if name in columns)

    @classmethod
    def sorted(cls, stmt: Select, options: SortOptions | None = None) -> Select:
        """Return stmt with ORDER BY applied for options (or the default sort)."""
        if options is None or options.column is None:
            options = cls.__default_sort__
        if options is None or options.column is None:
            return stmt

        if options.column not in cls.sortable_columns():
            logger.debug("Ignoring sort on non-sortable column %s.%s", cls.__name__, options.column)
            return stmt

        column = getattr(cls, options.column)
        return stmt.order_by(column.desc() if options.descending else column.asc())
