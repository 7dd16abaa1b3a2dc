"""Sort parameters for listing operations.

SortOptions replaces the request-global sort state a listing would otherwise
read implicitly: the HTTP layer builds one (usually via from_query()) and
hands it to Repository.index().  No column validation happens here; the
Sortable capability on the record type decides which columns it honours.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from .enums import SortDirection

SORT_PARAM = "sort"
DIRECTION_PARAMS = ("direction", "order")


class SortOptions(BaseModel):
    """Requested sort column and direction.

    column=None means "no explicit column"; the record type's default sort
    (if any) applies instead.
    """

    model_config = ConfigDict(frozen=True)

    column: str | None = None
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> SortOptions:
        """Build from query-string parameters (``?sort=name&direction=desc``).

        ``order`` is accepted as an alias for ``direction``.  Unknown
        directions fall back to ascending; a blank or multi-valued ``sort`` is
        treated as absent.
        """
        column = params.get(SORT_PARAM)
        if not isinstance(column, str):
            column = None
        else:
            column = column.strip() or None
        direction = next(
            (params[name] for name in DIRECTION_PARAMS if params.get(name)),
            None,
        )
        return cls(column=column, direction=SortDirection.parse(direction))

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC
