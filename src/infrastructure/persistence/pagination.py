"""Length-aware pagination of select statements."""

from __future__ import annotations

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.pagination import Page


async def paginate(
    session: AsyncSession,
    stmt: Select,
    per_page: int,
    page: int = 1,
) -> Page:
    """Execute stmt for one page and count the full result set.

    The count runs over stmt with its ORDER BY stripped.  Pages past the end
    come back empty with the real total.
    """
    if per_page < 1:
        raise ValueError(f"per_page must be a positive integer, got {per_page}")
    if page < 1:
        raise ValueError(f"page must be a positive integer, got {page}")

    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = (await session.execute(count_stmt)).scalar_one()

    rows = await session.execute(stmt.limit(per_page).offset((page - 1) * per_page))
    return Page(
        items=list(rows.scalars()),
        total=total,
        per_page=per_page,
        current_page=page,
    )
