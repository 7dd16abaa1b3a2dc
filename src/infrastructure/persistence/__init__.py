"""Persistence package.

Exports the repository implementation, the Sortable record capability, the
paginator, and the DI factory.
"""

from src.infrastructure.persistence.pagination import paginate
from src.infrastructure.persistence.repositories import (
    SqlModelRepository,
    get_repository,
)
from src.infrastructure.persistence.sortable import Sortable

__all__ = [
    "Sortable",
    "SqlModelRepository",
    "get_repository",
    "paginate",
]
