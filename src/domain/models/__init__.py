"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .enums import SortDirection
from .pagination import Page
from .sorting import SortOptions

__all__ = [
    # enums
    "SortDirection",
    # listing
    "Page",
    "SortOptions",
]
