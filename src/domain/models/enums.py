"""Domain enumerations for the repository layer.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (query-string / Pydantic default behaviour).
"""

from enum import Enum


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: object) -> "SortDirection":
        """Lenient lookup: unknown or missing values fall back to ASC."""
        if not isinstance(value, str):
            return cls.ASC
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.ASC
