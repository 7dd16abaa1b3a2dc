"""Repository error taxonomy.

Every error is raised synchronously to the immediate caller; nothing in the
repository layer recovers from, retries, or wraps these.  Errors raised by
SQLAlchemy while flushing or executing statements propagate unchanged.
"""


class RepositoryError(Exception):
    """Root of all errors raised by the repository layer."""


class ModelNotSetError(RepositoryError):
    """A repository was constructed without a bound record type."""


class InvalidModelError(RepositoryError, TypeError):
    """A target is neither a collection nor an instance of the bound record type."""


class InvalidResponseDataError(RepositoryError, TypeError):
    """A save payload cannot be converted to a field -> value mapping."""


class MassAssignmentError(RepositoryError, KeyError):
    """A payload key does not name a mapped column on the record."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""
