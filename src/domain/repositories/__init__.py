"""Domain repository interfaces.

The abstraction is defined here with abc.ABC and @abstractmethod.
The concrete implementation lives in src/infrastructure/persistence/ and is
wired at the application boundary via dependency injection.

Import from this package rather than individual modules to avoid coupling
handlers to specific repository module paths.
"""

from .base import Repository

__all__ = [
    "Repository",
]
