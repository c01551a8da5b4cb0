"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import List, Optional, Protocol, TypeVar

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic document-style persistence."""

    def get_by_id(self, id: str) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def list(self) -> List[T]:
        """List all entities."""
        ...

    def add(self, obj: T) -> T:
        """Insert a new entity."""
        ...

    def save(self, obj: T) -> T:
        """Persist the full state of an entity."""
        ...
