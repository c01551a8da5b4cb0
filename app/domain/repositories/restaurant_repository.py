"""
Restaurant Repository Interface.
Defines specific data access operations for Restaurants.
"""

from typing import List, Optional

from app.domain.models.restaurant import Restaurant
from app.domain.repositories.base import BaseRepository
from app.domain.schemas.restaurant import RestaurantFilter


class RestaurantRepository(BaseRepository[Restaurant]):
    """Interface for Restaurant-specific operations."""

    def search(self, query: str) -> List[Restaurant]:
        """Case-insensitive substring match on name, description or cuisine."""
        ...

    def get_with_filters(self, filters: RestaurantFilter) -> List[Restaurant]:
        """Restaurants matching every structured predicate in ``filters``."""
        ...

    def get_all_cuisines(self) -> List[Optional[str]]:
        """Raw cuisine value of every restaurant, nulls and duplicates included."""
        ...
