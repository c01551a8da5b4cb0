"""
SQLAlchemy Implementation of Restaurant Repository.
"""

from typing import List, Optional

from sqlalchemy import func, or_

from app.domain.models.restaurant import Restaurant
from app.domain.repositories.restaurant_repository import RestaurantRepository
from app.domain.schemas.restaurant import RestaurantFilter
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyRestaurantRepository(SQLAlchemyRepository[Restaurant], RestaurantRepository):
    """Restaurant repository implementation using SQLAlchemy."""

    def list(self) -> List[Restaurant]:
        return self.db.query(Restaurant).order_by(Restaurant.name.asc()).all()

    def search(self, query: str) -> List[Restaurant]:
        needle = query.strip().lower()
        return (
            self.db.query(Restaurant)
            .filter(
                or_(
                    func.lower(Restaurant.name).contains(needle, autoescape=True),
                    func.lower(Restaurant.description).contains(needle, autoescape=True),
                    func.lower(Restaurant.cuisine).contains(needle, autoescape=True),
                )
            )
            .order_by(Restaurant.name.asc())
            .all()
        )

    def get_with_filters(self, filters: RestaurantFilter) -> List[Restaurant]:
        """Build one AND-ed query from the structured filter."""
        query = self.db.query(Restaurant)

        if filters.cuisine:
            query = query.filter(
                func.lower(Restaurant.cuisine).contains(filters.cuisine.lower(), autoescape=True)
            )
        if filters.price_min is not None:
            query = query.filter(Restaurant.price_level >= filters.price_min)
        if filters.price_max is not None:
            query = query.filter(Restaurant.price_level <= filters.price_max)
        if filters.reservation_required is not None:
            query = query.filter(Restaurant.reservation_required == filters.reservation_required)
        if filters.cities:
            city = func.lower(func.trim(Restaurant.address_city))
            query = query.filter(or_(*[city == c.lower() for c in filters.cities]))

        return query.order_by(Restaurant.name.asc()).all()

    def get_all_cuisines(self) -> List[Optional[str]]:
        return [r[0] for r in self.db.query(Restaurant.cuisine).all()]
