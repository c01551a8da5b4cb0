"""Restaurant service — listing, lookup, basic search and cuisine discovery."""

from typing import List

from app.core.exceptions import EntityNotFoundException
from app.domain.models.restaurant import Restaurant
from app.domain.repositories.restaurant_repository import RestaurantRepository


def list_restaurants(repo: RestaurantRepository) -> List[Restaurant]:
    return repo.list()


def get_restaurant(repo: RestaurantRepository, restaurant_id: str) -> Restaurant:
    restaurant = repo.get_by_id(restaurant_id)
    if restaurant is None:
        raise EntityNotFoundException(
            "Restaurant not found", details={"restaurant_id": restaurant_id}
        )
    return restaurant


def search_restaurants(repo: RestaurantRepository, query: str | None) -> List[Restaurant]:
    """Match name, description or cuisine; a blank query returns everything."""
    if query is None or not query.strip():
        return repo.list()
    return repo.search(query)


def get_cuisines(repo: RestaurantRepository) -> List[str]:
    """Distinct, sorted cuisine labels with null and blank values dropped."""
    cuisines = {c for c in repo.get_all_cuisines() if c is not None and c.strip()}
    return sorted(cuisines)
