"""Restaurants API routes — list, search, filter, cuisines, detail."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.application.services.restaurant_search_service import filter_restaurants
from app.application.services.restaurant_service import (
    get_cuisines,
    get_restaurant,
    list_restaurants,
    search_restaurants,
)
from app.domain.repositories.restaurant_repository import RestaurantRepository
from app.domain.schemas.restaurant import RestaurantFilter, RestaurantRead
from app.interfaces.deps import get_restaurant_repository

router = APIRouter(prefix="/api/restaurants", tags=["Restaurants"])


@router.get("", response_model=List[RestaurantRead])
def list_all(repo: RestaurantRepository = Depends(get_restaurant_repository)):
    return list_restaurants(repo)


@router.get("/search", response_model=List[RestaurantRead])
def search(
    query: str = "",
    repo: RestaurantRepository = Depends(get_restaurant_repository),
):
    return search_restaurants(repo, query)


@router.get("/filter", response_model=List[RestaurantRead])
def filter_(
    query: Optional[str] = None,
    cuisine: Optional[str] = None,
    price_min: Optional[int] = Query(None, alias="priceMin"),
    price_max: Optional[int] = Query(None, alias="priceMax"),
    reservation: Optional[bool] = None,
    open_now: Optional[bool] = Query(None, alias="openNow"),
    city: Optional[List[str]] = Query(None),
    repo: RestaurantRepository = Depends(get_restaurant_repository),
):
    filters = RestaurantFilter(
        cuisine=cuisine,
        price_min=price_min,
        price_max=price_max,
        reservation_required=reservation,
        open_now=open_now,
        cities=city or [],
    )
    return filter_restaurants(repo, filters, query)


@router.get("/cuisines", response_model=List[str])
def cuisines(repo: RestaurantRepository = Depends(get_restaurant_repository)):
    return get_cuisines(repo)


@router.get("/{restaurant_id}", response_model=RestaurantRead)
def get_one(restaurant_id: str, repo: RestaurantRepository = Depends(get_restaurant_repository)):
    return get_restaurant(repo, restaurant_id)
