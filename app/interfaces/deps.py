"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.domain.models.restaurant import Restaurant
from app.domain.models.user import User
from app.domain.repositories.restaurant_repository import RestaurantRepository
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.database import get_db
from app.infrastructure.repositories.restaurant_repository import SQLAlchemyRestaurantRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_restaurant_repository(db: Session = Depends(get_db)) -> RestaurantRepository:
    """Get restaurant repository instance."""
    return SQLAlchemyRestaurantRepository(db, Restaurant)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)
