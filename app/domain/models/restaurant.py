"""Restaurant domain model — maps to the 'restaurants' table."""

from sqlalchemy import JSON, Boolean, Column, Integer, String, Text

from app.domain.models.user import new_id
from app.infrastructure.database import Base


class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(String(64), primary_key=True, default=new_id)
    name = Column(String(300), nullable=False, index=True)
    description = Column(Text, nullable=True)
    cuisine = Column(String(100), nullable=True, index=True)
    price_level = Column(Integer, nullable=True, index=True)

    # Postal address
    address_street = Column(String(300), nullable=True)
    address_city = Column(String(100), nullable=True, index=True)
    address_postcode = Column(String(20), nullable=True)
    address_country = Column(String(100), nullable=True)

    phone = Column(String(50), nullable=True)
    website = Column(String(500), nullable=True)
    location = Column(JSON, nullable=True)  # GeoJSON point
    images = Column(JSON, nullable=True, default=list)
    tags = Column(JSON, nullable=True, default=list)
    hours = Column(JSON, nullable=True, default=dict)  # "monday" -> "HH:mm-HH:mm"
    reservation_required = Column(Boolean, nullable=True)

    # A user id is in at most one of these
    upvote_user_ids = Column(JSON, nullable=False, default=list)
    downvote_user_ids = Column(JSON, nullable=False, default=list)

    @property
    def address(self) -> dict:
        return {
            "street": self.address_street,
            "city": self.address_city,
            "postcode": self.address_postcode,
            "country": self.address_country,
        }

    @property
    def upvote_count(self) -> int:
        return len(self.upvote_user_ids or [])

    @property
    def downvote_count(self) -> int:
        return len(self.downvote_user_ids or [])

    @property
    def vote_count(self) -> int:
        """Net score: upvotes minus downvotes."""
        return self.upvote_count - self.downvote_count

    def has_user_upvoted(self, user_id: str) -> bool:
        return user_id in (self.upvote_user_ids or [])

    def has_user_downvoted(self, user_id: str) -> bool:
        return user_id in (self.downvote_user_ids or [])

    def __repr__(self):
        return f"<Restaurant {self.id} - {self.name}>"
