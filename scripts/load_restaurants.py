"""Load restaurants from a JSON export into the database.

Usage: python scripts/load_restaurants.py restaurants.json [--replace]

Each item follows the document layout of the restaurants collection export:
``price_level``, ``reservation_required``, nested ``address`` and a
GeoJSON ``location``. Items with an existing ``id``/``_id`` are updated.
"""

import json
import os
import sys

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.domain.models.restaurant import Restaurant
from app.infrastructure.database import Base, SessionLocal, engine


def _document_id(doc: dict):
    raw = doc.get("id") or doc.get("_id")
    if isinstance(raw, dict):  # {"$oid": "..."}
        raw = raw.get("$oid")
    return str(raw) if raw else None


def to_restaurant(doc: dict, existing: Restaurant | None = None) -> Restaurant:
    address = doc.get("address") or {}
    restaurant = existing or Restaurant(upvote_user_ids=[], downvote_user_ids=[])
    restaurant.id = _document_id(doc) or restaurant.id
    restaurant.name = doc["name"]
    restaurant.description = doc.get("description")
    restaurant.cuisine = doc.get("cuisine")
    restaurant.price_level = doc.get("price_level", doc.get("priceLevel"))
    restaurant.address_street = address.get("street")
    city = address.get("city")
    restaurant.address_city = city.strip() if isinstance(city, str) else city
    restaurant.address_postcode = address.get("postcode")
    restaurant.address_country = address.get("country")
    restaurant.phone = doc.get("phone")
    restaurant.website = doc.get("website")
    restaurant.location = doc.get("location")
    restaurant.images = doc.get("images") or []
    restaurant.tags = doc.get("tags") or []
    restaurant.hours = {k.lower(): v for k, v in (doc.get("hours") or {}).items()}
    restaurant.reservation_required = doc.get("reservation_required", doc.get("reservationRequired"))
    return restaurant


def load(path: str, replace: bool = False):
    with open(path, encoding="utf-8") as fh:
        documents = json.load(fh)

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if replace:
            deleted = db.query(Restaurant).delete()
            print(f"Removed {deleted} existing restaurants.")

        for doc in documents:
            doc_id = _document_id(doc)
            existing = db.get(Restaurant, doc_id) if doc_id else None
            db.add(to_restaurant(doc, existing))
            # Makes a repeated id in the same export visible to db.get
            db.flush()

        db.commit()
        print(f"Loaded {len(documents)} restaurants from {path}.")
    except Exception as e:
        print(f"Load failed: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)
    load(sys.argv[1], replace="--replace" in sys.argv[2:])
