from __future__ import annotations

import json

from app.domain.models.restaurant import Restaurant
from app.domain.schemas.restaurant import RestaurantFilter
from app.infrastructure.repositories.restaurant_repository import SQLAlchemyRestaurantRepository
from scripts.load_restaurants import load, to_restaurant


def _write(tmp_path, documents):
    path = tmp_path / "restaurants.json"
    path.write_text(json.dumps(documents), encoding="utf-8")
    return str(path)


def test_document_layout_is_mapped():
    restaurant = to_restaurant({
        "_id": {"$oid": "64f0c0ffee"},
        "name": "Sushi Zen",
        "price_level": 3,
        "reservation_required": True,
        "address": {"street": "1 Queen St", "city": "Auckland", "postcode": "1010"},
        "hours": {"Monday": "11:00-21:00"},
    })
    assert restaurant.id == "64f0c0ffee"
    assert restaurant.price_level == 3
    assert restaurant.reservation_required is True
    assert restaurant.address_street == "1 Queen St"
    assert restaurant.hours == {"monday": "11:00-21:00"}
    assert restaurant.upvote_user_ids == []


def test_city_whitespace_is_stripped_on_load(tmp_path, db):
    load(_write(tmp_path, [
        {"id": "r1", "name": "Sushi Zen", "address": {"city": "\u00a0Auckland\t"}},
        {"id": "r2", "name": "Trattoria Roma", "address": {"city": "Wellington"}},
    ]))

    assert db.get(Restaurant, "r1").address_city == "Auckland"
    matches = SQLAlchemyRestaurantRepository(db, Restaurant).get_with_filters(RestaurantFilter(cities=["Auckland"]))
    assert [r.id for r in matches] == ["r1"]


def test_missing_city_stays_empty(tmp_path, db):
    load(_write(tmp_path, [{"id": "r1", "name": "Nowhere"}]))
    assert db.get(Restaurant, "r1").address_city is None


def test_repeated_id_in_one_export_keeps_last_version(tmp_path, db):
    load(_write(tmp_path, [
        {"id": "r1", "name": "Old Name", "cuisine": "Thai"},
        {"id": "r1", "name": "New Name", "cuisine": "Thai"},
    ]))

    rows = db.query(Restaurant).all()
    assert len(rows) == 1
    assert rows[0].name == "New Name"


def test_reload_updates_existing_rows(tmp_path, db):
    path = _write(tmp_path, [{"id": "r1", "name": "Sushi Zen"}])
    load(path)
    load(_write(tmp_path, [{"id": "r1", "name": "Sushi Zen Ponsonby"}]))

    rows = db.query(Restaurant).all()
    assert [r.name for r in rows] == ["Sushi Zen Ponsonby"]
