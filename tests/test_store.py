from sqlalchemy import inspect

from geocapture.core.db import LocationStore
from geocapture.models.location import Location


def test_init_db_creates_location_table(store: LocationStore):
    store.init_db()

    columns = {col["name"]: col for col in inspect(store.engine).get_columns("Location")}
    assert set(columns) == {"id", "lat", "lng", "accuracy", "userAgent", "createdAt"}
    assert columns["lat"]["nullable"] is False
    assert columns["lng"]["nullable"] is False
    assert columns["accuracy"]["nullable"] is True
    assert columns["userAgent"]["nullable"] is True


def test_create_location_returns_persisted_row(store: LocationStore):
    store.init_db()

    location = store.create_location(lat=51.5, lng=-0.12, accuracy=None, user_agent=None)

    assert location.id == 1
    assert location.created_at is not None
    with store.session() as db:
        row = db.get(Location, location.id)
        assert (row.lat, row.lng, row.accuracy, row.user_agent) == (51.5, -0.12, None, None)


def test_stores_are_independent(settings, tmp_path):
    other = LocationStore(f"sqlite:///{tmp_path / 'other.db'}")
    first = LocationStore(settings.database_url)
    try:
        first.init_db()
        other.init_db()
        first.create_location(lat=1.0, lng=2.0)

        with other.session() as db:
            assert db.query(Location).count() == 0
    finally:
        other.dispose()
        first.dispose()
