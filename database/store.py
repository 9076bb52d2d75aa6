import logging

from sqlalchemy.exc import SQLAlchemyError

from database.db import db
from models.trip import TripRecord
from utils.errors import StorageError

logger = logging.getLogger(__name__)


class TripStore:
    """Persistence contract used by the ledger. Trips come back in the order
    they were appended."""

    def load_all(self, owner):
        raise NotImplementedError

    def append_one(self, owner, trip):
        raise NotImplementedError

    def delete_one(self, owner, trip_id):
        raise NotImplementedError

    def clear_all(self, owner):
        raise NotImplementedError


class MemoryTripStore(TripStore):

    def __init__(self):
        self._trips = {}

    def load_all(self, owner):
        return list(self._trips.get(owner, []))

    def append_one(self, owner, trip):
        self._trips.setdefault(owner, []).append(trip)

    def delete_one(self, owner, trip_id):
        trips = self._trips.get(owner, [])
        for index, trip in enumerate(trips):
            if trip.id == trip_id:
                del trips[index]
                return True
        return False

    def clear_all(self, owner):
        return len(self._trips.pop(owner, []))


class SQLTripStore(TripStore):
    """Stores trips in the ``trips`` table, one row per trip, keyed by owner id."""

    def __init__(self, database=db):
        self.db = database

    def load_all(self, owner):
        try:
            records = (
                self.db.session.query(TripRecord)
                .filter_by(owner_id=owner)
                .order_by(TripRecord.seq.asc())
                .all()
            )
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error(f"Error loading trips for owner {owner}: {e}")
            raise StorageError("Failed to load trips.") from e
        return [record.to_trip() for record in records]

    def append_one(self, owner, trip):
        try:
            self.db.session.add(TripRecord.from_trip(owner, trip))
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error(f"Error saving trip {trip.id} for owner {owner}: {e}")
            raise StorageError("Failed to save trip.") from e

    def delete_one(self, owner, trip_id):
        try:
            deleted = (
                self.db.session.query(TripRecord)
                .filter_by(owner_id=owner, id=trip_id)
                .delete()
            )
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error(f"Error deleting trip {trip_id} for owner {owner}: {e}")
            raise StorageError("Failed to delete trip.") from e
        return deleted > 0

    def clear_all(self, owner):
        try:
            deleted = self.db.session.query(TripRecord).filter_by(owner_id=owner).delete()
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error(f"Error clearing trips for owner {owner}: {e}")
            raise StorageError("Failed to clear trips.") from e
        return deleted
