from database.db import db
from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey
from datetime import datetime, timezone
import uuid


def _as_utc(value):
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Trip:
    """One logged journey. Miles are copied from the distance table when the
    trip is created and are not re-derived afterwards."""

    __slots__ = ("id", "origin", "destination", "miles", "date")

    def __init__(self, origin, destination, miles, date=None, id=None):
        self.id = id or uuid.uuid4().hex
        self.origin = origin
        self.destination = destination
        self.miles = miles
        self.date = _as_utc(date) if date else datetime.now(timezone.utc)

    def to_dict(self):
        return {
            "id": self.id,
            "from": self.origin,
            "to": self.destination,
            "miles": self.miles,
            "date": self.date.isoformat(),
        }

    def __repr__(self):
        return f"<Trip {self.origin} -> {self.destination} {self.miles} miles>"


class TripRecord(db.Model):
    __tablename__ = "trips"

    # seq keeps insertion order; id is the public trip identifier
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, nullable=False, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    origin = Column(String(255), nullable=False)
    destination = Column(String(255), nullable=False)
    miles = Column(Float, nullable=False)
    # naive UTC; tzinfo is re-attached in to_trip
    date = Column(DateTime, nullable=False)

    @classmethod
    def from_trip(cls, owner_id, trip):
        return cls(
            id=trip.id,
            owner_id=owner_id,
            origin=trip.origin,
            destination=trip.destination,
            miles=trip.miles,
            date=trip.date.replace(tzinfo=None),
        )

    def to_trip(self):
        return Trip(self.origin, self.destination, self.miles, date=self.date, id=self.id)

    def __repr__(self):
        return f"<TripRecord {self.id} owner={self.owner_id}>"
