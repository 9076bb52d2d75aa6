import logging
from decimal import Decimal, ROUND_HALF_UP

from models.trip import Trip
from utils.errors import EmptyLedger, MissingSelection, SameLocation, TripNotFound, UnknownRoute
from utils.export import Report, format_currency

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def _clean(value):
    if value is None:
        return None
    value = str(value).strip()
    return value or None


class Ledger:
    """Ordered trip log for a single owner.

    Every mutation is written to the store before it is applied in memory, so
    a failed write leaves the ledger unchanged. Totals are recomputed from the
    current trips on every call and the reimbursement rate is only applied
    here, never stored on a trip.
    """

    def __init__(self, owner, table, store, rate, trips=None):
        self.owner = owner
        self.table = table
        self.store = store
        self.rate = Decimal(str(rate))
        self._trips = list(trips or [])

    @classmethod
    def load(cls, owner, table, store, rate):
        return cls(owner, table, store, rate, trips=store.load_all(owner))

    @property
    def trips(self):
        return tuple(self._trips)

    @property
    def is_empty(self):
        return not self._trips

    def __len__(self):
        return len(self._trips)

    def add_trip(self, origin, destination):
        origin = _clean(origin)
        destination = _clean(destination)
        if not origin or not destination:
            raise MissingSelection()
        if origin == destination:
            raise SameLocation()

        miles = self.table.lookup(origin, destination)
        if miles is None:
            raise UnknownRoute(f"No mileage data found for {origin} -> {destination}.")

        trip = Trip(origin, destination, miles)
        self.store.append_one(self.owner, trip)
        self._trips.append(trip)
        logger.info(f"Owner {self.owner} logged trip {trip.id}: {origin} -> {destination} ({miles} mi)")
        return trip

    def remove_trip(self, trip_id):
        for index, trip in enumerate(self._trips):
            if trip.id == trip_id:
                break
        else:
            raise TripNotFound()

        self.store.delete_one(self.owner, trip_id)
        del self._trips[index]
        logger.info(f"Owner {self.owner} removed trip {trip_id}")
        return trip

    def remove_all(self):
        count = len(self._trips)
        self.store.clear_all(self.owner)
        self._trips = []
        logger.info(f"Owner {self.owner} cleared {count} trips")
        return count

    def _miles(self):
        return sum((Decimal(str(trip.miles)) for trip in self._trips), Decimal("0"))

    def total_miles(self):
        return float(self._miles())

    def total_reimbursement(self):
        return (self._miles() * self.rate).quantize(CENTS, rounding=ROUND_HALF_UP)

    def summary(self):
        return {
            "trip_count": len(self._trips),
            "total_miles": self.total_miles(),
            "rate": float(self.rate),
            "total_reimbursement": float(self.total_reimbursement()),
        }

    def export_report(self):
        if not self._trips:
            raise EmptyLedger()

        rows = [
            [trip.date.strftime("%Y-%m-%d"), trip.origin, trip.destination, trip.miles]
            for trip in self._trips
        ]
        rows.append([])
        rows.append(["Total Miles", "", "", self.total_miles()])
        rows.append(["Total Reimbursement", "", "", format_currency(self.total_reimbursement())])
        return Report(rows)
