import json
import logging
from collections import namedtuple

logger = logging.getLogger(__name__)


class Route(namedtuple("Route", ["origin", "destination", "miles"])):
    __slots__ = ()

    def connects(self, a, b):
        return (self.origin == a and self.destination == b) or (
            self.origin == b and self.destination == a
        )


class DistanceTable:
    """Read-only set of known routes between schools.

    Lookups are symmetric: a route stored as (X, Y) answers for (Y, X) too.
    When more than one entry matches, the first one in table order wins.
    """

    def __init__(self, routes):
        routes = tuple(routes)
        for route in routes:
            if route.miles < 0:
                raise ValueError(
                    f"Negative distance for route {route.origin} -> {route.destination}"
                )
        self._routes = routes

    @classmethod
    def from_records(cls, records):
        routes = []
        for index, record in enumerate(records):
            try:
                routes.append(Route(record["from"], record["to"], float(record["miles"])))
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"Invalid mileage record at position {index}: {e}") from e
        return cls(routes)

    @classmethod
    def from_json(cls, path):
        with open(path, encoding="utf-8") as f:
            records = json.load(f)
        table = cls.from_records(records)
        logger.info(f"Loaded {len(table)} routes from {path}")
        return table

    def __len__(self):
        return len(self._routes)

    def list_origins(self):
        return sorted({route.origin for route in self._routes})

    def list_destinations(self):
        return sorted({route.destination for route in self._routes})

    def lookup(self, a, b):
        """Return the miles between two schools, or None when no route is known."""
        for route in self._routes:
            if route.connects(a, b):
                return route.miles
        return None
