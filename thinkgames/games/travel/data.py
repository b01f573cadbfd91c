"""
Travel world database: cities and routes.

Route keys read "origin-destination" with an optional "_mode" suffix for
cheaper alternatives ("paris-capetown_train").
"""

from __future__ import annotations
from dataclasses import dataclass

START_CITY = "newyork"
REQUIRED_CITIES = ("paris", "tokyo", "sydney", "rio", "capetown")


@dataclass(frozen=True)
class City:
    city_id: str
    name: str
    region: str
    value: int  # Points for the first visit
    description: str


@dataclass(frozen=True)
class Route:
    key: str
    origin: str
    destination: str
    mode: str | None
    cost: int
    time: int  # Steps consumed
    description: str

    @classmethod
    def parse(cls, key: str, cost: int, time: int, description: str) -> Route:
        origin, _, rest = key.partition("-")
        destination, _, mode = rest.partition("_")
        return cls(
            key=key,
            origin=origin,
            destination=destination,
            mode=mode or None,
            cost=cost,
            time=time,
            description=description,
        )


CITIES = {
    city.city_id: city
    for city in [
        City("newyork", "New York", "North America", 50, "Starting city - financial capital"),
        City("paris", "Paris", "Europe", 150, "City of lights - cultural hub"),
        City("tokyo", "Tokyo", "Asia", 200, "Modern metropolis - tech center"),
        City("sydney", "Sydney", "Australia", 120, "Harbor city - natural beauty"),
        City("rio", "Rio de Janeiro", "South America", 130, "Carnival city - vibrant culture"),
        City("capetown", "Cape Town", "Africa", 110, "Cape city - scenic landscapes"),
    ]
}

# key -> (cost, time, description)
_ROUTE_TABLE = {
    "newyork-paris": (800, 1, "Transatlantic flight"),
    "newyork-tokyo": (1200, 2, "Long-haul flight"),
    "newyork-rio": (900, 1, "South America flight"),
    "paris-tokyo": (1000, 2, "Europe-Asia flight"),
    "paris-sydney": (1100, 2, "Europe-Australia flight"),
    "paris-capetown": (850, 1, "Europe-Africa flight"),
    "tokyo-sydney": (600, 1, "Asia-Pacific flight"),
    "tokyo-capetown": (950, 2, "Asia-Africa flight"),
    "sydney-capetown": (700, 1, "Southern route flight"),
    "rio-capetown": (750, 1, "Atlantic crossing flight"),
    "rio-sydney": (1050, 2, "South America-Australia flight"),
    # Cheaper alternatives
    "paris-capetown_train": (400, 3, "Scenic train route"),
    "newyork-rio_bus": (150, 4, "Cross-country bus"),
    "tokyo-sydney_bus": (200, 5, "Budget overland route"),
}

ROUTES = {key: Route.parse(key, *entry) for key, entry in _ROUTE_TABLE.items()}
