"""
Decoder world model - locations, artifacts, signals and decode recipes.

Raw signal strings ("name: detail") are parsed into Signal records once,
when the world is loaded. Lookups never split strings afterwards.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class RiskTier(Enum):
    """Ordered risk tiers. The value is the energy cost to enter."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"

    @property
    def cost(self) -> int:
        return _TIER_COSTS[self]

    def __lt__(self, other: RiskTier) -> bool:
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.cost < other.cost


_TIER_COSTS = {
    RiskTier.LOW: 1,
    RiskTier.MEDIUM: 2,
    RiskTier.HIGH: 3,
    RiskTier.VERY_HIGH: 4,
}

SIGNAL_DELIMITER = ":"


def signal_name(text: str) -> str:
    """Short name of a signal reference: the part before the delimiter."""
    return text.split(SIGNAL_DELIMITER, 1)[0].strip()


@dataclass(frozen=True)
class Signal:
    """A clue available at a location."""
    name: str
    detail: str

    @classmethod
    def parse(cls, raw: str) -> Signal:
        name, _, detail = raw.partition(SIGNAL_DELIMITER)
        return cls(name=name.strip(), detail=detail.strip())

    @property
    def raw(self) -> str:
        return f"{self.name}{SIGNAL_DELIMITER} {self.detail}"

    def matches(self, reference: str) -> bool:
        """True for the short name, a "name: ..." reference, or the exact raw string."""
        return reference == self.raw or signal_name(reference) == self.name


@dataclass(frozen=True)
class SignalPair:
    """Unordered pair of signal names. (a, b) and (b, a) are equal."""
    first: str
    second: str

    @classmethod
    def of(cls, a: str, b: str) -> SignalPair:
        low, high = sorted((a, b))
        return cls(first=low, second=high)

    @property
    def key(self) -> str:
        return f"{self.first}+{self.second}"


@dataclass(frozen=True)
class DecodeRecipe:
    """Result of decoding a compatible signal pair."""
    pair: SignalPair
    decoded: str
    value: int
    bonus: str


@dataclass(frozen=True)
class Artifact:
    artifact_id: str
    value: int
    category: str
    aids_in: tuple[str, ...]
    hint: str


@dataclass
class Location:
    """
    A place on the map.

    connections is the outgoing adjacency list. Traversal only ever
    consults the current location's own list.
    """
    location_id: str
    description: str
    risk: RiskTier
    connections: list[str]
    signals: list[Signal] = field(default_factory=list)
    artifacts: list[str] = field(default_factory=list)
    explored: bool = False

    @property
    def entry_cost(self) -> int:
        return self.risk.cost

    def find_signal(self, reference: str) -> Signal | None:
        for signal in self.signals:
            if signal.matches(reference):
                return signal
        return None

    def has_signal_marker(self, markers: tuple[str, ...]) -> bool:
        """True if any signal's raw text contains one of the markers."""
        return any(marker in signal.raw for signal in self.signals for marker in markers)


@dataclass
class World:
    """
    Static and mutable world data for one game instance.

    Locations are mutable (explored flag, remaining artifacts);
    artifacts and recipes are fixed.
    """
    locations: dict[str, Location]
    artifacts: dict[str, Artifact]
    recipes: dict[SignalPair, DecodeRecipe]

    def location(self, location_id: str) -> Location | None:
        return self.locations.get(location_id)

    def artifact(self, artifact_id: str) -> Artifact | None:
        return self.artifacts.get(artifact_id)

    def recipe_for(self, a: str, b: str) -> DecodeRecipe | None:
        """Commutative recipe lookup."""
        return self.recipes.get(SignalPair.of(a, b))
