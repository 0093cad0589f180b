"""
Datamodeller för ruttplaneraren
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

@dataclass(frozen=True)
class Location:
    """En punkt: vald vägpunkt eller nod från sökservicen"""
    name: str
    latitude: float
    longitude: float

@dataclass
class PathSegmentResult:
    """Resultat av en sökning mellan två vägpunkter"""
    path: List[Location]
    total_cost: float

@dataclass
class StitchedPath:
    """Alla delsträckor sammanfogade till en väg"""
    path: List[Location] = field(default_factory=list)
    total_cost: float = 0.0

class BoundingBox:
    """Växande rektangel (lat/lon) runt alla ritade koordinater"""

    def __init__(self):
        self.south: Optional[float] = None
        self.west: Optional[float] = None
        self.north: Optional[float] = None
        self.east: Optional[float] = None

    def extend(self, lat: float, lon: float) -> None:
        if not self.is_valid():
            self.south = self.north = lat
            self.west = self.east = lon
            return
        self.south = min(self.south, lat)
        self.north = max(self.north, lat)
        self.west = min(self.west, lon)
        self.east = max(self.east, lon)

    def is_valid(self) -> bool:
        return self.south is not None

    def as_bounds(self) -> List[List[float]]:
        """[[syd, väst], [nord, öst]] som folium förväntar sig"""
        return [[self.south, self.west], [self.north, self.east]]

class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"

@dataclass(frozen=True)
class Notification:
    """Ett meddelande till användaren"""
    title: str
    description: str = ""
    severity: Severity = Severity.INFO

