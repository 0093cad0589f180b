"""
Geofence: rektangulärt område där vägpunkter får väljas
"""

from dataclasses import dataclass
from typing import List

from config import GEOFENCE_SOUTH_WEST, GEOFENCE_NORTH_EAST, GEOFENCE_NAME

@dataclass(frozen=True)
class Geofence:
    """Fast lat/lon-rektangel, kanterna räknas som innanför"""
    south: float
    west: float
    north: float
    east: float
    name: str = GEOFENCE_NAME

    def contains(self, latitude: float, longitude: float) -> bool:
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east

    def as_bounds(self) -> List[List[float]]:
        return [[self.south, self.west], [self.north, self.east]]

def default_geofence() -> Geofence:
    """Geofence enligt konfigurationen"""
    return Geofence(
        south=GEOFENCE_SOUTH_WEST[0],
        west=GEOFENCE_SOUTH_WEST[1],
        north=GEOFENCE_NORTH_EAST[0],
        east=GEOFENCE_NORTH_EAST[1],
    )
