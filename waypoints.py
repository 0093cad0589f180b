"""
Vägpunkter som användaren valt på kartan
"""

import logging
from typing import List, Optional, Tuple

from config import WAYPOINT_NAME
from errors import OutOfBounds
from geofence import Geofence
from map_utils import MapViewport
from models import Location, Notification, Severity
from notifications import Notifier

logger = logging.getLogger(__name__)

class WaypointStore:
    """
    Ordnad lista med vägpunkter och en markör per punkt

    Punkterna ligger i den ordning de klickades in och varje punkt har
    exakt en markör på kartan. Båda listorna ändras bara här.
    """

    def __init__(self, geofence: Geofence, viewport: MapViewport, notifier: Notifier):
        self.geofence = geofence
        self.viewport = viewport
        self.notifier = notifier
        self._waypoints: List[Location] = []
        self._markers: List[int] = []

    def add(self, latitude: float, longitude: float) -> Optional[Location]:
        """
        Lägg till en vägpunkt om den ligger innanför geofence

        Returns:
            Den nya vägpunkten eller None om klicket avvisades
        """
        if not self.geofence.contains(latitude, longitude):
            error = OutOfBounds(latitude, longitude, self.geofence.name)
            logger.info("Avvisade klick utanför geofence: %.5f, %.5f", latitude, longitude)
            self.notifier.notify(error.to_notification())
            return None

        waypoint = Location(name=WAYPOINT_NAME, latitude=latitude, longitude=longitude)
        marker = self.viewport.add_marker(latitude, longitude, popup=waypoint.name)
        self._waypoints.append(waypoint)
        self._markers.append(marker)

        self.notifier.notify(Notification(
            f"{waypoint.name} vald",
            f"Latitud: {waypoint.latitude}, Longitud: {waypoint.longitude}",
            Severity.SUCCESS
        ))
        return waypoint

    def reset(self) -> None:
        """Ta bort alla vägpunkter och deras markörer"""
        for marker in self._markers:
            self.viewport.remove_marker(marker)
        self._markers = []
        self._waypoints = []

    def list(self) -> Tuple[Location, ...]:
        return tuple(self._waypoints)

    @property
    def marker_count(self) -> int:
        return len(self._markers)

    def __len__(self) -> int:
        return len(self._waypoints)
