"""
Ritar den sammanfogade vägen som vägföljande linjer på kartan
"""

import logging
from typing import List, Optional, Tuple

from config import FIT_BOUNDS_PADDING, ROUTE_COLOR, ROUTE_WEIGHT
from errors import OverlayHopFailure, RoutingServiceError
from map_utils import MapViewport
from models import BoundingBox, Notification, Severity, StitchedPath
from notifications import Notifier
from routing_providers import RoutingProvider

logger = logging.getLogger(__name__)

class RouteGeometryOverlay:
    """
    Linjer för varje delsträcka i den sammanfogade vägen

    Äger sina linjer och sin bounding box. Allt rensas innan en ny väg ritas,
    så inga gamla linjer blir kvar mellan körningar. Ett misslyckat anrop
    för en delsträcka stoppar inte resten.
    """

    def __init__(
        self,
        viewport: MapViewport,
        provider: RoutingProvider,
        notifier: Notifier,
        padding: Tuple[int, int] = FIT_BOUNDS_PADDING
    ):
        self.viewport = viewport
        self.provider = provider
        self.notifier = notifier
        self.padding = padding
        self._polylines: List[int] = []
        self.bounds: Optional[BoundingBox] = None

    @property
    def polyline_count(self) -> int:
        return len(self._polylines)

    def clear(self) -> None:
        for polyline in self._polylines:
            self.viewport.remove_polyline(polyline)
        self._polylines = []
        self.bounds = None
        self.viewport.clear_fit()

    def render(self, stitched: StitchedPath) -> BoundingBox:
        """
        Rita vägen delsträcka för delsträcka och zooma till resultatet

        Args:
            stitched: Sammanfogad väg

        Returns:
            Bounding box för allt som ritades (tom om inget ritades)
        """
        self.clear()
        bounds = BoundingBox()
        self.bounds = bounds

        path = stitched.path
        if len(path) < 2:
            return bounds

        for i in range(len(path) - 1):
            start, end = path[i], path[i + 1]
            try:
                coords = self.provider.get_route_geometry(start, end)
            except RoutingServiceError as e:
                logger.warning("Delsträcka %d kunde inte hämtas: %s", i + 1, e)
                self.notifier.notify(OverlayHopFailure(i).to_notification())
                continue

            if not coords:
                self.notifier.notify(Notification(
                    "Ingen väggeometri",
                    f"OSRM hittade ingen rutt för delsträcka {i + 1}",
                    Severity.INFO
                ))
                continue

            self._polylines.append(
                self.viewport.add_polyline(coords, ROUTE_COLOR, ROUTE_WEIGHT)
            )
            for lat, lon in coords:
                bounds.extend(lat, lon)

        if bounds.is_valid():
            self.viewport.fit_bounds(bounds, self.padding)

        return bounds
