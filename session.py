"""
Sessionens tillstånd: kopplar ihop vägpunkter, vägsökning och karta
"""

from dataclasses import dataclass, field
from typing import Optional

from geofence import Geofence, default_geofence
from map_utils import MapViewport
from models import Notification, Severity, StitchedPath
from notifications import Notifier, StreamlitNotifier
from overlay import RouteGeometryOverlay
from pathfinding import PathfinderClient, PathOrchestrator
from routing_providers import OSRMRouteProvider, RoutingProvider
from waypoints import WaypointStore

class SessionReset:
    """Rensar vägpunkter, markörer och ritade rutter"""

    def __init__(self, planner: "RoutePlanner"):
        self.planner = planner

    def reset(self) -> None:
        self.planner.waypoints.reset()
        self.planner.overlay.clear()
        self.planner.result = None
        self.planner.notifier.notify(Notification(
            "Kartan återställd",
            "Välj nya vägpunkter.",
            Severity.INFO
        ))

@dataclass
class RoutePlanner:
    """Allt tillstånd för en användares session"""
    geofence: Geofence
    viewport: MapViewport
    notifier: Notifier
    waypoints: WaypointStore
    overlay: RouteGeometryOverlay
    orchestrator: PathOrchestrator
    result: Optional[StitchedPath] = None
    last_click: Optional[tuple] = field(default=None, repr=False)

    def handle_click(self, lat: float, lon: float) -> bool:
        """
        Ta emot ett klick från kartan, varje klick hanteras bara en gång

        Returns:
            True om klicket var nytt
        """
        click = (lat, lon)
        if click == self.last_click:
            return False
        self.last_click = click
        self.waypoints.add(lat, lon)
        return True

    def find_path(self) -> Optional[StitchedPath]:
        return self.orchestrator.find_path(self.waypoints.list())

    def reset(self) -> None:
        SessionReset(self).reset()

    def _store_result(self, stitched: StitchedPath) -> None:
        self.result = stitched

def build_planner(
    notifier: Optional[Notifier] = None,
    client: Optional[PathfinderClient] = None,
    provider: Optional[RoutingProvider] = None,
    geofence: Optional[Geofence] = None,
    strict_adjacency: Optional[bool] = None
) -> RoutePlanner:
    """Skapa en tom planerare med standardtjänster där inget annat anges"""
    geofence = geofence or default_geofence()
    notifier = notifier or StreamlitNotifier()
    viewport = MapViewport(max_bounds=geofence.as_bounds())
    waypoints = WaypointStore(geofence, viewport, notifier)
    overlay = RouteGeometryOverlay(viewport, provider or OSRMRouteProvider(), notifier)

    options = {}
    if strict_adjacency is not None:
        options["strict_adjacency"] = strict_adjacency
    orchestrator = PathOrchestrator(client or PathfinderClient(), overlay, notifier, **options)

    planner = RoutePlanner(
        geofence=geofence,
        viewport=viewport,
        notifier=notifier,
        waypoints=waypoints,
        overlay=overlay,
        orchestrator=orchestrator,
    )
    orchestrator.on_path_found = planner._store_result
    return planner
