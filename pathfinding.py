"""
Vägsökning mellan vägpunkter via den externa sökservicen

Varje par av intilliggande vägpunkter skickas som en egen förfrågan.
Delresultaten sammanfogas till en väg med total kostnad.
"""

import logging
import requests
from typing import Callable, List, Optional, Sequence

from config import PATHFINDER_BASE_URL, REQUEST_TIMEOUT, STRICT_SEGMENT_ADJACENCY
from errors import (
    InsufficientWaypoints,
    InvalidSegmentData,
    RoutePlannerError,
    SegmentUnreachable,
    TransportFailure,
)
from models import Location, PathSegmentResult, StitchedPath
from notifications import Notifier
from overlay import RouteGeometryOverlay

logger = logging.getLogger(__name__)

NODE_FIELDS = ("name", "latitude", "longitude")

class PathfinderClient:
    """HTTP-klient mot sökservicens /api/find-path"""

    def __init__(self, base_url: str = PATHFINDER_BASE_URL, timeout: float = REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def find_segment(self, start: Location, end: Location) -> dict:
        """
        Hämta väg mellan två punkter

        Returns:
            JSON-svaret som dict ({"path": [...], "totalCost": ...})

        Raises:
            TransportFailure: vid nätverksfel, status utanför 2xx eller ogiltig JSON
        """
        url = f"{self.base_url}/api/find-path"
        params = {
            "start": f"{start.latitude},{start.longitude}",
            "end": f"{end.latitude},{end.longitude}"
        }

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportFailure() from e

        if not response.ok:
            logger.warning("Sökservicen svarade %s: %s", response.status_code, response.reason)
            raise TransportFailure()

        try:
            return response.json()
        except ValueError as e:
            raise TransportFailure() from e

def parse_segment(data: dict, segment_index: int) -> PathSegmentResult:
    """
    Tolka svaret för en delsträcka

    Noder med saknade fält (null) eller koordinater som inte är tal filtreras bort.

    Raises:
        SegmentUnreachable: om svaret saknar väg (inte fatalt)
        InvalidSegmentData: om filtreringen tog bort alla noder eller kostnaden är ogiltig (fatalt)
    """
    nodes = data.get("path") if isinstance(data, dict) else None
    if not nodes:
        raise SegmentUnreachable(segment_index)

    path = [location for location in map(_parse_node, nodes) if location is not None]
    if not path:
        raise InvalidSegmentData(segment_index)

    try:
        total_cost = float(data.get("totalCost") or 0)
    except (TypeError, ValueError) as e:
        raise InvalidSegmentData(segment_index, "Vägens kostnad är inte ett tal.") from e

    return PathSegmentResult(path=path, total_cost=total_cost)

def _parse_node(node) -> Optional[Location]:
    """Nod som Location, None om ett fält saknas eller koordinaterna inte är tal"""
    if not isinstance(node, dict) or any(node.get(key) is None for key in NODE_FIELDS):
        return None
    try:
        return Location(
            name=node["name"],
            latitude=float(node["latitude"]),
            longitude=float(node["longitude"])
        )
    except (TypeError, ValueError):
        logger.debug("Hoppar över nod med ogiltiga koordinater: %s", node)
        return None

def stitch_segment(
    running: List[Location],
    segment: List[Location],
    segment_index: int,
    strict: bool = False
) -> List[Location]:
    """
    Lägg till en delsträcka till vägen hittills

    Första bidragande delsträckan används som den är. Senare delsträckor
    läggs till utan sin första nod, som förväntas vara samma som vägens sista.
    """
    if not running:
        return list(segment)

    if strict and segment[0] != running[-1]:
        raise InvalidSegmentData(
            segment_index,
            f"Delsträcka {segment_index + 1} börjar inte där föregående slutade."
        )
    return running + list(segment[1:])

class PathOrchestrator:
    """Hämtar och sammanfogar alla delsträckor i tur och ordning"""

    def __init__(
        self,
        client: PathfinderClient,
        overlay: RouteGeometryOverlay,
        notifier: Notifier,
        on_path_found: Optional[Callable[[StitchedPath], None]] = None,
        strict_adjacency: bool = STRICT_SEGMENT_ADJACENCY
    ):
        self.client = client
        self.overlay = overlay
        self.notifier = notifier
        self.on_path_found = on_path_found
        self.strict_adjacency = strict_adjacency

    def build_stitched_path(self, waypoints: Sequence[Location]) -> StitchedPath:
        """
        Hämta alla delsträckor och sammanfoga dem

        Delsträckor utan väg rapporteras och hoppas över. Fatala fel kastas.
        """
        if len(waypoints) < 2:
            raise InsufficientWaypoints()

        path: List[Location] = []
        total_cost = 0.0

        for i in range(len(waypoints) - 1):
            logger.debug("Hämtar delsträcka %d av %d", i + 1, len(waypoints) - 1)
            data = self.client.find_segment(waypoints[i], waypoints[i + 1])

            try:
                segment = parse_segment(data, i)
            except SegmentUnreachable as e:
                self.notifier.notify(e.to_notification())
                continue

            path = stitch_segment(path, segment.path, i, strict=self.strict_adjacency)
            total_cost += segment.total_cost

        return StitchedPath(path=path, total_cost=total_cost)

    def find_path(self, waypoints: Sequence[Location]) -> Optional[StitchedPath]:
        """
        Hitta väg genom alla vägpunkter och rita den på kartan

        Returns:
            StitchedPath eller None vid fatalt fel (användaren har då fått ett meddelande)
        """
        self.overlay.clear()

        try:
            stitched = self.build_stitched_path(waypoints)
        except RoutePlannerError as e:
            logger.warning("Vägsökning avbruten: %s", e)
            self.notifier.notify(e.to_notification())
            return None

        self.overlay.render(stitched)

        if self.on_path_found:
            self.on_path_found(stitched)

        return stitched
