import pytest

from errors import RoutingServiceError
from geofence import default_geofence
from map_utils import MapViewport
from models import Location
from notifications import Notifier
from overlay import RouteGeometryOverlay
from pathfinding import PathOrchestrator
from waypoints import WaypointStore


class RecordingNotifier(Notifier):
    def __init__(self):
        self.notifications = []

    def notify(self, notification):
        self.notifications.append(notification)

    @property
    def titles(self):
        return [n.title for n in self.notifications]


class FakePathfinderClient:
    """Returns scripted responses in order; an Exception instance is raised instead."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def find_segment(self, start, end):
        self.calls.append((start, end))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeRoutingProvider:
    """Straight two-point geometry per hop, unless the hop index is listed as failing."""

    def __init__(self, failing_hops=(), empty_hops=()):
        self.failing_hops = set(failing_hops)
        self.empty_hops = set(empty_hops)
        self.calls = []

    def get_route_geometry(self, start, end):
        hop = len(self.calls)
        self.calls.append((start, end))
        if hop in self.failing_hops:
            raise RoutingServiceError("connection refused")
        if hop in self.empty_hops:
            return None
        return [(start.latitude, start.longitude), (end.latitude, end.longitude)]


def node(name, lat, lon):
    return {"name": name, "latitude": lat, "longitude": lon}


def loc(name, lat, lon):
    return Location(name, lat, lon)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def viewport():
    return MapViewport()


@pytest.fixture
def geofence():
    return default_geofence()


@pytest.fixture
def store(geofence, viewport, notifier):
    return WaypointStore(geofence, viewport, notifier)


@pytest.fixture
def provider():
    return FakeRoutingProvider()


@pytest.fixture
def overlay(viewport, provider, notifier):
    return RouteGeometryOverlay(viewport, provider, notifier)


@pytest.fixture
def make_orchestrator(overlay, notifier):
    def _make(responses, strict=False):
        client = FakePathfinderClient(responses)
        found = []
        orchestrator = PathOrchestrator(
            client, overlay, notifier, on_path_found=found.append, strict_adjacency=strict
        )
        return orchestrator, client, found
    return _make
