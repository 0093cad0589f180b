import pytest
import requests

from errors import (
    InsufficientWaypoints,
    InvalidSegmentData,
    SegmentUnreachable,
    TransportFailure,
)
from models import Severity
from pathfinding import PathfinderClient, parse_segment, stitch_segment

from conftest import loc, node


W1 = loc("Waypoint", 22.0, 71.0)
W2 = loc("Waypoint", 22.5, 71.5)
W3 = loc("Waypoint", 23.0, 72.0)
W4 = loc("Waypoint", 23.5, 72.5)


# --- parse_segment / stitch_segment ---

def test_parse_segment_filters_null_fields():
    data = {
        "path": [node("A", 22.0, 71.0), node(None, 22.1, 71.1), node("C", None, 71.2), node("D", 22.3, 71.3)],
        "totalCost": 1200,
    }
    segment = parse_segment(data, 0)

    assert [n.name for n in segment.path] == ["A", "D"]
    assert segment.total_cost == 1200.0


@pytest.mark.parametrize("data", [{"path": [], "totalCost": 0}, {"totalCost": 10}, {"path": None}])
def test_parse_segment_without_path_is_unreachable(data):
    with pytest.raises(SegmentUnreachable) as excinfo:
        parse_segment(data, 1)
    assert excinfo.value.segment_index == 1
    assert not excinfo.value.fatal


def test_parse_segment_with_only_null_nodes_is_invalid():
    with pytest.raises(InvalidSegmentData) as excinfo:
        parse_segment({"path": [node("A", None, 71.0), {"name": "B"}], "totalCost": 5}, 0)
    assert excinfo.value.fatal


def test_stitch_removes_boundary_duplicate_once():
    p0, p1, p2, p3 = loc("p0", 1, 1), loc("p1", 2, 2), loc("p2", 3, 3), loc("p3", 4, 4)

    running = stitch_segment([], [p0, p1, p2], 0)
    running = stitch_segment(running, [p2, p3], 1)

    assert running == [p0, p1, p2, p3]


def test_stitch_strict_rejects_disconnected_segment():
    with pytest.raises(InvalidSegmentData):
        stitch_segment([loc("A", 1, 1)], [loc("X", 5, 5), loc("Y", 6, 6)], 2, strict=True)


def test_stitch_best_effort_drops_first_node_even_if_disconnected():
    result = stitch_segment([loc("A", 1, 1)], [loc("X", 5, 5), loc("Y", 6, 6)], 2)
    assert [n.name for n in result] == ["A", "Y"]


# --- PathOrchestrator ---

@pytest.mark.parametrize("waypoints", [[], [W1]])
def test_fewer_than_two_waypoints_makes_no_calls(make_orchestrator, notifier, waypoints):
    orchestrator, client, found = make_orchestrator([])

    assert orchestrator.find_path(waypoints) is None
    assert client.calls == []
    assert found == []
    assert notifier.titles == [InsufficientWaypoints.title]

    with pytest.raises(InsufficientWaypoints):
        orchestrator.build_stitched_path(waypoints)


def test_single_segment(make_orchestrator, provider):
    response = {"path": [node("A", 22.0, 71.0), node("B", 22.2, 71.2), node("C", 22.5, 71.5)], "totalCost": 5000}
    orchestrator, client, found = make_orchestrator([response])

    stitched = orchestrator.find_path([W1, W2])

    assert [n.name for n in stitched.path] == ["A", "B", "C"]
    assert stitched.total_cost == 5000
    assert client.calls == [(W1, W2)]
    assert found == [stitched]
    assert len(provider.calls) == 2


def test_segments_are_stitched_and_costs_summed(make_orchestrator):
    responses = [
        {"path": [node("A", 22.0, 71.0), node("B", 22.2, 71.2)], "totalCost": 1000},
        {"path": [node("B", 22.2, 71.2), node("C", 22.6, 71.6), node("D", 23.0, 72.0)], "totalCost": 2500},
        {"path": [node("D", 23.0, 72.0), node("E", 23.5, 72.5)], "totalCost": 500},
    ]
    orchestrator, client, _ = make_orchestrator(responses, strict=True)

    stitched = orchestrator.find_path([W1, W2, W3, W4])

    assert [n.name for n in stitched.path] == ["A", "B", "C", "D", "E"]
    assert stitched.total_cost == 4000
    assert client.calls == [(W1, W2), (W2, W3), (W3, W4)]


def test_unreachable_segment_is_skipped(make_orchestrator, notifier):
    responses = [
        {"path": [node("A", 22.0, 71.0), node("B", 22.5, 71.5)], "totalCost": 3000},
        {"path": [], "totalCost": 0},
    ]
    orchestrator, client, found = make_orchestrator(responses)

    stitched = orchestrator.find_path([W1, W2, W3])

    assert [n.name for n in stitched.path] == ["A", "B"]
    assert stitched.total_cost == 3000
    assert len(client.calls) == 2
    assert notifier.titles == ["Ingen väg hittades mellan punkt 2 och 3"]
    assert found == [stitched]


def test_first_contributing_segment_is_taken_verbatim(make_orchestrator):
    responses = [
        {"path": []},
        {"path": [node("B", 22.5, 71.5), node("C", 23.0, 72.0)], "totalCost": 700},
    ]
    orchestrator, _, _ = make_orchestrator(responses)

    stitched = orchestrator.find_path([W1, W2, W3])

    assert [n.name for n in stitched.path] == ["B", "C"]
    assert stitched.total_cost == 700


def test_all_segments_unreachable_gives_empty_path(make_orchestrator, notifier, viewport):
    orchestrator, _, found = make_orchestrator([{"path": []}, {"path": []}])

    stitched = orchestrator.find_path([W1, W2, W3])

    assert stitched.path == []
    assert stitched.total_cost == 0
    assert len(notifier.notifications) == 2
    assert viewport.polylines == []
    assert found == [stitched]


def test_transport_failure_aborts_remaining_segments(make_orchestrator, notifier, provider):
    responses = [
        {"path": [node("A", 22.0, 71.0), node("B", 22.5, 71.5)], "totalCost": 3000},
        TransportFailure(),
        {"path": [node("C", 23.0, 72.0), node("D", 23.5, 72.5)], "totalCost": 100},
    ]
    orchestrator, client, found = make_orchestrator(responses)

    assert orchestrator.find_path([W1, W2, W3, W4]) is None

    assert len(client.calls) == 2
    assert found == []
    assert provider.calls == []
    assert notifier.titles == [TransportFailure.title]


def test_invalid_segment_data_is_fatal(make_orchestrator, notifier, provider):
    responses = [
        {"path": [node("A", 22.0, 71.0), node("B", 22.5, 71.5)], "totalCost": 3000},
        {"path": [node(None, None, None)], "totalCost": 10},
        {"path": [node("C", 23.0, 72.0)], "totalCost": 100},
    ]
    orchestrator, client, found = make_orchestrator(responses)

    assert orchestrator.find_path([W1, W2, W3, W4]) is None
    assert len(client.calls) == 2
    assert found == []
    assert provider.calls == []
    assert notifier.titles == [InvalidSegmentData.title]
    assert notifier.notifications[0].severity == Severity.ERROR


def test_node_with_non_numeric_coordinates_is_filtered(make_orchestrator, notifier):
    responses = [
        {"path": [node("A", 22.0, 71.0), node("B", "n/a", 71.5), node("C", 22.5, 71.5)], "totalCost": 1},
    ]
    orchestrator, _, found = make_orchestrator(responses)

    stitched = orchestrator.find_path([W1, W2])

    assert [n.name for n in stitched.path] == ["A", "C"]
    assert notifier.notifications == []
    assert found == [stitched]


@pytest.mark.parametrize("response", [
    {"path": [node("B", "n/a", 71.5), node("C", 22.5, [71.5])], "totalCost": 1},
    {"path": [node("A", 22.0, 71.0)], "totalCost": "fem"},
    {"path": [node("A", 22.0, 71.0)], "totalCost": {"km": 5}},
])
def test_unparseable_segment_data_is_fatal(make_orchestrator, notifier, provider, response):
    orchestrator, client, found = make_orchestrator([response, response])

    assert orchestrator.find_path([W1, W2, W3]) is None

    assert len(client.calls) == 1
    assert found == []
    assert provider.calls == []
    assert notifier.titles == [InvalidSegmentData.title]


def test_strict_adjacency_after_skipped_segment(make_orchestrator, notifier):
    responses = [
        {"path": [node("A", 22.0, 71.0), node("B", 22.5, 71.5)], "totalCost": 1},
        {"path": []},
        {"path": [node("C", 23.0, 72.0), node("D", 23.5, 72.5)], "totalCost": 1},
    ]
    orchestrator, _, _ = make_orchestrator(responses, strict=True)

    assert orchestrator.find_path([W1, W2, W3, W4]) is None
    assert notifier.titles == ["Ingen väg hittades mellan punkt 2 och 3", InvalidSegmentData.title]


def test_failed_run_clears_previous_overlay(make_orchestrator, viewport):
    first = {"path": [node("A", 22.0, 71.0), node("B", 22.5, 71.5)], "totalCost": 1}
    orchestrator, _, _ = make_orchestrator([first, TransportFailure()])

    orchestrator.find_path([W1, W2])
    assert len(viewport.polylines) == 1

    orchestrator.find_path([W1, W2])
    assert viewport.polylines == []
    assert viewport.fit_request is None


# --- PathfinderClient ---

class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def test_client_builds_request(monkeypatch):
    captured = {}

    def fake_get(url, params=None, timeout=None):
        captured.update(url=url, params=params, timeout=timeout)
        return FakeResponse(payload={"path": [], "totalCost": 0})

    monkeypatch.setattr(requests, "get", fake_get)
    client = PathfinderClient(base_url="http://pathfinder.test/", timeout=7)

    assert client.find_segment(W1, W2) == {"path": [], "totalCost": 0}
    assert captured["url"] == "http://pathfinder.test/api/find-path"
    assert captured["params"] == {"start": "22.0,71.0", "end": "22.5,71.5"}
    assert captured["timeout"] == 7


@pytest.mark.parametrize("outcome", [
    FakeResponse(status_code=500, reason="Internal Server Error"),
    FakeResponse(status_code=404, reason="Not Found"),
    FakeResponse(payload=ValueError("Expecting value")),
    requests.ConnectionError("refused"),
    requests.Timeout("slow"),
])
def test_client_transport_failures(monkeypatch, outcome):
    def fake_get(url, params=None, timeout=None):
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(requests, "get", fake_get)

    with pytest.raises(TransportFailure):
        PathfinderClient(base_url="http://pathfinder.test").find_segment(W1, W2)


def test_successful_empty_result_is_truthy(make_orchestrator):
    orchestrator, _, _ = make_orchestrator([{"path": []}])

    stitched = orchestrator.find_path([W1, W2])

    assert stitched
    assert stitched.path == []
