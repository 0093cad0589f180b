"""
Kartfunktioner för visualisering

MapViewport tar emot kommandon (markörer, linjer, zoom) och bygger en
ny Folium-karta vid varje körning av skriptet.
"""

import itertools
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import folium

from config import DEFAULT_CENTER, DEFAULT_ZOOM
from models import BoundingBox

@dataclass(frozen=True)
class MapMarker:
    lat: float
    lon: float
    popup: Optional[str] = None

@dataclass(frozen=True)
class MapPolyline:
    coordinates: Tuple[Tuple[float, float], ...]
    color: str
    weight: int

class MapViewport:
    """Kommandoyta mot kartan"""

    def __init__(
        self,
        center: Optional[List[float]] = None,
        zoom: int = DEFAULT_ZOOM,
        max_bounds: Optional[List[List[float]]] = None
    ):
        self.center = list(center or DEFAULT_CENTER)
        self.zoom = zoom
        self.max_bounds = max_bounds
        self._markers: Dict[int, MapMarker] = {}
        self._polylines: Dict[int, MapPolyline] = {}
        self._handles = itertools.count(1)
        self.fit_request: Optional[Tuple[List[List[float]], Tuple[int, int]]] = None

    @property
    def markers(self) -> List[MapMarker]:
        return list(self._markers.values())

    @property
    def polylines(self) -> List[MapPolyline]:
        return list(self._polylines.values())

    def add_marker(self, lat: float, lon: float, popup: Optional[str] = None) -> int:
        handle = next(self._handles)
        self._markers[handle] = MapMarker(lat, lon, popup)
        return handle

    def remove_marker(self, handle: int) -> None:
        self._markers.pop(handle, None)

    def add_polyline(self, coordinates: List[Tuple[float, float]], color: str, weight: int) -> int:
        handle = next(self._handles)
        self._polylines[handle] = MapPolyline(tuple(tuple(c) for c in coordinates), color, weight)
        return handle

    def remove_polyline(self, handle: int) -> None:
        self._polylines.pop(handle, None)

    def fit_bounds(self, bounds: BoundingBox, padding: Tuple[int, int]) -> None:
        self.fit_request = (bounds.as_bounds(), padding)

    def clear_fit(self) -> None:
        self.fit_request = None

    def render(self) -> folium.Map:
        return create_map(self)

def create_map(viewport: MapViewport) -> folium.Map:
    """
    Skapa Folium-karta med markörer och rutter

    Args:
        viewport: MapViewport med aktuellt innehåll

    Returns:
        Folium Map-objekt
    """
    options = {}
    if viewport.max_bounds:
        (south, west), (north, east) = viewport.max_bounds
        options = {
            "max_bounds": True,
            "min_lat": south,
            "min_lon": west,
            "max_lat": north,
            "max_lon": east,
        }

    m = folium.Map(
        location=viewport.center,
        zoom_start=viewport.zoom,
        control_scale=True,
        **options
    )

    # Vägpunkter
    for index, marker in enumerate(viewport.markers, 1):
        folium.Marker(
            [marker.lat, marker.lon],
            popup=marker.popup,
            tooltip=f"Punkt {index}",
        ).add_to(m)

    # Rutter
    for polyline in viewport.polylines:
        folium.PolyLine(
            [list(c) for c in polyline.coordinates],
            color=polyline.color,
            weight=polyline.weight,
            opacity=0.8
        ).add_to(m)

    # Anpassa zoom för att visa hela rutten
    if viewport.fit_request:
        bounds, padding = viewport.fit_request
        m.fit_bounds(bounds, padding=padding)

    return m
