"""
Hjälpfunktioner för ruttplaneraren
"""

import gpxpy
import gpxpy.gpx
from typing import Sequence

from models import Location, StitchedPath

def format_cost_km(total_cost: float) -> str:
    """
    Formatera total kostnad (meter) som kilometer

    Args:
        total_cost: Kostnad i meter

    Returns:
        T.ex. "5.00 KM"
    """
    return f"{total_cost / 1000:.2f} KM"

def format_location(location: Location, decimals: int = 6) -> str:
    """Lat/lon med valfritt antal decimaler"""
    return f"{location.latitude:.{decimals}f}, {location.longitude:.{decimals}f}"

def format_waypoints(waypoints: Sequence[Location]) -> str:
    """Markdown-lista över valda vägpunkter"""
    if not waypoints:
        return "_Inga vägpunkter valda. Klicka på kartan för att lägga till._"
    return "\n".join(
        f"- **{w.name or f'Punkt {i}'}** Lat: {w.latitude:.5f}, Long: {w.longitude:.5f}"
        for i, w in enumerate(waypoints, 1)
    )

def create_gpx(stitched: StitchedPath, name: str = "Rutt") -> str:
    """
    Skapa GPX-fil från den sammanfogade vägen

    Args:
        stitched: StitchedPath
        name: Namn på rutten

    Returns:
        GPX som sträng
    """
    gpx = gpxpy.gpx.GPX()

    # Lägg till metadata
    gpx.creator = "Ruttplaneraren"
    gpx.description = f"Total kostnad {format_cost_km(stitched.total_cost)}"

    # Skapa track
    gpx_track = gpxpy.gpx.GPXTrack()
    gpx_track.name = name
    gpx.tracks.append(gpx_track)

    # Skapa segment
    gpx_segment = gpxpy.gpx.GPXTrackSegment()
    gpx_track.segments.append(gpx_segment)

    # Lägg till punkter, nodnamnet blir punktens namn
    for location in stitched.path:
        gpx_point = gpxpy.gpx.GPXTrackPoint(
            location.latitude,
            location.longitude,
            name=location.name
        )
        gpx_segment.points.append(gpx_point)

    return gpx.to_xml()
