"""
Routing-providers: vägföljande geometri för ritning på kartan
"""

import logging
import requests
from typing import List, Optional, Tuple

from config import OSRM_BASE_URL, OSRM_PROFILE, REQUEST_TIMEOUT
from errors import RoutingServiceError
from models import Location

logger = logging.getLogger(__name__)

NO_ROUTE_CODES = ("NoRoute", "NoSegment")

class RoutingProvider:
    """Basklass för routing-providers"""

    def get_route_geometry(
        self,
        start: Location,
        end: Location
    ) -> Optional[List[Tuple[float, float]]]:
        raise NotImplementedError

class OSRMRouteProvider(RoutingProvider):
    """OSRM routing provider"""

    def __init__(
        self,
        base_url: str = OSRM_BASE_URL,
        profile: str = OSRM_PROFILE,
        timeout: float = REQUEST_TIMEOUT
    ):
        self.name = "OSRM"
        self.base_url = base_url.rstrip("/")
        self.profile = profile
        self.timeout = timeout

    def get_route_geometry(
        self,
        start: Location,
        end: Location
    ) -> Optional[List[Tuple[float, float]]]:
        """
        Hämta vägens geometri mellan två punkter

        Args:
            start: Startpunkt
            end: Slutpunkt

        Returns:
            Lista med (lat, lon) eller None om OSRM inte hittade någon rutt

        Raises:
            RoutingServiceError: vid nätverksfel eller ogiltigt svar
        """
        # OSRM vill ha lon,lat
        coordinates = f"{start.longitude},{start.latitude};{end.longitude},{end.latitude}"
        url = f"{self.base_url}/route/v1/{self.profile}/{coordinates}"
        params = {
            "overview": "full",
            "geometries": "geojson"
        }

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise RoutingServiceError(f"OSRM-anrop misslyckades: {e}") from e

        if not isinstance(data, dict):
            raise RoutingServiceError(f"Ogiltigt OSRM-svar: {data!r}")

        # OSRM svarar 400 med NoRoute/NoSegment när punkterna inte går att nå
        code = data.get("code")
        if code in NO_ROUTE_CODES:
            logger.debug("OSRM gav ingen rutt: %s", code)
            return None

        if response.status_code != 200 or (code is not None and code != "Ok"):
            raise RoutingServiceError(
                f"OSRM svarade {response.status_code}: {data.get('message', code)}"
            )

        return self._parse_osrm_response(data)

    def _parse_osrm_response(self, data: dict) -> Optional[List[Tuple[float, float]]]:
        """Parsa OSRM-respons till (lat, lon)-koordinater"""

        if not data.get("routes"):
            logger.debug("OSRM gav ingen rutt")
            return None

        try:
            coordinates = data["routes"][0]["geometry"]["coordinates"]
            # GeoJSON-format: [lon, lat]
            return [(coord[1], coord[0]) for coord in coordinates if len(coord) >= 2]
        except (KeyError, IndexError, TypeError) as e:
            raise RoutingServiceError(f"Ogiltigt OSRM-svar: {e}") from e
