"""
Konfiguration och konstanter för ruttplaneraren
"""

import os
from dotenv import load_dotenv

# Läs miljövariabler från .env om filen finns
load_dotenv()

# Standardvärden för kartan
DEFAULT_CENTER = [22.2587, 71.1924]  # Gujarat
DEFAULT_ZOOM = 7

# Geofence (Gujarat, ungefärlig rektangel)
GEOFENCE_SOUTH_WEST = (20.1400, 68.3700)
GEOFENCE_NORTH_EAST = (24.7000, 74.4700)
GEOFENCE_NAME = "Gujarat"

# Namn som varje ny vägpunkt får
WAYPOINT_NAME = "Waypoint"

# API URLs
PATHFINDER_BASE_URL = os.getenv("PATHFINDER_BASE_URL", "http://localhost:8000")
OSRM_BASE_URL = os.getenv("OSRM_BASE_URL", "https://router.project-osrm.org")
OSRM_PROFILE = "driving"

# HTTP-inställningar
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

# Sammanfogning av delsträckor: kräv att nästa delsträcka börjar där föregående slutade
STRICT_SEGMENT_ADJACENCY = os.getenv("STRICT_SEGMENT_ADJACENCY", "false").lower() in ("1", "true", "yes")

# Ritning
ROUTE_COLOR = "#1976D2"
ROUTE_WEIGHT = 5
FIT_BOUNDS_PADDING = (30, 30)

# Loggning
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
