"""
Feltyper för ruttplaneraren

Varje fel bär med sig titel och beskrivning för meddelandet som visas för användaren.
Fatala fel avbryter hela sökningen, övriga rapporteras och hoppas över.
"""

from models import Notification, Severity

class RoutePlannerError(Exception):
    """Basklass för alla fel i ruttplaneraren"""

    title = "Fel"
    description = ""
    fatal = True

    def __init__(self, description: str = None, title: str = None):
        if title is not None:
            self.title = title
        if description is not None:
            self.description = description
        super().__init__(f"{self.title}: {self.description}")

    def to_notification(self) -> Notification:
        return Notification(self.title, self.description, Severity.ERROR)

class OutOfBounds(RoutePlannerError):
    fatal = False

    def __init__(self, latitude: float, longitude: float, region: str = "Gujarat"):
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(
            f"Projektet fungerar för närvarande bara inom {region}.",
            title=f"Utanför {region}",
        )

class InsufficientWaypoints(RoutePlannerError):
    title = "För få punkter"
    description = "Välj minst två punkter på kartan."

class SegmentUnreachable(RoutePlannerError):
    fatal = False

    def __init__(self, segment_index: int):
        self.segment_index = segment_index
        super().__init__(
            "Försök med andra platser.",
            title=f"Ingen väg hittades mellan punkt {segment_index + 1} och {segment_index + 2}",
        )

class InvalidSegmentData(RoutePlannerError):
    title = "Ogiltig vägdata"
    description = "Vägdatan är ogiltig."

    def __init__(self, segment_index: int, description: str = None):
        self.segment_index = segment_index
        super().__init__(description)

class TransportFailure(RoutePlannerError):
    title = "Kunde inte hitta väg"
    description = "Misslyckades att hämta vägen. Försök igen."

class OverlayHopFailure(RoutePlannerError):
    fatal = False
    title = "OSRM-fel"

    def __init__(self, hop_index: int):
        self.hop_index = hop_index
        super().__init__(f"Kunde inte hämta rutt för delsträcka {hop_index + 1}")

class RoutingServiceError(Exception):
    """Fel från vägroutningsservicen (OSRM)"""
    pass
