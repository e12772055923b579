class TripAgentError(Exception):
    """Base class for every error raised by the planning pipeline."""


class GeocodeLookupError(TripAgentError, LookupError):
    """Geocoding failed for transport or payload reasons."""


class PlaceNotFoundError(GeocodeLookupError):
    def __init__(self, place_name: str):
        self.place_name = place_name
        super().__init__(f"Place not found: {place_name!r}")


class FacetUnavailableError(TripAgentError):
    facet = ""

    def __init__(self, place_name: str):
        self.place_name = place_name
        super().__init__(f"{self.facet.capitalize()} data unavailable for {place_name}")


class WeatherUnavailableError(FacetUnavailableError):
    facet = "weather"


class PlacesUnavailableError(FacetUnavailableError):
    facet = "places"


class NoFacetRequestedError(TripAgentError):
    def __init__(self):
        super().__init__("Please ask about weather or places to visit")


class EmptyQueryError(TripAgentError):
    def __init__(self):
        super().__init__("Please tell me where you are going.")


class PlannerBusyError(TripAgentError):
    def __init__(self):
        super().__init__("A trip is already being planned, please wait for it to finish.")
