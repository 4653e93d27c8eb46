"""Domain constants."""

from journey.domain.enums import TravelMode

DEFAULT_TRAVEL_MODE = TravelMode.CYCLING
DEFAULT_CANDIDATE_LIMIT = 10
DEFAULT_MAX_ATTEMPTS = 3

# km/h, used by the offline isochrone
MODE_SPEED_KMH = {
    TravelMode.WALKING: 5.0,
    TravelMode.CYCLING: 15.0,
    TravelMode.DRIVING: 40.0,
}

KM_PER_DEGREE_LAT = 111.32

# longest outbound budget a reachable-area query may ask for
MAX_BUDGET_MINUTES = 60
