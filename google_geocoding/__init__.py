"""Client for the Google Maps geocoding service."""

__version__ = "1.1.0"

from .client import GeocodingClient
from .codes import ACCURACY_LEVELS, STATUS_CODES, describe_accuracy, describe_status
from .config import ClientConfig, Viewport
from .errors import GeocodingError, InvalidArgument, MalformedResponse, ProviderError
from .placemark import LngLatResult, Placemark, PlacemarkDetails

__all__ = [
    "GeocodingClient",
    "ClientConfig",
    "Viewport",
    "Placemark",
    "PlacemarkDetails",
    "LngLatResult",
    "GeocodingError",
    "InvalidArgument",
    "MalformedResponse",
    "ProviderError",
    "STATUS_CODES",
    "ACCURACY_LEVELS",
    "describe_accuracy",
    "describe_status",
]
