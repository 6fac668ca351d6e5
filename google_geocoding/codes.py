"""Static lookup tables for provider status codes and accuracy levels."""

from types import MappingProxyType
from typing import Any, Optional

STATUS_CODES = MappingProxyType({
    200: "No errors occurred; the address was successfully parsed and its geocode was returned.",
    500: "A geocoding or directions request could not be successfully processed, "
         "yet the exact reason for the failure is unknown.",
    601: "An empty address was specified in the HTTP q parameter.",
    602: "No corresponding geographic location could be found for the specified address, "
         "possibly because the address is relatively new, or because it may be incorrect.",
    603: "The geocode for the given address or the route for the given directions query "
         "cannot be returned due to legal or contractual reasons.",
    610: "The given key is either invalid or does not match the domain for which it was given.",
    620: "The given key has gone over the requests limit in the 24 hour period or has submitted "
         "too many requests in too short a period of time. If you're sending multiple requests "
         "in parallel or in a tight loop, use a timer or pause in your code to make sure you "
         "don't send the requests too quickly.",
})

ACCURACY_LEVELS = MappingProxyType({
    1: "Country level accuracy",
    2: "Region (state, province, prefecture, etc.) level accuracy",
    3: "Sub-region (county, municipality, etc.) level accuracy",
    4: "Town (city, village) level accuracy",
    5: "Post code (zip code) level accuracy",
    6: "Street level accuracy",
    7: "Intersection level accuracy",
    8: "Address level accuracy",
    9: "Premise (building name, property name, shopping center, etc.) level accuracy",
})

UNKNOWN_ACCURACY = "Unknown accuracy"


def _as_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def describe_accuracy(level: Any) -> str:
    """
    Get a human readable description of an accuracy level.

    Args:
        level: Accuracy level as reported by the service (1-9).

    Returns:
        The table text, or "Unknown accuracy" for anything outside 1-9.
    """
    return ACCURACY_LEVELS.get(_as_int(level), UNKNOWN_ACCURACY)


def describe_status(code: Any) -> Optional[str]:
    """Look up a status code; None when the code is not in the table."""
    return STATUS_CODES.get(_as_int(code))
