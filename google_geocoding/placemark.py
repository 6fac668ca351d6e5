"""
Placemark results and their extraction from the service's XML response.

The response is a KML document whose address details use the xAL schema.
Any node may be missing, so every field is looked up on its own path and
a missing ancestor simply yields None for everything below it.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

_COUNTRY = ("AddressDetails", "Country")
_ADMIN_AREA = _COUNTRY + ("AdministrativeArea",)
_SUB_ADMIN_AREA = _ADMIN_AREA + ("SubAdministrativeArea",)
_LOCALITY = _SUB_ADMIN_AREA + ("Locality",)
_DEPENDENT_LOCALITY = _LOCALITY + ("DependentLocality",)


@dataclass(frozen=True)
class PlacemarkDetails:
    """Administrative breakdown of a placemark's address."""

    country_name: Optional[str] = None
    country_code: Optional[str] = None
    administrative_area: Optional[str] = None
    sub_administrative_area: Optional[str] = None
    locality: Optional[str] = None
    dependent_locality: Optional[str] = None
    postal_code: Optional[str] = None
    street: Optional[str] = None


@dataclass(frozen=True)
class Placemark:
    """One geocoded result: address, coordinates, accuracy and details."""

    accuracy: Optional[int] = None
    address: Optional[str] = None
    lng: Optional[float] = None
    lat: Optional[float] = None
    details: PlacemarkDetails = field(default_factory=PlacemarkDetails)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accuracy": self.accuracy,
            "address": self.address,
            "coordinates": {"lng": self.lng, "lat": self.lat},
            "details": asdict(self.details),
        }


@dataclass(frozen=True)
class LngLatResult:
    """Longitude, latitude and accuracy of a placemark."""

    lng: Optional[float] = None
    lat: Optional[float] = None
    accuracy: Optional[int] = None

    @classmethod
    def from_placemark(cls, placemark: Placemark) -> "LngLatResult":
        return cls(lng=placemark.lng, lat=placemark.lat, accuracy=placemark.accuracy)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ----------------------------------------------------------------------
# XML helpers
# ----------------------------------------------------------------------

def local_name(tag: str) -> str:
    """Strip the '{namespace}' prefix ElementTree puts on tags."""
    return tag.rsplit("}", 1)[-1]


def find_child(element: Optional[ET.Element], *path: str) -> Optional[ET.Element]:
    """
    Follow a path of child names, ignoring namespaces.

    Args:
        element: Starting element; None is allowed and returns None.
        *path: Local names of the successive children to descend into.

    Returns:
        The first matching element at the end of the path, or None when
        any step is missing.
    """
    for name in path:
        if element is None:
            return None
        element = next((child for child in element if local_name(child.tag) == name), None)
    return element


def find_children(element: Optional[ET.Element], name: str) -> List[ET.Element]:
    if element is None:
        return []
    return [child for child in element if local_name(child.tag) == name]


def _text(element: ET.Element, *path: str) -> Optional[str]:
    node = find_child(element, *path)
    if node is None:
        return None
    return node.text or ""


def _accuracy(element: ET.Element) -> Optional[int]:
    details = find_child(element, "AddressDetails")
    if details is None:
        return None
    value = details.get("Accuracy")
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _coordinates(element: ET.Element) -> Tuple[Optional[float], Optional[float]]:
    """Read 'lng,lat,alt' from Point/coordinates; both None unless complete."""
    raw = _text(element, "Point", "coordinates")
    if raw is None:
        return None, None

    parts = raw.split(",")
    if len(parts) < 3:
        return None, None

    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None, None


# ----------------------------------------------------------------------
# Extraction
# ----------------------------------------------------------------------

def parse_placemark(element: Optional[ET.Element]) -> Placemark:
    """
    Build a Placemark from a <Placemark> element.

    A None element (no placemark in the response) gives an empty Placemark.
    """
    if element is None:
        return Placemark()

    lng, lat = _coordinates(element)
    details = PlacemarkDetails(
        country_name=_text(element, *_COUNTRY, "CountryName"),
        country_code=_text(element, *_COUNTRY, "CountryNameCode"),
        administrative_area=_text(element, *_ADMIN_AREA, "AdministrativeAreaName"),
        sub_administrative_area=_text(element, *_SUB_ADMIN_AREA, "SubAdministrativeAreaName"),
        locality=_text(element, *_LOCALITY, "LocalityName"),
        dependent_locality=_text(element, *_DEPENDENT_LOCALITY, "DependentLocalityName"),
        postal_code=_text(element, *_DEPENDENT_LOCALITY, "PostalCode", "PostalCodeNumber"),
        street=_text(element, *_DEPENDENT_LOCALITY, "Thoroughfare", "ThoroughfareName"),
    )

    return Placemark(
        accuracy=_accuracy(element),
        address=_text(element, "address"),
        lng=lng,
        lat=lat,
        details=details,
    )


def parse_placemarks(response: Optional[ET.Element]) -> List[Placemark]:
    """All placemarks of a <Response> element, in document order."""
    return [parse_placemark(node) for node in find_children(response, "Placemark")]


def first_placemark(response: Optional[ET.Element]) -> Placemark:
    return parse_placemark(find_child(response, "Placemark"))
