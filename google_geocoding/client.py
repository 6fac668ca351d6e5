"""Google Maps geocoding client (XML output of the maps/geo service)."""

from __future__ import annotations

import logging
import urllib.parse
import xml.etree.ElementTree as ET
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

import requests

from . import __version__
from .codes import describe_accuracy
from .config import ClientConfig, Viewport
from .errors import InvalidArgument, MalformedResponse, ProviderError
from .placemark import (
    LngLatResult,
    Placemark,
    find_child,
    first_placemark,
    local_name,
    parse_placemarks,
)

log = logging.getLogger(__name__)

API_HOST = "maps.google.com"
API_PORT = 80
API_PATH = "/maps/geo"
API_URL = f"http://{API_HOST}:{API_PORT}{API_PATH}"

USER_AGENT = f"Google-Geocoding/{__version__}"

Address = Union[str, Iterable[str]]


def _format_float(value: float) -> str:
    """Render a coordinate without float noise or a trailing '.0'."""
    return format(float(value), ".15g")


def _join_address(address: Optional[Address]) -> str:
    if address is None:
        return ""
    if isinstance(address, str):
        return address.strip()
    parts = [str(part) for part in address]
    if not any(part.strip() for part in parts):
        return ""
    return ",".join(parts).strip()


class GeocodingClient:
    """
    Forward and reverse geocoding against the Google Maps geo service.

    Every call is one blocking GET request. Settings are kept on a
    ClientConfig and apply to all later calls; the address or coordinates
    of a call are never kept on the client.

    The client is not safe to reconfigure from another thread while a
    request is in flight; use one instance per thread instead.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        session: Optional[Any] = None,
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: Google Maps API key. Overrides config.api_key when given.
            config: Initial settings. A default ClientConfig is used if None.
            session: Object with a requests-compatible get(). Defaults to
                the requests module, which opens one connection per call.
            logger: Callable receiving diagnostic messages. Defaults to
                this module's logger at debug level.
        """
        self.config = config if config is not None else ClientConfig()
        if api_key is not None:
            self.api_key = api_key
        self.session = session
        self.logger = logger or log.debug

    @classmethod
    def from_env(cls, **kwargs: Any) -> "GeocodingClient":
        """Create a client configured from GOOGLE_GEOCODING_* variables."""
        return cls(config=ClientConfig.from_env(), **kwargs)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        self.config.api_key = str(value)

    @property
    def country(self) -> str:
        """ccTLD used to narrow down the possible results."""
        return self.config.country

    @country.setter
    def country(self, value: str) -> None:
        self.config.country = str(value)

    @property
    def sensor(self) -> bool:
        return self.config.sensor

    @sensor.setter
    def sensor(self, value: bool) -> None:
        self.config.sensor = bool(value)

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        return self.config.timeout

    @timeout.setter
    def timeout(self, seconds: float) -> None:
        self.config.timeout = float(seconds)

    @property
    def user_agent(self) -> str:
        """Caller's user agent, appended to ours."""
        return self.config.user_agent

    @user_agent.setter
    def user_agent(self, value: str) -> None:
        self.config.user_agent = str(value)

    @property
    def full_user_agent(self) -> str:
        if not self.config.user_agent:
            return USER_AGENT
        return f"{USER_AGENT} {self.config.user_agent}"

    @property
    def viewport(self) -> Viewport:
        return self.config.viewport

    def set_viewport(
        self, center_lng: float, center_lat: float, span_lng: float, span_lat: float
    ) -> None:
        """
        Set the viewport used to bias results.

        Args:
            center_lng: Longitude of the center of the bounding box.
            center_lat: Latitude of the center of the bounding box.
            span_lng: Longitude span of the box.
            span_lat: Latitude span of the box.

        Passing four zeros removes the viewport bias.
        """
        self.config.viewport = Viewport(
            center_lng=float(center_lng),
            center_lat=float(center_lat),
            span_lng=float(span_lng),
            span_lat=float(span_lat),
        )

    describe_accuracy = staticmethod(describe_accuracy)

    # ------------------------------------------------------------------
    # Geocoding
    # ------------------------------------------------------------------

    def geocode_info(self, address: Address) -> Placemark:
        """
        Get all geo information of an address.

        Args:
            address: Address string, or a list of fragments joined with commas.

        Returns:
            The first placemark of the response.

        Raises:
            InvalidArgument: The address is empty.
        """
        response = self._request(self._address_query(address))
        return first_placemark(response)

    def geocode_lnglat(self, address: Address) -> LngLatResult:
        """Get the longitude, latitude and accuracy of an address."""
        response = self._request(self._address_query(address))
        return LngLatResult.from_placemark(first_placemark(response))

    def reverse_geocode(self, lng: float, lat: float) -> Placemark:
        """Get the most specific placemark of a location."""
        response = self._request(self._reverse_query(lng, lat))
        return first_placemark(response)

    def reverse_geocode_all(self, lng: float, lat: float) -> List[Placemark]:
        """Get all placemarks of a location, from most specific to most generic."""
        response = self._request(self._reverse_query(lng, lat))
        return parse_placemarks(response)

    # ------------------------------------------------------------------
    # Request
    # ------------------------------------------------------------------

    @staticmethod
    def _address_query(address: Address) -> str:
        query = _join_address(address)
        if not query:
            raise InvalidArgument("no address provided")
        return query

    @staticmethod
    def _reverse_query(lng: float, lat: float) -> str:
        return f"{_format_float(lat)},{_format_float(lng)}"

    def build_params(self, query: str) -> Dict[str, str]:
        """Query parameters for a request whose q value is `query`."""
        config = self.config
        params: Dict[str, str] = {}

        if config.api_key:
            params["key"] = config.api_key

        params["sensor"] = "true" if config.sensor else "false"
        params["output"] = "xml"

        if config.country:
            params["gl"] = config.country

        viewport = config.viewport
        if viewport.is_set:
            params["ll"] = f"{_format_float(viewport.center_lat)},{_format_float(viewport.center_lng)}"
            params["spn"] = f"{_format_float(viewport.span_lat)},{_format_float(viewport.span_lng)}"

        params["q"] = query
        return params

    def build_url(self, query: str, redact_key: bool = False) -> str:
        params = self.build_params(query)
        if redact_key and "key" in params:
            params["key"] = "***"
        return API_URL + "?" + urllib.parse.urlencode(params)

    def _request(self, query: str) -> ET.Element:
        """
        Perform one request and return the <Response> element.

        Raises:
            MalformedResponse: The body is not an XML geocoding response.
            ProviderError: The HTTP status is neither 0 nor 200, or (when
                check_response_status is enabled) the body reports an error.
            requests.RequestException: Transport failures, unchanged.
        """
        url = self.build_url(query)
        http = self.session if self.session is not None else requests

        self.logger(f"GET {self.build_url(query, redact_key=True)}")
        resp = http.get(
            url,
            headers={"User-Agent": self.full_user_agent},
            timeout=self.config.timeout,
            allow_redirects=True,
        )
        status = resp.status_code

        try:
            root = ET.fromstring(resp.content)
        except ET.ParseError as e:
            self.logger(f"Invalid XML (HTTP {status}): {str(e)[:120]}")
            raise MalformedResponse("invalid XML returned") from e

        response = root if local_name(root.tag) == "Response" else find_child(root, "Response")
        if response is None:
            self.logger(f"No Response element in <{local_name(root.tag)}> document")
            raise MalformedResponse("invalid XML returned")

        if status not in (0, 200):
            self.logger(f"Geocoding HTTP {status}")
            raise ProviderError(code=status)

        if self.config.check_response_status:
            self._check_body_status(response)

        return response

    def _check_body_status(self, response: ET.Element) -> None:
        node = find_child(response, "Status", "code")
        if node is None or not (node.text or "").strip():
            return
        try:
            code = int(node.text.strip())
        except ValueError:
            raise MalformedResponse(f"invalid status code {node.text.strip()!r}") from None
        if code != 200:
            self.logger(f"Geocoding status {code}")
            raise ProviderError(code=code)
