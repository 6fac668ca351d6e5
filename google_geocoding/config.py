"""
Client configuration.

Settings live on a long-lived ClientConfig and apply to every request the
client makes until they are changed. Values can also be loaded from the
environment so scripts do not have to hard-code an API key.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

ENV_PREFIX = "GOOGLE_GEOCODING_"
DEFAULT_TIMEOUT = 60.0

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Viewport:
    """
    Bounding box hint (center + span) used to bias results.

    All four values default to 0.0, which means "unset".
    """

    center_lng: float = 0.0
    center_lat: float = 0.0
    span_lng: float = 0.0
    span_lat: float = 0.0

    @property
    def is_set(self) -> bool:
        return any(
            value != 0.0
            for value in (self.center_lng, self.center_lat, self.span_lng, self.span_lat)
        )


@dataclass
class ClientConfig:
    """
    Settings shared by all requests of a GeocodingClient.

    Attributes:
        api_key: Google Maps API key; omitted from requests when empty.
        country: ccTLD used for country biasing (not ISO 3166-1, mostly identical).
        sensor: Whether the request comes from a device with a location sensor.
        timeout: Request timeout in seconds.
        user_agent: Suffix appended to the client's own user agent.
        viewport: Viewport biasing; only sent when at least one value is non-zero.
        check_response_status: Also fail on a non-200 status inside the XML body.
    """

    api_key: str = ""
    country: str = ""
    sensor: bool = False
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = ""
    viewport: Viewport = field(default_factory=Viewport)
    check_response_status: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build a configuration from GOOGLE_GEOCODING_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            A ClientConfig with defaults for every variable that is not set.
        """
        if environ is None:
            environ = os.environ

        def get(name: str) -> str:
            return environ.get(ENV_PREFIX + name, "").strip()

        config = cls(
            api_key=get("KEY"),
            country=get("COUNTRY"),
            sensor=get("SENSOR").lower() in _TRUTHY,
            user_agent=get("USER_AGENT"),
        )

        timeout = get("TIMEOUT")
        if timeout:
            try:
                config.timeout = float(timeout)
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}TIMEOUT must be a number, got {timeout!r}") from exc

        return config
