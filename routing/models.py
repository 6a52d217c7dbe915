"""
Purpose: Value types for the routed client + the coordinate encoder.
What it does:
- GeoPoint (latitude, longitude) and its "loc=lat,lon" query fragment
- ServiceEndpoint (host, port), validated on construction
- RoutedResponse (url, status_code, text) for callers that want the status

Rule: No HTTP here. Models only.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Iterable, List

from routing.errors import ConfigError

# characters that would break the authority part of http://host:port/
_BAD_HOST_CHARS = set("/?#@\\ \t\r\n")


@dataclass(frozen=True)
class GeoPoint:
    """
    One waypoint. Coordinates are stored as floats and never range checked.
    """

    latitude: float
    longitude: float

    def __post_init__(self):
        # frozen dataclass: go through object.__setattr__ to normalize ints -> floats
        object.__setattr__(self, "latitude", float(self.latitude))
        object.__setattr__(self, "longitude", float(self.longitude))

    @classmethod
    def from_lon_lat(cls, lon: float, lat: float) -> GeoPoint:
        """Build from (x=lon, y=lat) order."""
        return cls(latitude=lat, longitude=lon)

    def to_query(self) -> str:
        return encode_point(self)


def encode_point(point: GeoPoint) -> str:
    """Render a point as the routed query fragment: loc=<lat>,<lon> (latitude first)."""
    return f"loc={point.latitude!r},{point.longitude!r}"


def encode_points(points: Iterable[GeoPoint]) -> List[str]:
    """Encode every point, keeping input order."""
    return [encode_point(point) for point in points]


@dataclass(frozen=True)
class ServiceEndpoint:
    """
    Host + port of a routed instance (plain HTTP only).

    Raises ConfigError when the host is empty / malformed or the port is not
    an integer in 0..65535. Digit strings such as "5000" are accepted.
    """

    host: str
    port: int

    def __post_init__(self):
        if not isinstance(self.host, str) or not self.host:
            raise ConfigError(f"Invalid routed host: {self.host!r}")
        if any(ch in _BAD_HOST_CHARS for ch in self.host):
            raise ConfigError(f"Invalid routed host: {self.host!r}")
        if ":" in self.host:
            # only an IPv6 literal may contain ':' (the port is passed separately)
            literal = self.host[1:-1] if self.host.startswith("[") and self.host.endswith("]") else self.host
            try:
                ipaddress.IPv6Address(literal)
            except ValueError:
                raise ConfigError(f"Invalid routed host: {self.host!r}") from None

        object.__setattr__(self, "port", _parse_port(self.port))

    @property
    def netloc(self) -> str:
        host = self.host
        # bare IPv6 literal, e.g. ::1 -> [::1]
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"{host}:{self.port}"


def _parse_port(port) -> int:
    if isinstance(port, bool):
        raise ConfigError(f"Invalid routed port: {port!r}")
    if isinstance(port, str):
        if not port.strip().isdigit():
            raise ConfigError(f"Invalid routed port: {port!r}")
        port = int(port.strip())
    if not isinstance(port, int):
        raise ConfigError(f"Invalid routed port: {port!r}")
    if port < 0 or port > 65535:
        raise ConfigError(f"Routed port out of range: {port}")
    return port


@dataclass(frozen=True)
class RoutedResponse:
    """
    Output of one routed round trip.
    text is the body decoded as UTF-8 with line breaks removed.
    """

    url: str
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
