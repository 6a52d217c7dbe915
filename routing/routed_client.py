#Purpose: The OSRM-routed "adapter/client".
#Sole responsibility: talk to a routed daemon via HTTP and hand back its raw reply.
#Encapsulates routed-specific details:
#coordinate formatting (loc=lat,lon, latitude first)
#URL construction (/viaroute, /distmatrix, /nearest)
#transport error handling (one round trip, no retries)
#The body is NOT parsed here. Callers decide what to do with it.


import logging
from typing import Iterable, Optional, Tuple, Union

import requests

from routing.config import load_settings
from routing.errors import ConfigError, TransportError
from routing.models import GeoPoint, RoutedResponse, ServiceEndpoint, encode_points

logger = logging.getLogger(__name__)

VIAROUTE = "viaroute"
DISTMATRIX = "distmatrix"
NEAREST = "nearest"

# seconds, or (connect, read) like requests accepts
Timeout = Optional[Union[float, Tuple[float, float]]]

_BAD_COMMAND_CHARS = set("/?#&= \t\r\n")


#----------------
# URL construction
#----------------
def build_request_path(command: str, points: Iterable[GeoPoint]) -> str:
    """
    /<command>?loc=lat,lon&loc=lat,lon...

    Points are encoded in iteration order. An empty sequence still gives a
    valid path ("/viaroute?").
    """
    if not command or any(ch in _BAD_COMMAND_CHARS for ch in command):
        raise ConfigError(f"Invalid routed command: {command!r}")
    return "/" + command + "?" + "&".join(encode_points(points))


def build_url(endpoint: ServiceEndpoint, path: str) -> str:
    """
    http://<host>:<port><path>

    The URL is run through the same parser requests uses for the GET, so a host
    requests would refuse (".example", "[foo]", control characters) is a
    ConfigError here rather than a TransportError later.
    """
    url = f"http://{endpoint.netloc}{path}"
    try:
        requests.PreparedRequest().prepare_url(url, None)
    except requests.RequestException as e:
        raise ConfigError(f"Invalid routed URL {url!r}: {e}") from e
    return url


def _join_lines(text: str) -> str:
    # routed replies are returned as one blob, line breaks dropped
    return text.replace("\r\n", "").replace("\r", "").replace("\n", "")


#----------------
# HTTP exchange
#----------------
def invoke(host: str, port: Union[int, str], command: str, points: Iterable[GeoPoint],
           *, timeout: Timeout = None) -> RoutedResponse:
    """
    Run one routed command and return url, HTTP status and body text.

    Raises:
        ConfigError: host/port/command unusable. Nothing is sent.
        TransportError: connect/read failed or the body is not valid UTF-8.

    Non-2xx statuses are not errors: the body comes back as-is and the status
    is on the returned RoutedResponse.
    """
    endpoint = ServiceEndpoint(host, port)
    url = build_url(endpoint, build_request_path(command, points))

    logger.debug("routed GET %s", url)
    try:
        with requests.get(url, timeout=timeout, stream=True) as response:
            status_code = response.status_code
            text = response.content.decode("utf-8")
    except requests.RequestException as e:
        logger.error("routed request to %s failed: %s", url, e)
        raise TransportError(f"routed request failed: {e}", url=url, cause=e) from e
    except UnicodeDecodeError as e:
        logger.error("routed reply from %s is not valid UTF-8: %s", url, e)
        raise TransportError(f"routed reply is not valid UTF-8: {e}", url=url, cause=e) from e

    if not 200 <= status_code < 300:
        logger.warning("routed returned HTTP %s for %s", status_code, url)

    return RoutedResponse(url=url, status_code=status_code, text=_join_lines(text))


#----------------
# Public commands
#----------------
def route(host: str, port: Union[int, str], points: Iterable[GeoPoint], *, timeout: Timeout = None) -> str:
    """Route through the waypoints in the given order (viaroute)."""
    return invoke(host, port, VIAROUTE, points, timeout=timeout).text


def distance_matrix(host: str, port: Union[int, str], points: Iterable[GeoPoint], *, timeout: Timeout = None) -> str:
    """Pairwise distance/time matrix; rows/columns follow input order (distmatrix)."""
    return invoke(host, port, DISTMATRIX, points, timeout=timeout).text


def nearest(host: str, port: Union[int, str], point: GeoPoint, *, timeout: Timeout = None) -> str:
    """Nearest street point for a single coordinate."""
    return invoke(host, port, NEAREST, [point], timeout=timeout).text


class RoutedClient:
    """
    routed Adapter / Client

    Holds an endpoint and timeout so callers don't have to pass them around.
    No other state: one instance can be shared between threads.
    """

    def __init__(self, endpoint: Optional[ServiceEndpoint] = None, timeout: Timeout = None):
        if endpoint is None:
            endpoint = load_settings().endpoint
        self.endpoint = endpoint
        self.timeout = timeout  # None -> wait as long as requests does by default

    @classmethod
    def from_env(cls) -> "RoutedClient":
        """Endpoint and timeout from ROUTED_HOST / ROUTED_PORT / ROUTED_TIMEOUT."""
        settings = load_settings()
        return cls(settings.endpoint, settings.timeout)

    def route(self, points: Iterable[GeoPoint]) -> str:
        return route(self.endpoint.host, self.endpoint.port, points, timeout=self.timeout)

    def distance_matrix(self, points: Iterable[GeoPoint]) -> str:
        return distance_matrix(self.endpoint.host, self.endpoint.port, points, timeout=self.timeout)

    def nearest(self, point: GeoPoint) -> str:
        return nearest(self.endpoint.host, self.endpoint.port, point, timeout=self.timeout)
