#Marks routing as a package.
#Re-exports the public API (route, distance_matrix, RoutedClient, GeoPoint, errors)
#so callers import from routing without knowing internal file names.
#No business logic.

from .errors import RoutedError, ConfigError, TransportError
from .models import GeoPoint, ServiceEndpoint, RoutedResponse, encode_point
from .routed_client import (
    RoutedClient,
    build_request_path,
    build_url,
    distance_matrix,
    invoke,
    nearest,
    route,
)

__all__ = [
           "route",
           "distance_matrix",
             "nearest",
             "invoke",
             "RoutedClient",
             "build_request_path",
             "build_url",
             "GeoPoint",
             "ServiceEndpoint",
             "RoutedResponse",
             "encode_point",
             "RoutedError",
             "ConfigError",
             "TransportError",
             ]
