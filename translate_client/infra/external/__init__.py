"""HTTP transport and Translate API clients."""

from translate_client.infra.external.base_client import BaseHTTPClient, map_error_response
from translate_client.infra.external.urls import construct_url, parse_url

__all__ = ["BaseHTTPClient", "construct_url", "map_error_response", "parse_url"]
