"""Fluent URL builder.

Collects a protocol, host, port and query parameters, then renders them with
``build()``. Setters return the builder so calls can be chained::

    url = (
        URLBuilder()
        .set_protocol("http")
        .set_host("localhost")
        .set_port(8000)
        .add_param("first", "1")
        .add_param("second", "2")
        .build()
    )
    # http://localhost:8000?first=1&second=2&

Nothing is validated or percent-encoded: every field is rendered verbatim, and
each query pair is followed by ``&`` (the last one included).
"""
import logging
from types import MappingProxyType
from typing import Dict, Mapping

logger = logging.getLogger(__name__)

class URLBuilder:
    def __init__(self):
        self._protocol: str = ""
        self._host: str = ""
        self._port: int = 0
        # insertion order is render order; overwriting a key keeps its slot
        self._params: Dict[str, str] = {}

    def __repr__(self) -> str:
        return (
            f"URLBuilder(protocol={self._protocol!r}, host={self._host!r}, "
            f"port={self._port!r}, params={self._params!r})"
        )

    def __str__(self) -> str:
        return self.build()

    def build(self) -> str:
        """Render ``protocol://host:port`` plus ``?k=v&`` for every parameter."""
        base = f"{self._protocol}://{self._host}:{self._port}"
        query = ""
        if self._params:
            query = "?" + "".join(f"{key}={value}&" for key, value in self._params.items())
        url = f"{base}{query}"
        logger.debug("built url %s", url)
        return url

    def add_param(self, key: str, value: str) -> "URLBuilder":
        """Add a query parameter. Re-adding a key replaces its value."""
        self._params[key] = value
        return self

    def set_protocol(self, protocol: str) -> "URLBuilder":
        self._protocol = protocol
        return self

    def set_host(self, host: str) -> "URLBuilder":
        self._host = host
        return self

    def set_port(self, port: int) -> "URLBuilder":
        self._port = port
        return self

    def port(self) -> int:
        return self._port

    def host(self) -> str:
        return self._host

    def protocol(self) -> str:
        return self._protocol

    def params(self) -> Mapping[str, str]:
        """Read-only live view of the query parameters."""
        return MappingProxyType(self._params)
