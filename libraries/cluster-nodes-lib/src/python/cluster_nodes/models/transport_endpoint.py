"""Normalized network address of a cluster node."""

from __future__ import annotations

import httpx
from managed_exceptions import InvalidArgumentException
from pydantic import BaseModel, ConfigDict


class TransportEndpoint(BaseModel):
    """Immutable, normalized URI under which a node is reachable.

    Two endpoints compare equal iff their normalized components are equal,
    so ``http://10.0.0.1:9000/`` and ``HTTP://10.0.0.1:9000`` denote the
    same endpoint.  Query strings and fragments carry no routing meaning
    and are dropped.
    """

    model_config = ConfigDict(frozen=True)

    scheme: str
    """Lower-cased URI scheme (``http`` / ``https``)."""

    host: str
    """Lower-cased host name or IP address."""

    port: int | None = None
    """Explicit port, ``None`` when the URI relies on the scheme default."""

    path: str = ""
    """Path without trailing separators; ``""`` for the root."""

    @classmethod
    def parse(cls, uri: str | TransportEndpoint) -> TransportEndpoint:
        """Parse and normalize a transport address.

        Raises:
            InvalidArgumentException: If the value has no scheme or host.
        """
        if isinstance(uri, TransportEndpoint):
            return uri
        try:
            url = httpx.URL(uri.strip())
        except (httpx.InvalidURL, TypeError) as e:
            raise InvalidArgumentException(
                f"Invalid transport address: {uri!r}",
                diagnostic_details={"transport_address": str(uri)},
            ) from e
        if not url.scheme or not url.host:
            raise InvalidArgumentException(
                f"Transport address needs a scheme and a host: {uri!r}",
                diagnostic_details={"transport_address": str(uri)},
            )
        return cls(
            scheme=url.scheme.lower(),
            host=url.host.lower(),
            port=url.port,
            path=url.path.rstrip("/"),
        )

    def to_ascii(self) -> str:
        """Render the endpoint as an ASCII URI string."""
        host = f"[{self.host}]" if ":" in self.host else self.host
        port = f":{self.port}" if self.port is not None else ""
        return f"{self.scheme}://{host}{port}{self.path}"

    def __str__(self) -> str:
        return self.to_ascii()
