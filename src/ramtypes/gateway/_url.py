from __future__ import annotations

import typing
from collections.abc import Sequence
from enum import Enum
from typing import Any, Final

from yarl import URL

__all__: Sequence[str] = ("GATEWAY_VERSION", "GatewayCompression", "GatewayEncoding", "gateway_url")

GATEWAY_VERSION: Final[int] = 10


@typing.final
class GatewayEncoding(str, Enum):
    JSON = "json"
    ETF = "etf"


@typing.final
class GatewayCompression(str, Enum):
    ZLIB_STREAM = "zlib-stream"


def gateway_url(
    url: str | URL,
    *,
    version: int = GATEWAY_VERSION,
    encoding: GatewayEncoding = GatewayEncoding.JSON,
    compress: GatewayCompression | None = None,
) -> URL:
    """Build the connect URL for the gateway at ``url``.

    Any query string already present on ``url`` is replaced.
    """
    url_query: dict[str, Any] = {"v": version, "encoding": GatewayEncoding(encoding).value}
    if compress is not None:
        url_query["compress"] = GatewayCompression(compress).value
    return URL(url).with_query(url_query)
