"""
NetworkManager: build, send, classify, decode.
"""

import logging
import uuid
from typing import Protocol
from typing import TypeVar

from .logger import HTTPLogger
from .request import build_request
from .response import decode_payload
from .response import interpret_response
from .transport.base import NetworkSession
from .types import Endpoint
from .types import HTTPResponseMetadata

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NetworkManagerProtocol(Protocol):
    """What callers depend on to issue typed requests."""

    async def request(self, endpoint: Endpoint, response_type: type[T]) -> T: ...


class NetworkManager:
    """
    Issues requests through one transport and decodes typed results.

    Example:
        manager = NetworkManager(AiohttpSession())
        user = await manager.request(Endpoint.get(url), User)
    """

    def __init__(self, session: NetworkSession, http_logger: HTTPLogger | None = None):
        self.session = session
        self._http_logger = http_logger

    async def request(self, endpoint: Endpoint, response_type: type[T]) -> T:
        """
        Perform one call and decode its JSON body.

        Args:
            endpoint: What to call
            response_type: Type the response body is validated against

        Returns:
            The decoded response body

        Raises:
            NetworkError: On invalid parameters, a non-2xx status, an
                unusable response, or a body that does not match
                ``response_type``. Transport errors from AiohttpSession
                propagate as raised by aiohttp.
        """
        request_id = uuid.uuid4().hex[:12]
        prepared = build_request(endpoint)
        logger.debug(f"[{request_id}] {prepared.method} {prepared.url}")

        if self._http_logger:
            self._http_logger.log_request(
                prepared.method, prepared.url, prepared.headers, prepared.body, request_id
            )

        data, metadata = await self.session.perform_request(prepared)

        if self._http_logger:
            status = metadata.status if isinstance(metadata, HTTPResponseMetadata) else None
            self._http_logger.log_response(metadata.url, status, data, request_id)

        http_response = interpret_response(metadata, data)
        logger.debug(f"[{request_id}] {http_response.status} from {http_response.url}")
        return decode_payload(data, response_type)
