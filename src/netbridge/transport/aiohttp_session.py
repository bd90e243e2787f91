"""
Awaitable transport backed by aiohttp.
"""

import logging

import aiohttp

from ..types import HTTPResponseMetadata
from ..types import PreparedRequest

logger = logging.getLogger(__name__)


class AiohttpSession:
    """
    Transport that awaits aiohttp directly.

    Errors raised by aiohttp (connection refused, TLS failure, timeout)
    propagate unmodified.
    """

    def __init__(
        self,
        timeout: float = 60.0,
        session: aiohttp.ClientSession | None = None,
    ):
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def perform_request(self, request: PreparedRequest) -> tuple[bytes, HTTPResponseMetadata]:
        session = await self._get_session()
        logger.debug(f"aiohttp {request.method} {request.url}")
        async with session.request(
            request.method,
            request.url,
            headers=request.headers,
            data=request.body,
        ) as resp:
            data = await resp.read()
            metadata = HTTPResponseMetadata(
                url=str(resp.url),
                status=resp.status,
                headers=dict(resp.headers),
                reason=resp.reason,
            )
        return data, metadata

    async def close(self) -> None:
        """Close the aiohttp session if this transport created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "AiohttpSession":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
