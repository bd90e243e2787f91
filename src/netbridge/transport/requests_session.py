"""
Callback-driven transport backed by requests.

``requests`` is blocking, so each call runs on a worker thread and reports
back through a completion callback. The callback is bridged into a single
asyncio future that the caller awaits.
"""

import asyncio
import logging
from collections.abc import Callable
from concurrent.futures import Future
from concurrent.futures import ThreadPoolExecutor

import requests

from ..exceptions import NetworkError
from ..exceptions import NetworkErrorKind
from ..types import HTTPResponseMetadata
from ..types import PreparedRequest

logger = logging.getLogger(__name__)

Completion = Callable[["requests.Response | None", "BaseException | None"], None]


class RequestsSession:
    """
    Transport that runs requests on a thread pool.

    Every failure reported by requests collapses into
    ``NetworkError(UNKNOWN)``. The original exception is kept as
    ``__cause__``.
    """

    def __init__(
        self,
        timeout: float = 60.0,
        max_workers: int = 4,
        session: requests.Session | None = None,
    ):
        self._timeout = timeout
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._max_workers = max_workers
        self._executor: ThreadPoolExecutor | None = None

    def _get_executor(self) -> ThreadPoolExecutor:
        """Get or create the worker pool."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix="netbridge")
        return self._executor

    def _send(self, request: PreparedRequest) -> requests.Response:
        return self._session.request(
            request.method,
            request.url,
            headers=request.headers,
            data=request.body,
            timeout=self._timeout,
        )

    def send(self, request: PreparedRequest, completion: Completion) -> None:
        """
        Start a request and report its outcome to ``completion``.

        ``completion`` receives ``(response, None)`` on success or
        ``(None, error)`` on failure. It runs on the worker thread.
        """

        def on_done(future: Future[requests.Response]) -> None:
            error = future.exception()
            if error is not None:
                completion(None, error)
            else:
                completion(future.result(), None)

        self._get_executor().submit(self._send, request).add_done_callback(on_done)

    async def perform_request(self, request: PreparedRequest) -> tuple[bytes, HTTPResponseMetadata]:
        loop = asyncio.get_running_loop()
        waiter: asyncio.Future[tuple[bytes, HTTPResponseMetadata]] = loop.create_future()

        def resume(response: requests.Response | None, error: BaseException | None) -> None:
            # Only the first completion resolves the call.
            if waiter.done():
                return
            if error is not None or response is None:
                logger.debug(f"requests {request.method} {request.url} failed: {error!r}")
                failure = NetworkError(NetworkErrorKind.UNKNOWN, uri=request.url)
                failure.__cause__ = error
                waiter.set_exception(failure)
                return
            metadata = HTTPResponseMetadata(
                url=response.url or request.url,
                status=response.status_code,
                headers=dict(response.headers),
                reason=response.reason,
            )
            waiter.set_result((response.content, metadata))

        def completion(response: requests.Response | None, error: BaseException | None) -> None:
            try:
                loop.call_soon_threadsafe(resume, response, error)
            except RuntimeError:
                # The caller's loop closed before the request finished.
                logger.debug(f"Dropped late completion for {request.method} {request.url}")

        logger.debug(f"requests {request.method} {request.url}")
        self.send(request, completion)
        return await waiter

    async def close(self) -> None:
        """Shut down the worker pool and the owned requests session."""
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None
        if self._owns_session:
            self._session.close()

    async def __aenter__(self) -> "RequestsSession":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
