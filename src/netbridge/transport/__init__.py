"""Transports that satisfy the NetworkSession capability."""

from .aiohttp_session import AiohttpSession
from .base import NetworkSession
from .requests_session import RequestsSession

__all__ = [
    "AiohttpSession",
    "NetworkSession",
    "RequestsSession",
]
