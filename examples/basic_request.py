"""
Example issuing the same typed requests through both transports.

Set NETBRIDGE_BASE_URL to point at another JSONPlaceholder-compatible API.
HTTP traffic is written to logs/http.txt.
"""

import asyncio
import os
from logging import basicConfig
from logging import getLogger
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from netbridge import AiohttpSession
from netbridge import Endpoint
from netbridge import FileHTTPLogger
from netbridge import NetworkError
from netbridge import NetworkManager
from netbridge import NetworkSession
from netbridge import RequestsSession

load_dotenv()

logger = getLogger(__name__)
console = Console()

BASE_URL = os.getenv("NETBRIDGE_BASE_URL", "https://jsonplaceholder.typicode.com")


class User(BaseModel):
    id: int
    name: str
    email: str


class Post(BaseModel):
    id: int
    title: str
    userId: int


async def run(label: str, session: NetworkSession, http_logger: FileHTTPLogger) -> None:
    manager = NetworkManager(session, http_logger=http_logger)

    user = await manager.request(Endpoint.get(f"{BASE_URL}/users/1"), User)
    console.print(f"[green]{label}[/green] user: {user.name} <{user.email}>")

    created = await manager.request(
        Endpoint.post(
            f"{BASE_URL}/posts",
            {"title": "netbridge", "body": "hello", "userId": user.id},
            headers={"Content-Type": "application/json; charset=UTF-8"},
        ),
        Post,
    )
    console.print(f"[green]{label}[/green] created post #{created.id}: {created.title}")

    try:
        await manager.request(Endpoint.get(f"{BASE_URL}/users/does-not-exist"), User)
    except NetworkError as e:
        logger.info(f"{label}: expected failure {e.kind.name}")
        console.print(f"[yellow]{label}[/yellow] expected failure: {e}")


async def main() -> None:
    console.print(Panel.fit("[bold blue]netbridge Example[/bold blue]"))
    http_logger = FileHTTPLogger(Path("logs") / "http.txt")

    async with AiohttpSession(timeout=30) as session:
        await run("aiohttp", session, http_logger)

    async with RequestsSession(timeout=30) as session:
        await run("requests", session, http_logger)

    console.print(f"[dim]HTTP traffic written to {http_logger.log_file}[/dim]")


if __name__ == "__main__":
    basicConfig(
        level="DEBUG",
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    asyncio.run(main())
