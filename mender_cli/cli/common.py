"""
Shared helpers for CLI commands.

Commands build one client per invocation, await exactly one API operation
and turn application errors into a message on stderr plus an exit code:

    1  configuration or usage error (nothing was sent to the server)
    2  the operation failed (HTTP error, transport failure, not found)
"""

import asyncio
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from mender_cli.api.client import MenderClient, create_client
from mender_cli.core.config import Settings, load_settings
from mender_cli.core.exceptions import ConfigError, FetchError, NotFoundError, UsageError
from mender_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

console = Console()
err_console = Console(stderr=True)

T = TypeVar("T")


@contextmanager
def reported_errors() -> Iterator[None]:
    """Report application errors and exit with the matching code."""
    try:
        yield
    except ConfigError as e:
        err_console.print(f"[red]Config error: {escape(e.message)}[/red]")
        raise typer.Exit(1) from None
    except UsageError as e:
        err_console.print(f"[red]Usage error: {escape(e.message)}[/red]")
        raise typer.Exit(1) from None
    except NotFoundError as e:
        err_console.print(f"[yellow]{escape(e.message)}[/yellow]")
        raise typer.Exit(2) from None
    except FetchError as e:
        log_with_source(
            logger, "cli", "error", "Operation failed",
            endpoint=e.endpoint, status_code=e.status_code,
        )
        err_console.print(f"[red]Run error: {e.endpoint} returned {e.status_code}[/red]")
        if e.body:
            err_console.print(e.body, markup=False, highlight=False)
        raise typer.Exit(2) from None
    except httpx.TransportError as e:
        err_console.print(f"[red]Error: cannot reach Mender server: {escape(str(e))}[/red]")
        raise typer.Exit(2) from None


async def _run_and_close(
    operation: Callable[[MenderClient], Awaitable[T]],
    client: MenderClient,
) -> T:
    try:
        return await operation(client)
    finally:
        await client.close()


def run_with_client(
    operation: Callable[[MenderClient], Awaitable[T]],
    authenticated: bool = True,
    settings: Settings | None = None,
) -> T:
    """
    Load settings, build a client and run one API operation to completion.

    Args:
        operation: Coroutine function receiving the client
        authenticated: Require MENDER_TOKEN and send it as bearer token
        settings: Already loaded settings; loaded from the environment if omitted
    """
    with reported_errors():
        if settings is None:
            settings = load_settings(require_token=authenticated)
        client = create_client(settings, authenticated=authenticated)
        return asyncio.run(_run_and_close(operation, client))


class PageDots:
    """Progress callback printing one dot per page scanned."""

    def __init__(self) -> None:
        self.pages = 0

    def __call__(self, page: int, items: int) -> None:
        # the terminating empty page is not progress
        if not items:
            return
        self.pages += 1
        err_console.print(".", end="")

    def done(self) -> None:
        if self.pages:
            err_console.print()
