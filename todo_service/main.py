from __future__ import annotations

import logging
import sys
from typing import Optional

import httpx
import typer
import uvicorn

from todo_service.api.app import create_app
from todo_service.config import get_settings
from todo_service.domain.errors import TodoServiceError
from todo_service.domain.models import Todo
from todo_service.reporter import print_todos
from todo_service.store.memory import InMemoryTodoStore
from todo_service.utils.logging import configure_logging

app = typer.Typer(help="In-memory todo list service.")
log = logging.getLogger(__name__)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"listen={settings.host}:{settings.port} | "
        f"idle_timeout={settings.idle_timeout_seconds}s read_timeout={settings.read_timeout_seconds}s "
        f"seed={settings.seed_on_startup} | env={settings.app_env} log_level={settings.log_level}"
    )


@app.command()
def serve(
    host: Optional[str] = typer.Option(
        None, "--host", help="Interface to bind (default from settings)."
    ),
    port: Optional[int] = typer.Option(
        None, "--port", "-p", help="TCP port to listen on (default from settings)."
    ),
    seed: Optional[bool] = typer.Option(
        None,
        "--seed/--no-seed",
        help="Populate the store with example todos at startup (default from settings).",
    ),
) -> None:
    """
    Start the HTTP service.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    bind_host = host if host is not None else settings.host
    bind_port = port if port is not None else settings.port

    should_seed = settings.seed_on_startup if seed is None else seed

    store = InMemoryTodoStore()
    if should_seed:
        try:
            store.populate()
        except TodoServiceError as exc:
            log.warning("Populating the todo list failed", extra={"error": str(exc)})

    log.info(
        f"Starting server at http://{bind_host}:{bind_port}",
        extra={"host": bind_host, "port": bind_port, "todos": store.count()},
    )
    uvicorn.run(
        create_app(store=store, settings=settings),
        host=bind_host,
        port=bind_port,
        timeout_keep_alive=settings.idle_timeout_seconds,
        log_config=None,
        access_log=False,
    )


@app.command("list")
def list_todos(
    url: Optional[str] = typer.Option(
        None, "--url", "-u", help="Base URL of a running service (default from settings)."
    ),
) -> None:
    """
    Fetch todos from a running service and print them as a table.
    """
    settings = get_settings()
    base_url = (url or settings.base_url).rstrip("/")
    try:
        response = httpx.get(f"{base_url}/todo", timeout=settings.read_timeout_seconds)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        typer.echo(f"Could not fetch todos from {base_url}: {exc}", err=True)
        raise typer.Exit(code=1)

    print_todos([Todo.model_validate(item) for item in response.json()])


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
