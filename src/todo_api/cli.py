from __future__ import annotations

import os
from typing import Optional

import typer
import uvicorn

from todo_api.app import get_app_settings

app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.callback()
def main() -> None:
    """Todo List API command line."""


@app.command("serve")
def serve(
        host: Optional[str] = typer.Option(None, help="Bind address; defaults to APP_HOST"),
        port: Optional[int] = typer.Option(None, help="Bind port; defaults to APP_PORT (3000)"),
        reload: bool = typer.Option(False, help="Reload on code changes (development only)"),
        log_level: Optional[str] = typer.Option(None, help="Override LOG_LEVEL"),
):
    """Run the HTTP service with uvicorn."""
    settings = get_app_settings()
    if log_level:
        # todo_api.main configures logging on import and reads LOG_LEVEL
        os.environ["LOG_LEVEL"] = log_level.upper()
    uvicorn.run(
        "todo_api.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_config=None,  # keep the dictConfig applied by todo_api.main
    )


if __name__ == "__main__":
    app()
