"""ASGI entry point: ``uvicorn todo_api.main:app``."""

from todo_api.api.fastapi import create_app
from todo_api.app import setup_logging

setup_logging()

app = create_app()
