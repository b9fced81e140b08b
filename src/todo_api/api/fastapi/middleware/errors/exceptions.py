from __future__ import annotations


class ApiError(Exception):
    """An error surfaced to the client as ``{"message": ...}`` with ``status_code``."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class BadRequestError(ApiError):
    def __init__(self, message: str):
        super().__init__(400, message)


class ServerError(ApiError):
    def __init__(self, message: str):
        super().__init__(500, message)
