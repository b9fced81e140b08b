from .catchall import CatchAllExceptionMiddleware
from .error_handlers import register_error_handlers
from .exceptions import ApiError, BadRequestError, ServerError

__all__ = [
    "ApiError",
    "BadRequestError",
    "ServerError",
    "CatchAllExceptionMiddleware",
    "register_error_handlers",
]
