from .repository import NoSqlRepository
from .service import NoSqlService, TaskService

__all__ = [
    "NoSqlRepository",
    "NoSqlService",
    "TaskService",
]
