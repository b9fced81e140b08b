from .api.fastapi import create_app

__version__ = "1.0.0"

__all__ = ["create_app", "__version__"]
