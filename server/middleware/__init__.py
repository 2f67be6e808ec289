# server/middleware/__init__.py
from .error_handler import register_error_handlers
from .logging import add_request_id_middleware

__all__ = [
    "register_error_handlers",
    "add_request_id_middleware",
]
