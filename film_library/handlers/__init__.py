from . import actors, films, users
from .responses import register_exception_handlers

__all__ = ["actors", "films", "users", "register_exception_handlers"]
