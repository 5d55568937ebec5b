from . import admin, auth, logger
from .auth import current_principal, get_principal

__all__ = ["admin", "auth", "logger", "current_principal", "get_principal"]
