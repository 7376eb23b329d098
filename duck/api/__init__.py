from duck.api.errors import register_error_handlers
from duck.api.routes import router

__all__ = ["register_error_handlers", "router"]
