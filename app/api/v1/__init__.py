from .user_controller import router as user_router
from .error_handlers import register_error_handlers


__all__ = ["user_router", "register_error_handlers"]
