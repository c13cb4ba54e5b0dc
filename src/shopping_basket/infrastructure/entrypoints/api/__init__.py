from .app_factory import create_app
from .basket_router import router as basket_router
from .health_router import router as health_router

__all__ = ["basket_router", "create_app", "health_router"]
