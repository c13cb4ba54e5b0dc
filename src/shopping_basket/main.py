import uvicorn

from shopping_basket.infrastructure.configuration.main_settings import Settings
from shopping_basket.infrastructure.entrypoints.api.app_factory import create_app

settings = Settings()
app = create_app(settings)


def dev():
    """Serve the ASGI app with auto-reload, bound to the configured host and port."""
    uvicorn.run(
        "shopping_basket.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
