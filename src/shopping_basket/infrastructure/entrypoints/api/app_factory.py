from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app

from shopping_basket.core.exceptions import InvalidArgumentError
from shopping_basket.infrastructure.configuration.main_settings import Settings
from shopping_basket.infrastructure.entrypoints.api.basket_router import router as basket_router
from shopping_basket.infrastructure.entrypoints.api.health_router import router as health_router
from shopping_basket.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from shopping_basket.infrastructure.observability.logging import CorrelationMiddleware

logger = get_logger(__name__)


def create_app(settings: Settings) -> FastAPI:
    configure_logging(settings.log_level)
    logger.info("Booting application", app_name=settings.app_name, env=settings.env)

    app = FastAPI(title=settings.app_name)
    app.add_middleware(CorrelationMiddleware)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.error(
            "Validation error",
            context_endpoint=str(request.url.path),
            error_type="RequestValidationError",
            error_details=str(exc.errors()),
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": _jsonable_errors(exc)},
        )

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        logger.warning(
            "Invalid argument",
            context_endpoint=str(request.url.path),
            error_type="InvalidArgumentError",
            error_details=str(exc),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc), "argument": exc.argument},
        )

    app.include_router(health_router)
    app.include_router(basket_router)
    app.mount("/metrics", make_asgi_app())

    return app


def _jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
