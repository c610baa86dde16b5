import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import api_router
from .api.middleware import request_instrumentation
from .config import Settings, settings as default_settings
from .database import build_engine, build_session_factory, init_db, ping
from .exceptions import InvalidCartError, OrderStoreError, ProductNotFoundError
from .services.cart_service import CartService
from .services.catalog import Catalog
from .services.checkout_service import CheckoutService
from .services.order_store import OrderStore
from .services.telemetry import PAGE_VIEWS, PrometheusTelemetry

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения"""
    # Startup
    logger.info(f"🚀 Starting {app.state.settings.app_name}...")

    try:
        await init_db(app.state.engine)
        logger.info(f"✅ {app.state.settings.app_name} started, db at {app.state.settings.db_path}")
    except Exception as e:
        logger.error(f"❌ Failed to start: {e}")
        raise

    yield  # Приложение работает

    # Shutdown
    logger.info("🛑 Shutting down...")
    await app.state.engine.dispose()
    logger.info("✅ Database connection closed")


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


def register_exception_handlers(app: FastAPI) -> None:
    """Доменные ошибки в JSON вида {"error": ...} без внутренних деталей"""

    @app.exception_handler(InvalidCartError)
    async def invalid_cart_handler(request: Request, exc: InvalidCartError):
        logger.warning(
            f"⚠️ Validation error request_id={_request_id(request)} "
            f"operation={request.method} {request.url.path} error={exc.message}"
        )
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(ProductNotFoundError)
    async def not_found_handler(request: Request, exc: ProductNotFoundError):
        logger.warning(
            f"⚠️ Not found request_id={_request_id(request)} "
            f"operation={request.method} {request.url.path} error={exc.message}"
        )
        return JSONResponse(status_code=404, content={"error": "Not found"})

    @app.exception_handler(OrderStoreError)
    async def order_store_error_handler(request: Request, exc: OrderStoreError):
        logger.error(
            f"❌ Storage error request_id={_request_id(request)} "
            f"operation={request.method} {request.url.path} error={exc.message}"
        )
        return JSONResponse(status_code=500, content={"error": "DB error"})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            f"⚠️ Invalid payload request_id={_request_id(request)} "
            f"operation={request.method} {request.url.path} errors={exc.errors()}"
        )
        return JSONResponse(status_code=400, content={"error": "Invalid payload"})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Глобальный обработчик исключений"""
        logger.error(
            f"❌ Unhandled exception request_id={_request_id(request)} "
            f"operation={request.method} {request.url.path}: {exc}",
            exc_info=True
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Optional[Settings] = None, catalog: Optional[Catalog] = None) -> FastAPI:
    """Собирает приложение; каталог, хранилище и метрики принадлежат экземпляру"""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        description="Storefront demo: catalog, checkout, orders and metrics",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan
    )

    engine = build_engine(settings.db_path, echo=settings.debug)
    catalog = catalog or Catalog()
    telemetry = PrometheusTelemetry(settings.app_name)
    order_store = OrderStore(build_session_factory(engine))

    app.state.settings = settings
    app.state.engine = engine
    app.state.catalog = catalog
    app.state.telemetry = telemetry
    app.state.order_store = order_store
    app.state.checkout_service = CheckoutService(catalog, order_store, telemetry)
    app.state.cart_service = CartService(catalog, telemetry)

    # Настройка CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_instrumentation)

    register_exception_handlers(app)

    # Подключаем API routes
    app.include_router(api_router)

    @app.get("/")
    async def root():
        """Корневой endpoint"""
        telemetry.increment_counter(PAGE_VIEWS)
        return {
            "service": settings.app_name,
            "version": "1.0.0",
            "endpoints": {
                "products": "/api/products",
                "checkout": "/api/checkout",
                "orders": "/api/orders",
                "health": "/health",
                "metrics": "/metrics"
            }
        }

    @app.get("/health")
    async def health_check():
        """Проверка состояния сервиса"""
        return {"status": "ok"}

    @app.get("/health/ready")
    async def readiness_check():
        """Проверка готовности к обработке запросов"""
        if not await ping(engine):
            raise HTTPException(status_code=503, detail="Service not ready")
        return {"status": "ready"}

    @app.get("/metrics")
    async def metrics():
        return Response(content=telemetry.render(), media_type=telemetry.content_type)

    return app


setup_logging(default_settings.log_level)

# Создаем FastAPI приложение
app = create_app()


def run():
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
        log_level=default_settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
