# wholesale/main.py
from contextlib import asynccontextmanager
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from wholesale.core.config import get_settings
from wholesale.core.email_client import ensure_email_configured
from wholesale.core.errors import ConfigurationError, WholesaleError
from wholesale.database import create_db_and_tables

# Import models so SQLModel metadata is populated before create_all()
from wholesale.models import company as _company_models  # noqa: F401
from wholesale.models import user as _user_models  # noqa: F401
from wholesale.models import size_chart as _size_chart_models  # noqa: F401
from wholesale.models import product as _product_models  # noqa: F401
from wholesale.models import exchange_rate as _exchange_rate_models  # noqa: F401
from wholesale.models import analytics as _analytics_models  # noqa: F401
from wholesale.models import order as _order_models  # noqa: F401

# Routers
from wholesale.routers.auth import router as auth_router
from wholesale.routers.products import router as products_router
from wholesale.routers.size_charts import router as size_charts_router
from wholesale.routers.exchange_rates import router as exchange_rates_router
from wholesale.routers.analytics import router as analytics_router
from wholesale.routers.platform import router as platform_router
from wholesale.routers.uploads import router as uploads_router
from wholesale.routers.orders import router as orders_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables.

    Shutdown:
      - No special cleanup needed for sync engine.
    """
    logger.info("Startup: connecting to database...")
    try:
        create_db_and_tables()
        logger.info("Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error("Startup: DB connection FAILED: %s", e)
        raise
    try:
        ensure_email_configured()
    except ConfigurationError as e:
        logger.error("Startup: %s Registration and orders will answer 503.", e.detail)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Authlib keeps the OAuth state in the signed session cookie
app.add_middleware(SessionMiddleware, secret_key=settings.JWT_SECRET)


@app.exception_handler(WholesaleError)
async def wholesale_error_handler(request: Request, exc: WholesaleError):
    """
    Map domain errors (NotFound, InvalidQuantity, ...) to their HTTP status.

    The body names the error class under "error" so clients can tell a
    misconfiguration from a transient outage.
    """
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error": type(exc).__name__},
    )


app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(products_router, prefix=settings.API_PREFIX)
app.include_router(size_charts_router, prefix=settings.API_PREFIX)
app.include_router(exchange_rates_router, prefix=settings.API_PREFIX)
app.include_router(analytics_router, prefix=settings.API_PREFIX)
app.include_router(platform_router, prefix=settings.API_PREFIX)
app.include_router(uploads_router, prefix=settings.API_PREFIX)
app.include_router(orders_router, prefix=settings.API_PREFIX)

# Local upload backend: serve UPLOAD_DIR under /uploads; must stay below POST /uploads
if not settings.use_supabase_storage:
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "wholesale-backend"}
