# backoffice/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from backoffice.core.config import get_settings
from backoffice.core.errors import register_exception_handlers
from backoffice.database import create_db_and_tables

# Import models so SQLModel metadata is populated before create_all()
from backoffice.models import settings as _settings_models  # noqa: F401
from backoffice.models import catalog as _catalog_models  # noqa: F401
from backoffice.models import blog as _blog_models  # noqa: F401
from backoffice.models import lead as _lead_models  # noqa: F401
from backoffice.models import content as _content_models  # noqa: F401
from backoffice.models import marketing as _marketing_models  # noqa: F401
from backoffice.models import offering as _offering_models  # noqa: F401
from backoffice.models import support as _support_models  # noqa: F401


# Routers
from backoffice.routers.auth import router as auth_router
from backoffice.routers.site import router as site_router
from backoffice.routers.admin_settings import router as admin_settings_router
from backoffice.routers.brands import (
    router as brands_router,
    admin_router as admin_brands_router,
)
from backoffice.routers.categories import (
    router as categories_router,
    admin_router as admin_categories_router,
)
from backoffice.routers.products import (
    router as products_router,
    admin_router as admin_products_router,
)
from backoffice.routers.blog import (
    router as blog_router,
    admin_router as admin_blog_router,
)
from backoffice.routers.leads import (
    router as leads_router,
    admin_router as admin_leads_router,
)
from backoffice.routers.content import (
    router as content_router,
    admin_router as admin_content_router,
)
from backoffice.routers.slides import (
    router as slides_router,
    admin_router as admin_slides_router,
)
from backoffice.routers.banners import (
    router as banners_router,
    admin_router as admin_banners_router,
)
from backoffice.routers.offerings import (
    router as services_router,
    admin_router as admin_services_router,
)
from backoffice.routers.complaints import (
    router as complaints_router,
    admin_router as admin_complaints_router,
)
from backoffice.routers.call_center import (
    router as call_center_router,
    admin_router as admin_call_center_router,
)
from backoffice.routers.admin_stats import router as admin_stats_router

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
    logger.info("🔄 Startup: Connecting to Supabase Postgres...")
    try:
        create_db_and_tables()
        logger.info("✅ Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"❌ Startup: DB connection FAILED: {e}")
        raise
    yield


app = FastAPI(
    title=settings.PROJECT_NAME or "Site Back-Office API",
    version="0.1.0",
    lifespan=lifespan,
)


# --- Error handlers ---
register_exception_handlers(app)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    """Unique/foreign key violations (e.g. duplicate slug). Session already rolled back."""
    logger.warning(f"Integrity error on {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc.orig), "code": "INTEGRITY_ERROR"},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Database unavailable", "code": "DATABASE_ERROR"},
    )


# --- CORS configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Versioned API prefix, e.g. /api/v1
for router in (
    site_router,
    brands_router,
    categories_router,
    products_router,
    blog_router,
    leads_router,
    content_router,
    slides_router,
    banners_router,
    services_router,
    complaints_router,
    call_center_router,
    auth_router,
    admin_settings_router,
    admin_brands_router,
    admin_categories_router,
    admin_products_router,
    admin_blog_router,
    admin_leads_router,
    admin_content_router,
    admin_slides_router,
    admin_banners_router,
    admin_services_router,
    admin_complaints_router,
    admin_call_center_router,
    admin_stats_router,
):
    app.include_router(router, prefix=settings.API_V1_STR)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "site-backoffice"}
