# app/main.py
from contextlib import asynccontextmanager
import logging

import httpx
from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError

from app.core.config import get_settings

# Routers
from app.routers.admin_stats import router as admin_stats_router
from app.routers.analytics import router as analytics_router
from app.routers.orders import router as orders_router
from app.routers.notifications import router as notifications_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Log which Supabase project the dashboard reads from.
      - Warn if the service role key is missing (reads fall back to RLS).

    Shutdown:
      - No special cleanup needed; the Supabase client is stateless HTTP.
    """
    logger.info(f"🔄 Startup: dashboard API for {settings.SUPABASE_URL}")
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        logger.warning(
            "⚠️ Startup: SUPABASE_SERVICE_ROLE_KEY is not set, "
            "dashboard reads use the anon key and are subject to RLS."
        )
    yield


app = FastAPI(
    title=settings.PROJECT_NAME or "Shop Admin Dashboard API",
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


@app.exception_handler(APIError)
async def supabase_error_handler(request: Request, exc: APIError):
    """
    Upstream PostgREST/RPC failures that a service let through.
    """
    logger.error(f"❌ Supabase error on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": exc.message or "Upstream data store error"},
    )


@app.exception_handler(httpx.HTTPError)
async def supabase_transport_error_handler(request: Request, exc: httpx.HTTPError):
    """
    Supabase could not be reached or answered outside PostgREST (timeouts,
    refused connections, gateway errors).
    """
    logger.error(f"❌ Supabase unreachable on {request.url.path}: {exc!r}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": str(exc) or "Upstream data store unreachable"},
    )


# Versioned API prefix, e.g. /api/v1
app.include_router(admin_stats_router, prefix=settings.API_V1_STR)
app.include_router(analytics_router, prefix=settings.API_V1_STR)
app.include_router(orders_router, prefix=settings.API_V1_STR)
app.include_router(notifications_router, prefix=settings.API_V1_STR)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "shop-admin-dashboard"}
