"""
Team Cadence API

Managers' view of their direct reports: 1:1 and check-in cadence, skill
maturity scoring and growth areas.

Request path: CORS → CorrelationId → Logging → RateLimiting → routers
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Union

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

import app.models  # registers every table on Base.metadata
from app.core.config import settings
from app.core.exceptions import AppException
from app.core.init_system import init_system_data
from app.core.limiter import limiter
from app.core.logging import setup_logging
from app.core.middleware import CorrelationIdMiddleware, LoggingMiddleware
from app.database import get_db, init_db
from app.models.maturity import Level
from app.routers.api_router import api_router

setup_logging()
logger = logging.getLogger(__name__)


def _error_response(status_code: int, errors: list) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "errors": errors})


# ============================================================================
# LIFESPAN
# ============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"Starting {settings.app_name} v{settings.version} ({settings.environment})",
        extra={"build_id": settings.build_id, "commit": settings.commit_hash},
    )
    try:
        init_db()
        init_system_data()
    except Exception as e:
        logger.error(f"✗ Startup failed: {e}")
        raise
    logger.info("✓ Ready to evaluate team cadence")

    yield

    logger.info(f"{settings.app_name} stopped")


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="1:1 and check-in cadence, skill maturity scoring and growth areas for team leads",
    lifespan=lifespan,
)

# ============================================================================
# MIDDLEWARE (last added runs first)
# ============================================================================
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(SlowAPIMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
    expose_headers=[settings.request_id_header, "X-Process-Time"],
)

# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Payload and query validation failures, one entry per offending field."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][-1]),
            "msg": error["msg"],
        }
        for error in exc.errors()
    ]
    logger.warning(f"Rejected {request.method} {request.url.path}: {errors}")
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, errors)


@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    logger.warning(f"AppException: {exc.message}", extra={"code": exc.error_code})
    return _error_response(
        exc.status_code,
        [{"msg": exc.message, "code": exc.error_code, "details": exc.details}],
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    """Unique names on levels, categories and assessments."""
    logger.warning(f"Integrity error on {request.url.path}: {exc.orig}")
    return _error_response(
        status.HTTP_409_CONFLICT,
        [{"msg": "Record conflicts with existing data", "code": "CONFLICT"}],
    )


@app.exception_handler(StarletteHTTPException)
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: Union[HTTPException, StarletteHTTPException]):
    detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _error_response(exc.status_code, [{"msg": detail}])


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled server error", extra={"path": request.url.path})
    return _error_response(500, [{"msg": "An unexpected server error occurred."}])


app.include_router(api_router, prefix=settings.api_prefix)

# ============================================================================
# OPERATIONAL ENDPOINTS
# ============================================================================
@app.get("/", tags=["Health"])
def root():
    return {
        "message": f"{settings.app_name} API",
        "version": settings.version,
        "docs": "/docs",
    }


@app.get("/health", tags=["Health"])
def health_check():
    """Liveness check."""
    return {
        "status": "up",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.version,
        "build": settings.build_id,
        "environment": settings.environment,
    }


@app.get("/readiness", tags=["Health"])
def readiness_check(db: Session = Depends(get_db)):
    """Readiness check: database reachable and maturity levels configured."""
    try:
        db.execute(text("SELECT 1"))
        level_count = db.query(Level).count()
    except Exception as e:
        logger.error(f"Readiness check failed: {e}")
        raise HTTPException(status_code=503, detail="Service not ready")
    return {
        "status": "ready",
        "components": {
            "database": "connected",
            "maturity_levels": level_count,
        },
    }


@app.get("/liveness", tags=["Health"])
def liveness_check():
    return health_check()
