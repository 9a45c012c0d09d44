from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from teamflow.core.config import settings
from teamflow.core.database import init_db, close_db
from teamflow.core.exceptions import TeamFlowError, error_response
from teamflow.core.logging_config import logger
from teamflow.core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from teamflow.core.rate_limiter import limiter, rate_limit_exceeded_handler
from teamflow.api.v1.router import api_router
from slowapi.errors import RateLimitExceeded


async def validate_critical_config():
    """Validate critical configuration at startup - fail fast if missing"""
    errors = []

    if not settings.DATABASE_URL:
        errors.append("DATABASE_URL is not set")

    if not settings.SECRET_KEY or settings.SECRET_KEY == "CHANGE_ME":
        errors.append("SECRET_KEY is not set or using default value")

    if not settings.JWT_SECRET_KEY or settings.JWT_SECRET_KEY == "CHANGE_ME":
        errors.append("JWT_SECRET_KEY is not set or using default value")

    if errors:
        for err in errors:
            logger.critical(f"[Startup] CRITICAL: {err}")
        raise RuntimeError(f"Missing critical configuration: {', '.join(errors)}")

    if settings.ENVIRONMENT == "production" and settings.RATE_LIMIT_STORAGE_URI == "memory://":
        logger.warning("[Startup] WARNING: in-memory rate limits are per worker process")

    logger.info("[Startup] Critical configuration validated")
    return True


async def ensure_database_ready():
    """Create any missing tables"""
    try:
        await init_db()
        logger.info("[Startup] Database tables ready")
        return True
    except Exception as e:
        logger.error(f"[Startup] Failed to ensure database ready: {e}")
        return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown"""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.APP_NAME}...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"API Version: {settings.API_VERSION}")
    logger.info("=" * 60)

    await validate_critical_config()

    db_ready = await ensure_database_ready()
    if not db_ready:
        logger.warning("[Startup] Database not ready - requests touching it will fail")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    await close_db()


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Team and project management with template-driven project generation",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
    redirect_slashes=False  # Prevent 307 redirects that break CORS
)

# Add rate limiter state and exception handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Add middleware (order matters - last added runs first)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Response-Time"],
)


# Exception handlers
@app.exception_handler(TeamFlowError)
async def teamflow_exception_handler(request: Request, exc: TeamFlowError):
    if exc.http_status >= 500:
        logger.error(f"{exc.code}: {exc.message}", extra={"error_details": exc.details})
    else:
        logger.warning(f"{exc.code}: {exc.message}")
    return JSONResponse(status_code=exc.http_status, content=error_response(exc))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": {
                "code": "INTERNAL_ERROR",
                "message": str(exc) if settings.DEBUG else "An error occurred",
                "details": {},
            },
        }
    )


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "version": "1.0.0",
        "environment": settings.ENVIRONMENT
    }


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }


app.include_router(api_router, prefix=f"/api/{settings.API_VERSION}")


def run():
    import uvicorn
    uvicorn.run(
        "teamflow.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG
    )


if __name__ == "__main__":
    run()
