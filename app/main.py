"""
app/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Owns the message ledger for the process lifetime
- Registers API routes and exception handlers
- No business logic should be written here
"""

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import time

from app.core.config import Settings, get_settings, settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.services.ledger_service import MessageLedger
from app.api import messages

# Initialize logging first
setup_logging()
logger = get_logger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info("🚀 Starting SMS Desk...")

    try:
        validate_settings()
        logger.info("✅ Configuration validated")
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Composer: {'openai' if settings.composer_available else 'template'}")
        logger.info(f"Gateway: {'twilio' if settings.gateway_available else 'demo'}")
    except Exception as e:
        logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
        raise

    yield  # Application runs here

    logger.info(f"🛑 Shutting down SMS Desk ({len(app.state.ledger)} messages in history are discarded)")


# Create FastAPI app with lifespan
app = FastAPI(
    title="SMS Desk",
    description="Send templated or AI-generated SMS messages and review the send history",
    version=APP_VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.is_development else None,  # Disable docs in production
    redoc_url="/redoc" if settings.is_development else None,
)

# History lives as long as this process
app.state.ledger = MessageLedger()

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time header to all responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    # Log slow requests
    if process_time > 5.0:
        logger.warning(
            f"Slow request detected: {request.method} {request.url.path}",
            extra={"process_time": process_time}
        )

    return response


add_exception_handlers(app)

app.include_router(messages.router, prefix=settings.API_PREFIX, tags=["Messages"])


# Root endpoint
@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - basic info."""
    return {
        "name": "SMS Desk API",
        "version": APP_VERSION,
        "description": "Templated and AI-generated SMS sending",
        "status": "running",
        "environment": settings.ENVIRONMENT
    }


# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check(request: Request, config: Settings = Depends(get_settings)):
    """
    Reports which external dependencies are live and which are degraded.
    """
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": config.ENVIRONMENT,
        "version": APP_VERSION,
        "checks": {
            "composer": "openai" if config.composer_available else "template",
            "gateway": "twilio" if config.gateway_available else "demo",
            "messages_recorded": len(request.app.state.ledger),
        }
    }


# Liveness probe (for Kubernetes/orchestration)
@app.get("/live", tags=["Health"])
async def liveness_check():
    """
    Liveness probe - indicates if app is alive.
    """
    return {"status": "alive"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )
