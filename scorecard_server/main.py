from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from scorecard_server.config.settings import settings
from scorecard_server.core.state import session_store
from scorecard_server.routes import admin, interview

# Configure logging
logging.basicConfig(
    level=settings.effective_log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description="Real-time interview scorecard synchronization API",
    docs_url="/docs",
    openapi_url="/openapi.json"
)

# ============ CORS Middleware ============

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Added last so it wraps CORSMiddleware and sees admin preflights first
app.middleware("http")(admin.preflight)

logger.info(f"CORS enabled for origin: {settings.ALLOWED_ORIGIN}")

# ============ Event Handlers ============

@app.on_event("startup")
async def startup_event():
    """
    Log startup info. Sessions live in memory only, so there is
    nothing to load.
    """
    logger.info("✅ Application started successfully")
    logger.info(f"📊 Scorecard WebSocket available at: ws://localhost:{settings.PORT}/ws")

@app.on_event("shutdown")
async def shutdown_event():
    """
    Cleanup on application shutdown.
    In-memory sessions are discarded.
    """
    logger.info(f"❌ Application shutdown, discarding {session_store.count()} session(s)")

# ============ Health Check ============

@app.get("/health", tags=["health"])
async def health_check():
    """
    Health check endpoint.
    Returns application status.
    """
    return {
        "status": "healthy",
        "service": settings.API_TITLE,
        "version": settings.API_VERSION
    }

# ============ Include Routers ============

app.include_router(interview.router)
app.include_router(admin.router)

logger.info("✅ All routers registered")

# ============ Root Endpoint ============

@app.get("/", tags=["root"])
async def root():
    """
    Root endpoint.
    Returns API information.
    """
    return {
        "message": "Interview Scorecard Sync API",
        "version": settings.API_VERSION,
        "websocket": "/ws",
        "health": "/health"
    }

# ============ Run Application ============

def run():
    """Serve until SIGINT/SIGTERM; uvicorn drains open work before exiting."""
    import uvicorn

    logger.info(f"Starting server on {settings.HOST}:{settings.PORT}")

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.effective_log_level.lower()
    )

if __name__ == "__main__":
    run()
