# server/main.py
"""
Staff Manager - Main FastAPI Application

Company and employee registry with server-rendered pages and a JSON API.
Features:
- Company and employee CRUD with full validation summaries
- Referential integrity between employees and companies
- Dashboard and statistics
"""

from fastapi import FastAPI

from core.async_database import startup_async_db, shutdown_async_db
from core.config import APP_TITLE, APP_VERSION, APP_HOST, APP_PORT, APP_DEBUG, LOG_LEVEL
from core.logger import get_logger
from middleware import add_request_id_middleware, register_error_handlers
from routes import include_routes

logger = get_logger(__name__)

# ==================== FASTAPI APPLICATION ====================

app = FastAPI(
    title=APP_TITLE,
    description="Company and employee management with validation and referential integrity",
    version=APP_VERSION,
    debug=APP_DEBUG
)

# ==================== MIDDLEWARE SETUP ====================

app.middleware("http")(add_request_id_middleware)

# ==================== ERROR HANDLERS ====================

register_error_handlers(app)

# ==================== ROUTE REGISTRATION ====================

include_routes(app)

# ==================== STARTUP/SHUTDOWN ====================

@app.on_event("startup")
async def startup_event():
    """Initialize database and test connection on startup"""
    logger.info(f"🚀 Starting up {APP_TITLE}...")
    await startup_async_db()
    logger.info(f"✅ {APP_TITLE} started successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info(f"🛑 Shutting down {APP_TITLE}...")
    await shutdown_async_db()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
