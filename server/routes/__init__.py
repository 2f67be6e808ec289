# server/routes/__init__.py
from .home_routes import router as home_router
from .company_routes import router as company_router
from .employee_routes import router as employee_router
from .api_routes import router as api_router
from .health_routes import router as health_router


def include_routes(app):
    """Include all routes in the FastAPI app."""
    app.include_router(home_router)
    app.include_router(company_router)
    app.include_router(employee_router)
    app.include_router(api_router)
    app.include_router(health_router)
