"""
API module - FastAPI routers and error handlers.

Usage:
    from jobboard.api.routes import api_router
    app.include_router(api_router)
"""
