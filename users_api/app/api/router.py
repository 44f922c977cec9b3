"""
Top‑level router for the API.

The health check is served at the root (``/health``) so that load
balancers and container health checks need no prefix.  Data endpoints
live under ``/api``.  When new domains are introduced, include their
routers in ``api_router``.
"""

from fastapi import APIRouter

from .endpoints import health, users

# Routes mounted at the application root.
root_router = APIRouter()
root_router.include_router(health.router, tags=["health"])

# Routes mounted under the ``/api`` prefix by ``create_app``.
api_router = APIRouter()
api_router.include_router(users.router, prefix="/users", tags=["users"])
