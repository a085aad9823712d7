"""API v1: REST routes (health, nodes)."""

from app.api.v1.router import api_router

__all__ = ["api_router"]
