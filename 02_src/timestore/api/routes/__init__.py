"""API routes."""

from .timestamps import create_time_router

__all__ = ["create_time_router"]
