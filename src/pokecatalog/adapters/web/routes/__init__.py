"""Routers exposed by the web adapter."""

from __future__ import annotations

from .events import router as events_router
from .health import router as health_router
from .pokemon import router as pokemon_router
from .types import router as types_router

__all__ = ["events_router", "health_router", "pokemon_router", "types_router"]
