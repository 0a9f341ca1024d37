"""FastAPI transport for the catalog."""

from __future__ import annotations

from .app import create_app
from .routes.events import event_message

__all__ = ["create_app", "event_message"]
