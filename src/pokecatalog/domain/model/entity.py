"""
Base building blocks:
surrogate identity assigned by the store.
"""

from __future__ import annotations

from dataclasses import dataclass


class UnsavedEntityError(RuntimeError):
    """Raised when a persisted identity is requested from a transient entity."""


@dataclass(eq=False, kw_only=True)
class Entity:
    """Identity is an integer handed out by the store on first flush."""

    id: int | None = None

    @property
    def persisted_id(self) -> int:
        if self.id is None:
            raise UnsavedEntityError(f"{type(self).__name__} has not been persisted yet")
        return self.id
