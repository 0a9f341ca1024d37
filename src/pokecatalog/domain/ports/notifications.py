"""Publish-only port used by the write path to announce committed changes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pokecatalog.domain.notifier import ChangeEvent


@runtime_checkable
class ChangePublisher(Protocol):
    """Fan an event out to whoever is listening right now."""

    def publish(self, event: ChangeEvent) -> int: ...
