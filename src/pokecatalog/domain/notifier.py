"""In-process change notifier: best-effort fan-out to connected subscribers.

There is no replay. A subscriber only sees events published while it is
connected. A subscriber that raises is disconnected so one broken connection
cannot hold up the others.
"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import TracebackType

    from pokecatalog.domain.model import PokemonSnapshot

log = getLogger(__name__)


class ChangeKind(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """A committed Pokémon mutation. Deletions carry only the id."""

    kind: ChangeKind
    pokemon_id: int
    pokemon: PokemonSnapshot | None = None

    @classmethod
    def created(cls, pokemon: PokemonSnapshot) -> ChangeEvent:
        return cls(kind=ChangeKind.CREATED, pokemon_id=pokemon.id, pokemon=pokemon)

    @classmethod
    def updated(cls, pokemon: PokemonSnapshot) -> ChangeEvent:
        return cls(kind=ChangeKind.UPDATED, pokemon_id=pokemon.id, pokemon=pokemon)

    @classmethod
    def deleted(cls, pokemon_id: int) -> ChangeEvent:
        return cls(kind=ChangeKind.DELETED, pokemon_id=pokemon_id)


Subscriber = Callable[[ChangeEvent], None]


class Subscription:
    """Handle returned by ``ChangeNotifier.subscribe``; closing it disconnects."""

    def __init__(self, notifier: ChangeNotifier, token: int) -> None:
        self._notifier = notifier
        self.token = token

    @property
    def active(self) -> bool:
        return self._notifier.is_subscribed(self.token)

    def close(self) -> None:
        self._notifier.unsubscribe(self)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


class ChangeNotifier:
    """Thread-safe broadcast channel for ``ChangeEvent`` values."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: dict[int, Subscriber] = {}
        self._tokens = itertools.count(1)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscribe(self, subscriber: Subscriber) -> Subscription:
        with self._lock:
            token = next(self._tokens)
            self._subscribers[token] = subscriber
        log.debug("Subscriber %s connected", token)
        return Subscription(self, token)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._drop(subscription.token)

    def is_subscribed(self, token: int) -> bool:
        with self._lock:
            return token in self._subscribers

    def publish(self, event: ChangeEvent) -> int:
        """Deliver ``event`` to every current subscriber and return how many got it."""

        with self._lock:
            targets = list(self._subscribers.items())
        delivered = 0
        for token, subscriber in targets:
            try:
                subscriber(event)
            except Exception:  # noqa: BLE001
                log.warning(
                    "Dropping subscriber %s after delivery failure", token, exc_info=True
                )
                self._drop(token)
                continue
            delivered += 1
        log.debug(
            "Broadcast %s for pokemon %s to %s subscriber(s)",
            event.kind,
            event.pokemon_id,
            delivered,
        )
        return delivered

    def _drop(self, token: int) -> None:
        with self._lock:
            removed = self._subscribers.pop(token, None)
        if removed is not None:
            log.debug("Subscriber %s disconnected", token)
