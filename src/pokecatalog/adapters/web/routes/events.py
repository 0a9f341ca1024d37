"""WebSocket bridge from the change notifier to connected clients.

The notifier publishes from whichever worker thread committed the change. Each
connection owns an ``asyncio.Queue`` that is fed through the connection's own
event loop, so sends always happen on the loop that owns the socket.
"""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import Final
from uuid import uuid4

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from pokecatalog.adapters.web.dependencies import ApplicationDep  # noqa: TC001
from pokecatalog.adapters.web.schemas import PokemonResponse
from pokecatalog.domain.notifier import ChangeEvent, ChangeKind

log = getLogger(__name__)

router = APIRouter(tags=["events"])

EVENT_NAMES: Final[dict[ChangeKind, str]] = {
    ChangeKind.CREATED: "pokemon-created",
    ChangeKind.UPDATED: "pokemon-updated",
    ChangeKind.DELETED: "pokemon-deleted",
}


def event_message(event: ChangeEvent) -> dict[str, object]:
    """Render a change event as the JSON message sent to clients."""

    if event.pokemon is None:
        data: dict[str, object] = {"id": event.pokemon_id}
    else:
        data = PokemonResponse.from_snapshot(event.pokemon).model_dump(mode="json")
    return {"event": EVENT_NAMES[event.kind], "data": data}


async def _forward_events(websocket: WebSocket, queue: asyncio.Queue[ChangeEvent]) -> None:
    while True:
        event = await queue.get()
        await websocket.send_json(event_message(event))


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    # clients never send anything meaningful; only the close frame matters
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return


@router.websocket("/pokemon/events")
async def pokemon_events(websocket: WebSocket, application: ApplicationDep) -> None:
    await websocket.accept()
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[ChangeEvent] = asyncio.Queue()
    client_id = uuid4().hex

    def enqueue(event: ChangeEvent) -> None:
        loop.call_soon_threadsafe(queue.put_nowait, event)

    subscription = application.notifier.subscribe(enqueue)
    log.info("Event client %s connected", client_id)
    try:
        await websocket.send_json({"event": "connected", "data": {"clientId": client_id}})
        tasks = {
            asyncio.create_task(_forward_events(websocket, queue)),
            asyncio.create_task(_wait_for_disconnect(websocket)),
        }
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        for task in done:
            error = task.exception()
            if error is not None and not isinstance(error, WebSocketDisconnect):
                raise error
    finally:
        subscription.close()
        log.info("Event client %s disconnected", client_id)
