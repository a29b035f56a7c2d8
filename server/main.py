"""FastAPI adapter exposing the sentence router over HTTP and WebSocket.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Raw receiver output is posted to ``POST /sentences`` (one or many sentences
per request body). WebSocket clients connect to ``ws://<host>:8000/ws`` and
receive a stream of JSON messages: a ``type="raw"`` message followed by a
``type="gga"`` or ``type="rmc"`` message for every sentence that decodes.
The enabled identifiers can be read and replaced at runtime through
``/identifiers``.
"""

import asyncio
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Body, FastAPI, HTTPException, Request, WebSocket, WebSocketDisconnect

from navsentence.dispatch import IdentifierConfig, SentenceRouter
from server.broadcaster import Broadcaster
from server.formatters import (
    format_gga_message,
    format_raw_message,
    format_rmc_message,
)

_QUEUE_MAX_SIZE = 100
_TIMEOUT_SECONDS = 5.0

# URL kind -> IdentifierConfig attribute
_IDENTIFIER_ATTRIBUTES = {
    "gga": "gga_identifiers",
    "rmc": "rmc_identifiers",
}


def _connect_router(
    router: SentenceRouter, broadcaster: Broadcaster
) -> list[Callable[[], None]]:
    """Subscribe the broadcaster to all router channels.

    Returns:
        The unsubscribe callables, to be invoked on shutdown.
    """
    send = broadcaster.broadcast_message
    return [
        router.raw_gga_channel.subscribe(
            lambda sentence: send(format_raw_message("gga", sentence))
        ),
        router.gga_channel.subscribe(lambda data: send(format_gga_message(data))),
        router.raw_rmc_channel.subscribe(
            lambda sentence: send(format_raw_message("rmc", sentence))
        ),
        router.rmc_channel.subscribe(lambda data: send(format_rmc_message(data))),
    ]


def _identifier_values(config: IdentifierConfig, kind: str) -> list[str]:
    identifiers = getattr(config, _IDENTIFIER_ATTRIBUTES[kind])
    return sorted(identifier.value for identifier in identifiers)


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    loop = asyncio.get_running_loop()
    router = SentenceRouter()
    broadcaster = Broadcaster(loop, _QUEUE_MAX_SIZE)
    unsubscribers = _connect_router(router, broadcaster)
    application.state.router = router
    application.state.broadcaster = broadcaster
    yield
    for unsubscribe in unsubscribers:
        unsubscribe()


app = FastAPI(lifespan=_lifespan)


@app.post("/sentences", status_code=202)
async def ingest_sentences(request: Request, encoding: str = "ascii") -> dict[str, str]:
    """Route the raw request body through the sentence router.

    Decoding runs on a worker thread so the event loop keeps serving
    WebSocket clients. Malformed or unsupported sentences are dropped by the
    router, so the response is always ``202``.

    Args:
        request: Incoming request; its body is the raw receiver output.
        encoding: Text encoding of the body (default ``"ascii"``).
    """
    body = await request.body()
    router: SentenceRouter = request.app.state.router
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, router.dispatch_bytes, body, encoding)
    return {"status": "accepted"}


@app.get("/identifiers")
async def get_identifiers(request: Request) -> dict[str, list[str]]:
    """Return the currently enabled identifiers per sentence kind."""
    config: IdentifierConfig = request.app.state.router.config
    return {kind: _identifier_values(config, kind) for kind in _IDENTIFIER_ATTRIBUTES}


@app.put("/identifiers/{kind}")
async def set_identifiers(
    kind: str,
    identifiers: Annotated[list[str], Body()],
    request: Request,
) -> dict[str, list[str]]:
    """Replace the enabled identifiers of one kind (``gga`` or ``rmc``).

    The body is a JSON list of identifier literals, e.g. ``["$GNGGA"]``.
    Responds 404 for an unknown kind and 422 for an unknown identifier; in
    both cases the configuration is left unchanged.
    """
    if kind not in _IDENTIFIER_ATTRIBUTES:
        raise HTTPException(status_code=404, detail=f"Unknown sentence kind: {kind}")

    config: IdentifierConfig = request.app.state.router.config
    try:
        setattr(config, _IDENTIFIER_ATTRIBUTES[kind], identifiers)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return {kind: _identifier_values(config, kind)}


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream raw sentences and decoded records to a connected client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so slow clients do
    not stall the router. The connection closes with code 1001 if no message
    arrives within ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    broadcaster: Broadcaster = websocket.app.state.broadcaster
    # Register before accepting so no message posted right after the
    # handshake can be missed
    queue = broadcaster.add_subscriber()
    try:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        broadcaster.remove_subscriber(queue)
