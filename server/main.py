"""FastAPI service decoding NMEA 0183 sentences.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Clients either POST one sentence at a time to ``/decode`` or connect to
``ws://<host>:8000/ws`` and send one sentence per text message; every message
is answered with one JSON object of ``type="nmea"``. Reading lines off a
serial port or file and splitting them is the client's job.
"""

import asyncio
import logging

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.responses import Response
from pydantic import BaseModel

from navdecode.nmea import (
    DecodedSentence,
    MalformedSentenceError,
    NMEAError,
    check_sentence,
    decode,
)
from server.formatters import format_decoded_message, format_rejected_message

logger = logging.getLogger(__name__)

_IDLE_TIMEOUT_SECONDS = 30.0
_JSON_MEDIA_TYPE = "application/json"


class DecodeRequest(BaseModel):
    """Body of a ``POST /decode`` request."""

    sentence: str
    strict: bool = False


def _decode_or_raise(sentence: str, strict: bool) -> DecodedSentence:
    check_sentence(sentence, strict)
    decoded = decode(sentence, strict)
    if decoded is None:
        raise MalformedSentenceError("malformed type token")
    return decoded


def _decode_to_message(sentence: str, strict: bool) -> str:
    try:
        decoded = _decode_or_raise(sentence, strict)
    except NMEAError as error:
        logger.info("Rejected sentence %r: %s", sentence, error)
        return format_rejected_message(str(error))
    return format_decoded_message(decoded)


async def _reply_until_disconnect(websocket: WebSocket, strict: bool) -> None:
    try:
        while True:
            sentence = await asyncio.wait_for(
                websocket.receive_text(), timeout=_IDLE_TIMEOUT_SECONDS
            )
            await websocket.send_text(_decode_to_message(sentence, strict))
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


app = FastAPI()


@app.post("/decode")
def decode_sentence(request: DecodeRequest) -> Response:
    """Decode one sentence.

    Responds with HTTP 422 and the failure reason when the line is not a
    valid sentence. Well-formed sentences of unknown type, or whose fields
    do not decode, come back with ``"record": null``.
    """
    try:
        decoded = _decode_or_raise(request.sentence, request.strict)
    except NMEAError as error:
        logger.info("Rejected sentence %r: %s", request.sentence, error)
        raise HTTPException(status_code=422, detail=str(error)) from error
    return Response(format_decoded_message(decoded), media_type=_JSON_MEDIA_TYPE)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket, strict: bool = False) -> None:
    """Decode every text message received on the socket.

    The connection closes with code 1001 if the client stays silent for
    ``_IDLE_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
        strict: Require checksums (``/ws?strict=true``).
    """
    await websocket.accept()
    await _reply_until_disconnect(websocket, strict)
