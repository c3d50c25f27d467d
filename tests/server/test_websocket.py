"""Tests for the /ws decoding endpoint and its connection lifecycle."""

import asyncio

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from server.main import _reply_until_disconnect
from tests.server.helpers import RMC_NO_CHECKSUM, RMC_VALID, VTG_VALID, with_bad_checksum


def test_replies_in_order(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.send_text(RMC_VALID)
        websocket.send_text(VTG_VALID)
        assert websocket.receive_json()["kind"] == "rmc"
        assert websocket.receive_json()["kind"] == "vtg"


def test_rejected_sentence_keeps_connection(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.send_text(with_bad_checksum(RMC_VALID))
        rejected = websocket.receive_json()
        assert rejected["kind"] == "invalid"
        assert rejected["record"] is None
        assert "checksum" in rejected["detail"]
        websocket.send_text(RMC_VALID)
        assert websocket.receive_json()["kind"] == "rmc"


def test_strict_query_parameter(client: TestClient) -> None:
    with client.websocket_connect("/ws?strict=true") as websocket:
        websocket.send_text(RMC_NO_CHECKSUM)
        assert websocket.receive_json()["kind"] == "invalid"


def test_multiple_clients(client: TestClient) -> None:
    with (
        client.websocket_connect("/ws") as socket_one,
        client.websocket_connect("/ws") as socket_two,
    ):
        socket_one.send_text(RMC_VALID)
        socket_two.send_text(VTG_VALID)
        assert socket_one.receive_json()["kind"] == "rmc"
        assert socket_two.receive_json()["kind"] == "vtg"


def test_timeout_disconnect(monkeypatch: pytest.MonkeyPatch, client: TestClient) -> None:
    monkeypatch.setattr("server.main._IDLE_TIMEOUT_SECONDS", 0.05)
    with (
        pytest.raises(WebSocketDisconnect) as exc_info,
        client.websocket_connect("/ws") as websocket,
    ):
        websocket.receive_json()
    assert exc_info.value.code == 1001


def test_client_disconnect_silent() -> None:
    class MockWebSocket:
        def __init__(self) -> None:
            self.sent: list[str] = []

        async def receive_text(self) -> str:
            if self.sent:
                raise WebSocketDisconnect(code=1000)
            return RMC_VALID

        async def send_text(self, text: str) -> None:
            self.sent.append(text)

    websocket = MockWebSocket()
    asyncio.run(_reply_until_disconnect(websocket, strict=False))  # type: ignore[arg-type]
    assert len(websocket.sent) == 1
