"""Handshake endpoint announced to by a companion device."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from retadi.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["pairing"])

CONNECT_ACK = "Connected successfully"

_MAX_LOGGED_PAYLOAD = 512


@router.post("/connect", response_class=PlainTextResponse)
async def connect(request: Request) -> str:
    """Accept any body as an opaque announcement and acknowledge it.

    No validation and no persistence: the payload only reaches the log.
    """
    body = await request.body()
    payload = body.decode("utf-8", errors="replace")
    client = request.client.host if request.client else None
    logger.info(
        "device_connected",
        client=client,
        payload=payload[:_MAX_LOGGED_PAYLOAD],
        truncated=len(payload) > _MAX_LOGGED_PAYLOAD,
    )
    return CONNECT_ACK
