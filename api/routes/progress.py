from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request

from api.dependencies import ClientError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["progress"])

LOG_PREVIEW_CHARS = 100


async def read_body_capped(request: Request, limit: int) -> bytes:
    """
    Read the request body, stopping with a 413 as soon as more than ``limit``
    bytes have arrived.
    """
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise ClientError("Request body too large", status_code=413)

    chunks = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > limit:
            raise ClientError("Request body too large", status_code=413)
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/save-progress")
async def save_progress(request: Request):
    """
    Acknowledge a progress payload. Nothing is stored; the payload is only
    logged in truncated form.
    """
    config = request.app.state.config
    body = await read_body_capped(request, config.max_json_bytes)
    if not body:
        raise ClientError("Invalid request data")
    try:
        payload = json.loads(body)
    except ValueError:
        raise ClientError("Invalid request data")

    preview = json.dumps(payload, ensure_ascii=False)[:LOG_PREVIEW_CHARS]
    logger.info("Received progress data: %s...", preview)
    return {"success": True, "message": "Progress received"}
