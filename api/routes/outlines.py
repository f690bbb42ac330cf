from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import JSONResponse

from study_tracker.parsing import ParseError, decode_document

from api.dependencies import ClientError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["outlines"])

ALLOWED_CONTENT_TYPES = ("text/plain", "text/markdown")
ALLOWED_SUFFIXES = (".txt", ".md")


def _is_allowed(upload: UploadFile) -> bool:
    """
    Accept a declared text/markdown content type or a .txt/.md filename.
    The suffix check ignores case, so "notes.TXT" passes too.
    """
    content_type = (upload.content_type or "").split(";")[0].strip().lower()
    filename = (upload.filename or "").lower()
    return content_type in ALLOWED_CONTENT_TYPES or filename.endswith(ALLOWED_SUFFIXES)


@router.post("/upload")
async def upload_outline(
    request: Request,
    homework_file: Optional[UploadFile] = File(None, alias="homeworkFile"),
):
    if homework_file is None:
        raise ClientError("No file was uploaded")
    if not _is_allowed(homework_file):
        logger.warning(
            "Rejected upload %r with content type %r", homework_file.filename, homework_file.content_type
        )
        raise ClientError("Only .txt and .md files are supported")

    config = request.app.state.config
    payload = await homework_file.read(config.max_upload_bytes + 1)
    if len(payload) > config.max_upload_bytes:
        raise ClientError("File too large")

    try:
        subjects = request.app.state.parser.parse(decode_document(payload))
    except ParseError as exc:
        logger.error("Failed to parse %r: %s", homework_file.filename, exc)
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": f"Failed to parse file: {exc}"},
        )

    logger.info("Parsed %r into %d subject(s)", homework_file.filename, len(subjects))
    return {"success": True, "data": [subject.to_dict() for subject in subjects]}
