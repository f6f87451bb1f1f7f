"""Archive analysis routes for the API."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, HTTPException, Request, status
from starlette.datastructures import UploadFile

from loc_counter.api.schemas.archives import (
    CountLinesResponse,
    ErrorResponse,
    ScanExtensionsResponse,
)
from loc_counter.constants.archive_constants import MAX_ARCHIVE_BYTES, UPLOAD_CHUNK_SIZE
from loc_counter.models.archive import ArchiveError, ArchiveTooLargeError
from loc_counter.services.archive_analysis import (
    count_lines_from_archive,
    scan_extensions_from_archive,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["archives"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Archive rejected"},
    500: {"model": ErrorResponse, "description": "Archive could not be analyzed"},
}


def _require_archive(archive: object) -> UploadFile:
    # Plain-text values and missing fields are rejected alike.
    if not isinstance(archive, UploadFile):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Archive file is required.",
        )
    return archive


async def _read_archive(archive: UploadFile) -> bytes:
    """Read an upload into memory, stopping as soon as it exceeds the size ceiling."""
    if archive.size is not None and archive.size > MAX_ARCHIVE_BYTES:
        raise ArchiveTooLargeError()

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await archive.read(UPLOAD_CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > MAX_ARCHIVE_BYTES:
            raise ArchiveTooLargeError()
        chunks.append(chunk)
    return b"".join(chunks)


@router.post(
    "/scan-extensions",
    response_model=ScanExtensionsResponse,
    summary="List file extensions in an archive",
    description="Extract a ZIP archive and list the extensions of its text files.",
    responses=_ERROR_RESPONSES,
)
async def scan_extensions(request: Request) -> ScanExtensionsResponse:
    async with request.form() as form:
        upload = _require_archive(form.get("archive"))
        try:
            data = await _read_archive(upload)
            extensions = await asyncio.to_thread(scan_extensions_from_archive, data)
        except ArchiveError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(exc),
            ) from exc
        except Exception as exc:
            logger.exception("Failed to scan extensions for %s", upload.filename)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to scan extensions.",
            ) from exc

    return ScanExtensionsResponse(extensions=extensions)


@router.post(
    "/count-lines",
    response_model=CountLinesResponse,
    summary="Count lines by extension",
    description=(
        "Extract a ZIP archive and count lines of the text files whose extension "
        "is among the selected ones."
    ),
    responses=_ERROR_RESPONSES,
)
async def count_lines(request: Request) -> CountLinesResponse:
    async with request.form() as form:
        upload = _require_archive(form.get("archive"))
        extensions = [str(value) for value in form.getlist("extensions")]
        try:
            data = await _read_archive(upload)
            result = await asyncio.to_thread(count_lines_from_archive, data, extensions)
        except ArchiveError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(exc),
            ) from exc
        except Exception as exc:
            logger.exception("Failed to count lines for %s", upload.filename)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to count lines.",
            ) from exc

    return CountLinesResponse.from_result(result)
