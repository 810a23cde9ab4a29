"""Local storage backend routes (dev only)."""

import io
import os

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse

from custody_ledger.services import storage_service

router = APIRouter()


def _require_local_backend() -> None:
    if storage_service._get_storage_backend() != "local":
        raise HTTPException(status_code=404, detail="Not found")


@router.put("/local/{storage_key:path}", status_code=status.HTTP_204_NO_CONTENT)
async def upload_local_file(storage_key: str, request: Request):
    """Receive the bytes for a key issued by an upload-url endpoint."""
    _require_local_backend()
    body = await request.body()
    storage_service.store_local_file(storage_key, io.BytesIO(body))


@router.get("/local/{storage_key:path}")
def download_local_file(storage_key: str):
    """Serve a locally stored file."""
    _require_local_backend()
    path = storage_service._local_path(storage_key)
    if not os.path.isfile(path):
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(path)
