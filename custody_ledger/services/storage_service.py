"""Blob storage for biometric artifacts (photos, fingerprint scans).

Callers upload bytes out-of-band to a URL from `generate_upload_url()` and
then submit the returned storage key with the photo/fingerprint record.
"""

import logging
import os
import uuid
from typing import BinaryIO

from botocore.exceptions import BotoCoreError, ClientError

from custody_ledger.core.config import settings
from custody_ledger.core.errors import DependencyFailureError, InvalidInputError
from custody_ledger.core.structured_logging import build_log_context
from custody_ledger.services.storage_client import get_s3_client

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "biometrics"
LOCAL_UPLOAD_ROUTE = "/storage/local"


# =============================================================================
# Storage Backend
# =============================================================================

def _get_storage_backend() -> str:
    """Get configured storage backend."""
    return (settings.STORAGE_BACKEND or "local").strip().lower()


def _get_local_storage_path() -> str:
    """Get local storage directory path."""
    path = settings.LOCAL_STORAGE_PATH
    os.makedirs(path, exist_ok=True)
    return path


def validate_storage_key(storage_key: str) -> None:
    """
    Reject keys that could not be released later.

    A key is a relative, slash-separated path with no empty, "." or ".."
    segments, so it always resolves under the storage root.
    """
    if not storage_key or storage_key.startswith("/") or "\\" in storage_key:
        raise InvalidInputError("Invalid storage key")
    if any(part in ("", ".", "..") for part in storage_key.split("/")):
        raise InvalidInputError("Invalid storage key")


def _local_path(storage_key: str) -> str:
    validate_storage_key(storage_key)
    root = os.path.realpath(_get_local_storage_path())
    path = os.path.realpath(os.path.join(root, storage_key))
    if os.path.commonpath([root, path]) != root:
        raise InvalidInputError("Invalid storage key")
    return path


def build_storage_key(prefix: str = DEFAULT_KEY_PREFIX) -> str:
    """Generate a fresh, collision-free storage key."""
    return f"{prefix.strip('/')}/{uuid.uuid4()}"


# =============================================================================
# File Operations
# =============================================================================

def generate_upload_url(prefix: str = DEFAULT_KEY_PREFIX) -> dict[str, str]:
    """
    Reserve a storage key and return where to upload its bytes.

    Returns {"upload_url": ..., "storage_key": ...}.
    """
    storage_key = build_storage_key(prefix)

    if _get_storage_backend() == "s3":
        s3 = get_s3_client()
        try:
            upload_url = s3.generate_presigned_url(
                "put_object",
                Params={"Bucket": settings.S3_BUCKET, "Key": storage_key},
                ExpiresIn=settings.UPLOAD_URL_EXPIRY_SECONDS,
            )
        except (BotoCoreError, ClientError) as exc:
            logger.exception(
                "Failed to presign upload URL", extra=build_log_context(storage_key=storage_key)
            )
            raise DependencyFailureError("Blob storage unavailable") from exc
    else:
        # Local: upload through the dev storage route
        upload_url = f"{LOCAL_UPLOAD_ROUTE}/{storage_key}"

    return {"upload_url": upload_url, "storage_key": storage_key}


def store_local_file(storage_key: str, file: BinaryIO) -> None:
    """Write uploaded bytes to the local backend (dev only)."""
    path = _local_path(storage_key)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        file.seek(0)
        f.write(file.read())


def delete_file(storage_key: str) -> None:
    """
    Release a stored file.

    A missing file is not an error. Any other backend failure is raised as
    DependencyFailureError so the caller leaves its record untouched.
    """
    context = build_log_context(storage_key=storage_key)

    if _get_storage_backend() == "s3":
        s3 = get_s3_client()
        try:
            s3.delete_object(Bucket=settings.S3_BUCKET, Key=storage_key)
        except (BotoCoreError, ClientError) as exc:
            logger.exception("Failed to delete stored file", extra=context)
            raise DependencyFailureError(f"Failed to delete stored file {storage_key}") from exc
    else:
        path = _local_path(storage_key)
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.exception("Failed to delete stored file", extra=context)
            raise DependencyFailureError(f"Failed to delete stored file {storage_key}") from exc

    logger.info("Stored file deleted", extra=context)
