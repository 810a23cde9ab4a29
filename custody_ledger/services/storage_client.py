"""S3 client for the biometrics bucket."""

from __future__ import annotations

import boto3
from botocore.client import BaseClient
from botocore.config import Config

from custody_ledger.core.config import settings

ADDRESSING_STYLES = {"path", "virtual"}


def _client_config() -> Config | None:
    style = (settings.S3_URL_STYLE or "").strip().lower()
    if style not in ADDRESSING_STYLES:
        return None
    return Config(s3={"addressing_style": style})


def get_s3_client() -> BaseClient:
    """
    Build a client from settings.

    S3_ENDPOINT_URL points it at an S3-compatible store (MinIO in dev).
    Empty credentials fall through to the default boto3 chain.
    """
    endpoint_url = (settings.S3_ENDPOINT_URL or "").rstrip("/") or None
    return boto3.client(
        "s3",
        region_name=settings.S3_REGION or None,
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID or None,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY or None,
        endpoint_url=endpoint_url,
        config=_client_config(),
    )
