# config/storage.py
import threading
from typing import Any, Optional
import boto3
from botocore.config import Config
from config.settings import settings

_client: Optional[Any] = None
_lock = threading.Lock()


def get_s3_client() -> Any:
    """
    Shared boto3 S3 client for the blob store. Callable from threadpool
    workers: creation happens once under a lock, since boto3's default
    session is not thread-safe. The client itself is.
    """
    global _client
    if _client is not None:
        return _client
    with _lock:
        if _client is None:
            kwargs: dict = {
                "config": Config(
                    region_name=settings.BLOB_REGION,
                    signature_version="s3v4",
                    retries={"max_attempts": 3, "mode": "standard"},
                ),
            }
            if settings.BLOB_ACCESS_KEY_ID and settings.BLOB_SECRET_ACCESS_KEY:
                kwargs["aws_access_key_id"] = settings.BLOB_ACCESS_KEY_ID
                kwargs["aws_secret_access_key"] = settings.BLOB_SECRET_ACCESS_KEY
            if settings.BLOB_ENDPOINT_URL:
                kwargs["endpoint_url"] = settings.BLOB_ENDPOINT_URL
            _client = boto3.client("s3", **kwargs)
    return _client


def close_s3_client() -> None:
    global _client
    with _lock:
        if _client is not None:
            _client.close()
            _client = None
