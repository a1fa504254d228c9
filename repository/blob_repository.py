# repository/blob_repository.py
import logging
from typing import Any, AsyncIterator, Final, FrozenSet, List, Optional
from botocore.exceptions import BotoCoreError, ClientError
from starlette.concurrency import iterate_in_threadpool, run_in_threadpool
from config.settings import settings
from config.storage import get_s3_client
from core.entities import BlobObject
from util.errors import BlobStoreError

_NOT_FOUND_CODES: Final[FrozenSet[str]] = frozenset({"NoSuchKey", "404", "NotFound"})

logger = logging.getLogger(__name__)


class BlobRepository:
    """
    Read-only view over an S3-compatible bucket (R2, MinIO, AWS S3).

    boto3 is blocking, so every call runs in Starlette's threadpool and the
    object body is streamed back chunk by chunk.
    """

    def __init__(
        self,
        bucket: str = settings.BLOB_BUCKET,
        chunk_size: int = settings.BLOB_STREAM_CHUNK_BYTES,
        client: Optional[Any] = None,
    ) -> None:
        self._bucket = bucket
        self._chunk_size = int(chunk_size)
        self._client = client

    def _s3(self) -> Any:
        if self._client is None:
            self._client = get_s3_client()
        return self._client

    async def list_keys(self, prefix: str) -> List[str]:
        return await run_in_threadpool(self._list_keys, prefix)

    def _list_keys(self, prefix: str) -> List[str]:
        keys: List[str] = []
        try:
            paginator = self._s3().get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
                for obj in page.get("Contents", []):
                    key = obj["Key"]
                    # Skip folder placeholder objects
                    if key.endswith("/"):
                        continue
                    keys.append(key)
        except (ClientError, BotoCoreError) as e:
            raise BlobStoreError(f"listing failed: {self._error_code(e)}", key=prefix) from e
        return keys

    async def get(self, key: str) -> Optional[BlobObject]:
        try:
            resp = await run_in_threadpool(self._get_object, key)
        except ClientError as e:
            code = self._error_code(e)
            if code in _NOT_FOUND_CODES:
                return None
            raise BlobStoreError(f"get failed: {code}", key=key) from e
        except BotoCoreError as e:
            raise BlobStoreError(f"get failed: {type(e).__name__}", key=key) from e

        body = resp["Body"]
        etag = (resp.get("ETag") or "").strip('"') or None
        return BlobObject(
            key=key,
            body=self._stream(body, key),
            content_type=resp.get("ContentType"),
            size=resp.get("ContentLength"),
            etag=etag,
            release=body.close,
        )

    def _get_object(self, key: str) -> dict:
        return self._s3().get_object(Bucket=self._bucket, Key=key)

    async def _stream(self, body: Any, key: str) -> AsyncIterator[bytes]:
        try:
            async for chunk in iterate_in_threadpool(body.iter_chunks(self._chunk_size)):
                yield chunk
        except (ClientError, BotoCoreError):
            logger.error("blob.stream.error key=%s", key)
            raise
        finally:
            body.close()

    @staticmethod
    def _error_code(error: Exception) -> str:
        if isinstance(error, ClientError):
            return str(error.response.get("Error", {}).get("Code", "")) or "ClientError"
        return type(error).__name__
