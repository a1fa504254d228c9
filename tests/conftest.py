# tests/conftest.py
import os

# Settings are read at import time; keep the suite independent of any local .env
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("BLOB_BUCKET", "test-wallpapers")
os.environ.setdefault("REFRESH_ENABLED", "false")

from typing import AsyncIterator, Dict, Iterable, List, Optional, Sequence, Tuple

import pytest

from core.entities import BlobObject
from model.partition import Partition
from util.enums import DeviceClass
from util.errors import BlobStoreError, IndexStoreError

DESKTOP = Partition(device_class=DeviceClass.DESKTOP, index_name="PC_IMAGE_KEYS", prefix="pc_img/")
MOBILE = Partition(device_class=DeviceClass.MOBILE, index_name="MOBILE_IMAGE_KEYS", prefix="mobile_img/")

IPHONE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) "
    "AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)
DESKTOP_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/126.0 Safari/537.36"
)


async def _chunks(data: bytes) -> AsyncIterator[bytes]:
    yield data


class FakeIndexStore:
    def __init__(self, data: Optional[Dict[str, List[str]]] = None) -> None:
        self.data: Dict[str, List[str]] = {k: list(v) for k, v in (data or {}).items()}
        self.reads: List[str] = []
        self.writes: List[Tuple[str, List[str]]] = []
        self.fail_reads = False
        self.fail_writes: set = set()

    async def get(self, index_name: str) -> Optional[List[str]]:
        self.reads.append(index_name)
        if self.fail_reads:
            raise IndexStoreError("connection refused", key=index_name)
        value = self.data.get(index_name)
        return list(value) if value is not None else None

    async def put(self, index_name: str, keys: Sequence[str]) -> None:
        if index_name in self.fail_writes:
            raise IndexStoreError("write refused", key=index_name)
        self.data[index_name] = list(keys)
        self.writes.append((index_name, list(keys)))


class FakeBlobStore:
    def __init__(self, objects: Optional[Dict[str, Tuple[bytes, str]]] = None) -> None:
        self.objects: Dict[str, Tuple[bytes, str]] = dict(objects or {})
        self.gets: List[str] = []
        self.released: List[str] = []
        self.fail_prefixes: set = set()
        self.fail_gets = False

    async def list_keys(self, prefix: str) -> List[str]:
        if prefix in self.fail_prefixes:
            raise BlobStoreError("listing failed: AccessDenied", key=prefix)
        return sorted(k for k in self.objects if k.startswith(prefix))

    async def get(self, key: str) -> Optional[BlobObject]:
        self.gets.append(key)
        if self.fail_gets:
            raise BlobStoreError("get failed: InternalError", key=key)
        if key not in self.objects:
            return None
        data, content_type = self.objects[key]
        return BlobObject(
            key=key,
            body=_chunks(data),
            content_type=content_type,
            size=len(data),
            etag=f"etag-{key}",
            release=lambda: self.released.append(key),
        )


async def read_body(blob: BlobObject) -> bytes:
    return b"".join([chunk async for chunk in blob.body])


def objects(keys: Iterable[str], content_type: str = "image/jpeg") -> Dict[str, Tuple[bytes, str]]:
    return {k: (f"bytes-of-{k}".encode("utf-8"), content_type) for k in keys}


@pytest.fixture()
def partitions() -> List[Partition]:
    return [DESKTOP, MOBILE]
