# repository/base.py
from typing import List, Optional, Protocol, Sequence
from core.entities import BlobObject


class KeyIndexStore(Protocol):
    async def get(self, index_name: str) -> Optional[List[str]]:
        """None when the index was never written. Raises StoreError on faults."""
        ...

    async def put(self, index_name: str, keys: Sequence[str]) -> None:
        """Replace the whole index in one write."""
        ...


class BlobStore(Protocol):
    async def list_keys(self, prefix: str) -> List[str]:
        """Every key under `prefix`, across all listing pages."""
        ...

    async def get(self, key: str) -> Optional[BlobObject]:
        """None when the object does not exist. Raises StoreError on faults."""
        ...
