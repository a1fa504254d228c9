# repository/key_index_repository.py
import logging
from typing import Final, List, Optional, Sequence
from pydantic import TypeAdapter, ValidationError
from redis.asyncio import Redis
from redis.exceptions import RedisError
from config.cache import get_redis
from repository.namespaces import INDEX
from util.errors import IndexStoreError, MalformedIndexError

KEY_PREFIX: Final[str] = INDEX
_KEYS: Final[TypeAdapter[List[str]]] = TypeAdapter(List[str])

logger = logging.getLogger(__name__)


class KeyIndexRepository:
    """
    Redis-backed key index, one string value per partition holding a JSON array.

    Writes are a single SET of the full array, so readers see either the
    previous index or the new one, never a partial list.
    """

    @staticmethod
    async def _client() -> Redis:
        return await get_redis()

    @staticmethod
    def _key(index_name: str) -> str:
        return f"{KEY_PREFIX}:{index_name}"

    async def get(self, index_name: str) -> Optional[List[str]]:
        try:
            r = await self._client()
            raw = await r.get(self._key(index_name))
        except RedisError as e:
            raise IndexStoreError(f"index read failed: {type(e).__name__}", key=index_name) from e

        if raw is None:
            return None
        try:
            return _KEYS.validate_json(raw)
        except ValidationError as e:
            logger.error("index.malformed index=%s bytes=%d", index_name, len(raw))
            raise MalformedIndexError("stored index is not a JSON array of strings", key=index_name) from e

    async def put(self, index_name: str, keys: Sequence[str]) -> None:
        payload = _KEYS.dump_json(list(keys))
        try:
            r = await self._client()
            await r.set(self._key(index_name), payload)
        except RedisError as e:
            raise IndexStoreError(f"index write failed: {type(e).__name__}", key=index_name) from e
