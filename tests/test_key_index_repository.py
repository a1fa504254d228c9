"""Tests for the Redis-backed key index repository."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from repository.key_index_repository import KeyIndexRepository
from util.errors import IndexStoreError, MalformedIndexError


@pytest.fixture()
def redis_mock():
    client = MagicMock()
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock(return_value=True)
    with patch(
        "repository.key_index_repository.get_redis",
        new=AsyncMock(return_value=client),
    ):
        yield client


class TestGet:
    @pytest.mark.asyncio
    async def test_absent_returns_none(self, redis_mock):
        assert await KeyIndexRepository().get("PC_IMAGE_KEYS") is None
        redis_mock.get.assert_awaited_once_with("wallpaper:index:PC_IMAGE_KEYS")

    @pytest.mark.asyncio
    async def test_parses_json_array(self, redis_mock):
        redis_mock.get.return_value = b'["pc_img/a.jpg","pc_img/b.jpg"]'
        assert await KeyIndexRepository().get("PC_IMAGE_KEYS") == ["pc_img/a.jpg", "pc_img/b.jpg"]

    @pytest.mark.asyncio
    async def test_empty_array_is_not_absent(self, redis_mock):
        redis_mock.get.return_value = b"[]"
        assert await KeyIndexRepository().get("MOBILE_IMAGE_KEYS") == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", [b"not json", b'{"keys": []}', b"[1, 2]", b'"a.jpg"'])
    async def test_malformed_value(self, redis_mock, raw):
        redis_mock.get.return_value = raw
        with pytest.raises(MalformedIndexError) as exc:
            await KeyIndexRepository().get("PC_IMAGE_KEYS")
        assert exc.value.key == "PC_IMAGE_KEYS"

    @pytest.mark.asyncio
    async def test_connection_error(self, redis_mock):
        redis_mock.get.side_effect = RedisConnectionError("refused")
        with pytest.raises(IndexStoreError):
            await KeyIndexRepository().get("PC_IMAGE_KEYS")


class TestPut:
    @pytest.mark.asyncio
    async def test_single_whole_value_write(self, redis_mock):
        await KeyIndexRepository().put("PC_IMAGE_KEYS", ["pc_img/a.jpg", "pc_img/b.jpg"])
        redis_mock.set.assert_awaited_once_with(
            "wallpaper:index:PC_IMAGE_KEYS", b'["pc_img/a.jpg","pc_img/b.jpg"]'
        )

    @pytest.mark.asyncio
    async def test_empty_list(self, redis_mock):
        await KeyIndexRepository().put("MOBILE_IMAGE_KEYS", [])
        redis_mock.set.assert_awaited_once_with("wallpaper:index:MOBILE_IMAGE_KEYS", b"[]")

    @pytest.mark.asyncio
    async def test_write_error(self, redis_mock):
        redis_mock.set.side_effect = RedisConnectionError("refused")
        with pytest.raises(IndexStoreError):
            await KeyIndexRepository().put("PC_IMAGE_KEYS", ["pc_img/a.jpg"])
