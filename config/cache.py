# config/cache.py
from typing import Optional
from redis.asyncio import Redis, from_url
from config.settings import settings

_client: Optional[Redis] = None


async def get_redis() -> Redis:
    """
    Shared client for the key index store. Created lazily on first use.
    """
    global _client
    if _client is None:
        _client = from_url(
            settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=False,  # index repository validates raw bytes itself
            socket_keepalive=True,
            health_check_interval=30,
        )
    return _client


async def ping_redis() -> None:
    # Startup check; the server still boots if it fails (requests answer 500 until Redis is back)
    r = await get_redis()
    await r.ping()


async def close_redis() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
