import redis.asyncio as redis
import json

from vlogsphere.config import settings

# Async Redis client
redis_client = redis.from_url(settings.REDIS_URL, decode_responses=True)


VLOG_CACHE_TTL = settings.VLOG_CACHE_TTL

async def set_cache(key: str, data: dict, ttl: int = VLOG_CACHE_TTL):
    await redis_client.set(key, json.dumps(data, default=str), ex=ttl)


# Get cache
async def get_cache(key: str):
    data = await redis_client.get(key)
    return json.loads(data) if data else None

# Delete cache
async def delete_cache(key: str):
    await redis_client.delete(key)
