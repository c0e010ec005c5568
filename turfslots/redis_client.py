from redis import Redis

from .config import get_settings

redis_client = Redis.from_url(get_settings().redis_url, decode_responses=True)


# FastAPI dependency
def get_redis() -> Redis:
    return redis_client
