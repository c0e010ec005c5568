import logging

from fastapi import Depends, FastAPI
from redis import Redis, RedisError

from .config import get_settings
from .redis_client import get_redis
from .routers import payments, slots

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Turf Slots API")

app.include_router(slots.router)
app.include_router(payments.router)


@app.get("/health")
def health(redis: Redis = Depends(get_redis)):
    try:
        return {"redis": redis.ping()}
    except RedisError:
        return {"redis": False}
