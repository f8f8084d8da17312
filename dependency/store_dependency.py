from fastapi import Depends
from redis.asyncio import Redis

from db.candidate_store import CandidateStore, RedisCandidateStore
from db.redisConnection import get_redis_connection

async def get_candidate_store(redis_connection: Redis = Depends(get_redis_connection)) -> CandidateStore:
    """
    Dependency function to get the candidate store backed by the shared Redis connection.
    Tests swap it out through app.dependency_overrides.
    :param redis_connection:
    :return:
    """
    return RedisCandidateStore(redis_connection=redis_connection)
