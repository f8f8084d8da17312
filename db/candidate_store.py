import logging
from typing import Any, Dict, Protocol

from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError, TimeoutError as RedisTimeoutError, RedisError, WatchError

from db.store_outcomes import (
    StoreOutcome,
    StoreOk,
    UniquenessViolation,
    NotFound,
    ConnectionFailure,
    StoreFailure,
)
from utils.config import settings
from utils.exceptions import StorageError
from utils.utils import serialize_record, deserialize_record, normalize_email

logger = logging.getLogger(__name__)

CANDIDATE = "candidate"
EDUCATION = "education"
WORK_EXPERIENCE = "work_experience"
RESUME = "resume"

# child kind -> collection name on the candidate aggregate
CHILD_COLLECTIONS = {
    EDUCATION: "educations",
    WORK_EXPERIENCE: "workExperiences",
    RESUME: "resumes",
}


def _email_taken() -> UniquenessViolation:
    return UniquenessViolation(
        field="email",
        error=StorageError("Unique constraint failed on the fields: (`email`)"),
    )


class CandidateStore(Protocol):
    async def insert(self, kind: str, data: Dict[str, Any]) -> StoreOutcome: ...

    async def update(self, kind: str, record_id: int, data: Dict[str, Any]) -> StoreOutcome: ...

    async def find_candidate(self, candidate_id: int) -> StoreOutcome: ...


class RedisCandidateStore:
    """
    Candidate aggregate storage on top of Redis.

    Every record is a JSON string under "<prefix>:<kind>:<id>", ids come from a per-kind counter,
    a candidate's children are listed under "<prefix>:candidate:<id>:<collection>" and email
    uniqueness is enforced with an index key written in the same MULTI/EXEC as the record.
    Redis failures never escape: they are returned as ConnectionFailure or StoreFailure outcomes.
    """

    def __init__(self, redis_connection: Redis, key_prefix: str = settings.REDIS_KEY_PREFIX):
        self.redis_connection = redis_connection
        self.key_prefix = key_prefix

    def _key(self, *parts: Any) -> str:
        return ":".join([self.key_prefix, *(str(part) for part in parts)])

    def _email_key(self, email: str) -> str:
        return self._key(CANDIDATE, "email", normalize_email(email))

    def _children_key(self, candidate_id: Any, kind: str) -> str:
        return self._key(CANDIDATE, candidate_id, CHILD_COLLECTIONS[kind])

    async def insert(self, kind: str, data: Dict[str, Any]) -> StoreOutcome:
        try:
            return await self._insert(kind, data)
        except (RedisConnectionError, RedisTimeoutError) as e:
            logger.error(f"Redis unreachable while inserting {kind}: {e}")
            return ConnectionFailure(error=e)
        except RedisError as e:
            return StoreFailure(error=StorageError(str(e)))

    async def update(self, kind: str, record_id: int, data: Dict[str, Any]) -> StoreOutcome:
        try:
            return await self._update(kind, record_id, data)
        except (RedisConnectionError, RedisTimeoutError) as e:
            logger.error(f"Redis unreachable while updating {kind} {record_id}: {e}")
            return ConnectionFailure(error=e)
        except RedisError as e:
            return StoreFailure(error=StorageError(str(e)))

    async def find_candidate(self, candidate_id: int) -> StoreOutcome:
        try:
            return await self._find_candidate(candidate_id)
        except (RedisConnectionError, RedisTimeoutError) as e:
            logger.error(f"Redis unreachable while reading candidate {candidate_id}: {e}")
            return ConnectionFailure(error=e)
        except RedisError as e:
            return StoreFailure(error=StorageError(str(e)))

    async def _insert(self, kind: str, data: Dict[str, Any]) -> StoreOutcome:
        record_id = await self.redis_connection.incr(self._key(kind, "id_seq"))
        record = {**data, "id": record_id}
        record_key = self._key(kind, record_id)

        # the email reservation and the record are written in one MULTI, or not at all
        async with self.redis_connection.pipeline(transaction=True) as pipe:
            if kind == CANDIDATE:
                email_key = self._email_key(data["email"])
                try:
                    await pipe.watch(email_key)
                    if await pipe.exists(email_key):
                        return _email_taken()
                    pipe.multi()
                    pipe.set(email_key, record_id)
                    pipe.set(record_key, serialize_record(record))
                    await pipe.execute()
                except WatchError:
                    return _email_taken()
            else:
                pipe.set(record_key, serialize_record(record))
                parent_id = data.get("candidateId")
                if parent_id is not None:
                    pipe.rpush(self._children_key(parent_id, kind), record_id)
                await pipe.execute()

        return StoreOk(record=record)

    async def _update(self, kind: str, record_id: int, data: Dict[str, Any]) -> StoreOutcome:
        record_key = self._key(kind, record_id)

        async with self.redis_connection.pipeline(transaction=True) as pipe:
            try:
                await pipe.watch(record_key)
                record = deserialize_record(await pipe.get(record_key))

                if record is None:
                    return NotFound(error=StorageError(f"Record to update not found: {kind} {record_id}"))

                # a child is only reachable through its own candidate
                if kind != CANDIDATE and "candidateId" in data and record.get("candidateId") != data["candidateId"]:
                    return NotFound(error=StorageError(
                        f"Record to update not found: {kind} {record_id} for candidate {data['candidateId']}"
                    ))

                new_email_key = old_email_key = None
                new_email = data.get("email")
                old_email = record.get("email")
                if kind == CANDIDATE and new_email and (not old_email or normalize_email(new_email) != normalize_email(old_email)):
                    new_email_key = self._email_key(new_email)
                    old_email_key = self._email_key(old_email) if old_email else None
                    await pipe.watch(new_email_key)
                    if await pipe.exists(new_email_key):
                        return _email_taken()

                record.update(data)

                pipe.multi()
                if new_email_key:
                    pipe.set(new_email_key, record_id)
                if old_email_key:
                    pipe.delete(old_email_key)
                pipe.set(record_key, serialize_record(record))
                await pipe.execute()
            except WatchError as e:
                return StoreFailure(error=StorageError(f"Concurrent update of {kind} {record_id}: {e}"))

        return StoreOk(record=record)

    async def _find_candidate(self, candidate_id: int) -> StoreOutcome:
        record = deserialize_record(await self.redis_connection.get(self._key(CANDIDATE, candidate_id)))

        if record is None:
            return NotFound(error=StorageError(f"Candidate not found: {candidate_id}"))

        for kind, collection in CHILD_COLLECTIONS.items():
            child_ids = await self.redis_connection.lrange(self._children_key(candidate_id, kind), 0, -1)
            children = []
            if child_ids:
                raw_children = await self.redis_connection.mget([self._key(kind, child_id) for child_id in child_ids])
                children = [deserialize_record(raw) for raw in raw_children if raw is not None]
            record[collection] = children

        return StoreOk(record=record)
