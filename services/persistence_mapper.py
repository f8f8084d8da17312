import logging
from enum import Enum
from typing import Any, Dict, Optional

from db.candidate_store import CandidateStore
from db.store_outcomes import (
    StoreOutcome,
    StoreOk,
    UniquenessViolation,
    NotFound,
    ConnectionFailure,
)
from utils.exceptions import (
    PersistenceError,
    EMAIL_ALREADY_EXISTS_MESSAGE,
    CANDIDATE_NOT_FOUND_MESSAGE,
    DATABASE_CONNECTION_MESSAGE,
)

logger = logging.getLogger(__name__)


class SaveMode(Enum):
    CREATE = "create"
    UPDATE = "update"


def save_mode_for(record_id: Any) -> SaveMode:
    return SaveMode.UPDATE if record_id else SaveMode.CREATE


def resolve_outcome(outcome: StoreOutcome, mode: SaveMode) -> Dict[str, Any]:
    """
    Turns a storage outcome into the stored record, or raises.

    Connection failures win over everything else. A create that collides on email and an update
    that finds no row get fixed domain messages. Every other failure re-raises the storage
    layer's own exception untouched.
    """
    if isinstance(outcome, StoreOk):
        return outcome.record

    if isinstance(outcome, ConnectionFailure):
        logger.warning("Storage connection failed during %s: %s", mode.value, outcome.error)
        raise PersistenceError(DATABASE_CONNECTION_MESSAGE) from outcome.error

    if mode is SaveMode.CREATE and isinstance(outcome, UniquenessViolation) and outcome.field == "email":
        logger.warning("Rejected duplicate email on create")
        raise PersistenceError(EMAIL_ALREADY_EXISTS_MESSAGE) from outcome.error

    if mode is SaveMode.UPDATE and isinstance(outcome, NotFound):
        logger.warning("Update target not found: %s", outcome.error)
        raise PersistenceError(CANDIDATE_NOT_FOUND_MESSAGE) from outcome.error

    raise outcome.error


def resolve_read_outcome(outcome: StoreOutcome) -> Optional[Dict[str, Any]]:
    """Same mapping for reads, except that a missing record is simply None."""
    if isinstance(outcome, NotFound):
        return None
    return resolve_outcome(outcome, SaveMode.UPDATE)


async def persist(
    store: CandidateStore,
    kind: str,
    data: Dict[str, Any],
    record_id: Any = None,
    mode: Optional[SaveMode] = None,
) -> Dict[str, Any]:
    """
    Inserts or updates one record. The mode is fixed before the call is issued: the caller's
    mode when given, otherwise derived from record_id.
    """
    if mode is None:
        mode = save_mode_for(record_id)

    if mode is SaveMode.CREATE:
        outcome = await store.insert(kind, data)
    else:
        outcome = await store.update(kind, record_id, data)

    return resolve_outcome(outcome, mode)
