from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass
class StoreOk:
    record: Dict[str, Any]


@dataclass
class UniquenessViolation:
    field: str
    error: Exception


@dataclass
class NotFound:
    error: Exception


@dataclass
class ConnectionFailure:
    error: Exception


@dataclass
class StoreFailure:
    error: Exception

    @property
    def detail(self) -> str:
        return str(self.error)


StoreOutcome = Union[StoreOk, UniquenessViolation, NotFound, ConnectionFailure, StoreFailure]
