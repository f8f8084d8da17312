import json
from typing import Any, Dict, Optional


def serialize_record(record: Dict[str, Any]) -> str:
    """Encodes a stored record as the JSON string kept under its Redis key."""
    return json.dumps(record, ensure_ascii=False)

def deserialize_record(raw: Optional[str]) -> Optional[Dict[str, Any]]:
    """Inverse of serialize_record; a missing key gives None."""
    if raw is None:
        return None
    return json.loads(raw)

def normalize_email(email: str) -> str:
    return email.strip().lower()
