from utils.utils import serialize_record, deserialize_record, normalize_email


def test_serialized_record_keeps_accents_readable():
    raw = serialize_record({"id": 1, "lastName": "González", "educations": []})

    assert "González" in raw
    assert deserialize_record(raw) == {"id": 1, "lastName": "González", "educations": []}


def test_missing_key_deserializes_to_none():
    assert deserialize_record(None) is None


def test_normalize_email():
    assert normalize_email("  Jose@Example.COM ") == "jose@example.com"
