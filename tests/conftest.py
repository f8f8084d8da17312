"""
Shared fixtures: an in-memory candidate store and sample payloads.
"""

import pytest

from db.candidate_store import CANDIDATE, EDUCATION, WORK_EXPERIENCE, RESUME, CHILD_COLLECTIONS
from db.store_outcomes import StoreOk, UniquenessViolation, NotFound
from utils.exceptions import StorageError


class InMemoryCandidateStore:
    """CandidateStore double. Failures can be forced per (operation, kind) through `failures`."""

    def __init__(self):
        self.records = {kind: {} for kind in (CANDIDATE, EDUCATION, WORK_EXPERIENCE, RESUME)}
        self.calls = []
        self.failures = {}

    async def insert(self, kind, data):
        self.calls.append(("insert", kind, dict(data)))
        if ("insert", kind) in self.failures:
            return self.failures[("insert", kind)]

        if kind == CANDIDATE and any(r.get("email") == data.get("email") for r in self.records[CANDIDATE].values()):
            return UniquenessViolation(field="email", error=StorageError("Unique constraint failed on the fields: (`email`)"))

        record_id = len(self.records[kind]) + 1
        record = {**data, "id": record_id}
        self.records[kind][record_id] = record
        return StoreOk(record=dict(record))

    async def update(self, kind, record_id, data):
        self.calls.append(("update", kind, dict(data)))
        if ("update", kind) in self.failures:
            return self.failures[("update", kind)]

        if record_id not in self.records[kind]:
            return NotFound(error=StorageError(f"Record to update not found: {kind} {record_id}"))

        if kind != CANDIDATE and "candidateId" in data and self.records[kind][record_id].get("candidateId") != data["candidateId"]:
            return NotFound(error=StorageError(f"Record to update not found: {kind} {record_id} for candidate {data['candidateId']}"))

        self.records[kind][record_id].update(data)
        return StoreOk(record=dict(self.records[kind][record_id]))

    async def find_candidate(self, candidate_id):
        if ("find", CANDIDATE) in self.failures:
            return self.failures[("find", CANDIDATE)]

        if candidate_id not in self.records[CANDIDATE]:
            return NotFound(error=StorageError(f"Candidate not found: {candidate_id}"))

        record = dict(self.records[CANDIDATE][candidate_id])
        for kind, collection in CHILD_COLLECTIONS.items():
            record[collection] = [
                dict(child) for child in self.records[kind].values() if child.get("candidateId") == candidate_id
            ]
        return StoreOk(record=record)


@pytest.fixture
def store():
    return InMemoryCandidateStore()


@pytest.fixture
def minimal_payload():
    return {
        "firstName": "Jo",
        "lastName": "González",
        "email": "jose@example.com",
        "phone": "612345678",
    }


@pytest.fixture
def full_payload():
    return {
        "firstName": "José",
        "lastName": "González",
        "email": "jose.gonzalez@example.com",
        "phone": "612345678",
        "address": "Calle Mayor 123, Madrid",
        "educations": [{
            "institution": "Universidad Complutense",
            "title": "Ingeniería Informática",
            "startDate": "2010-09-01",
            "endDate": "2014-06-30",
        }],
        "workExperiences": [{
            "company": "Tech Corp",
            "position": "Software Engineer",
            "description": "Desarrollo de aplicaciones web",
            "startDate": "2015-01-01",
            "endDate": "2018-12-31",
        }],
        "cv": {
            "filePath": "uploads/1715760936750-cv.pdf",
            "fileType": "application/pdf",
        },
    }
