from collections.abc import Mapping
from typing import Any, Dict, Union

from pydantic import ValidationError

from pydantic_schemas.candidate_pydantic import CandidateSchema, CreateCandidateRequest, UpdateCandidateRequest
from utils.exceptions import CandidateValidationError

CANDIDATE_SCALAR_FIELDS = ("id", "firstName", "lastName", "email", "phone", "address")


def _resumes_from_cv(cv: Any) -> list:
    if cv is None:
        return []
    if not isinstance(cv, Mapping):
        raise CandidateValidationError("cv", "Invalid CV data")
    # an empty CV object means no file has been attached yet
    if not cv.get("filePath"):
        return []
    return [{"filePath": cv["filePath"], "fileType": cv.get("fileType")}]


def assemble_candidate(payload: Dict[str, Any]) -> CandidateSchema:
    """
    Builds the candidate aggregate from a payload. Nested collections that were not
    supplied become empty lists so persistence can iterate them unconditionally.
    """
    data = {field: payload[field] for field in CANDIDATE_SCALAR_FIELDS if field in payload}
    data["educations"] = payload.get("educations") or []
    data["workExperiences"] = payload.get("workExperiences") or []
    data["resumes"] = _resumes_from_cv(payload.get("cv"))

    try:
        return CandidateSchema.model_validate(data)
    except ValidationError as e:
        # only reachable for edit payloads, which skip field validation
        raise CandidateValidationError("candidate", "Invalid candidate data") from e


def assemble_from_request(request: Union[CreateCandidateRequest, UpdateCandidateRequest]) -> CandidateSchema:
    """The request type decides the identity: updates carry candidate_id, creates never have one."""
    payload = dict(request.payload)
    if isinstance(request, UpdateCandidateRequest):
        payload["id"] = request.candidate_id
    else:
        payload.pop("id", None)
    return assemble_candidate(payload)


def candidate_row(candidate: CandidateSchema) -> Dict[str, Any]:
    """Scalar columns of the candidate that were actually supplied, without the id."""
    return candidate.model_dump(
        include=set(CANDIDATE_SCALAR_FIELDS) - {"id"},
        exclude_unset=True,
    )
