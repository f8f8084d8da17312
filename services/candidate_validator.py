import logging
from collections.abc import Mapping
from typing import Any, Union

from pydantic_schemas.candidate_pydantic import CreateCandidateRequest, UpdateCandidateRequest
from services.field_validators import validate_name, validate_email, validate_phone, validate_address
from services.record_validators import validate_education, validate_work_experience, validate_cv
from utils.exceptions import CandidateValidationError

logger = logging.getLogger(__name__)


def _validate_collection(items: Any, validator, category: str, message: str) -> None:
    if items is None:
        return

    if not isinstance(items, list):
        raise CandidateValidationError(category, message)

    for item in items:
        validator(item)


def _validate_fields(payload: Mapping) -> None:
    validate_name(payload.get("firstName"))
    validate_name(payload.get("lastName"))
    validate_email(payload.get("email"))
    validate_phone(payload.get("phone"))
    validate_address(payload.get("address"))

    _validate_collection(payload.get("educations"), validate_education, "education", "Invalid education data")
    _validate_collection(payload.get("workExperiences"), validate_work_experience, "workExperience", "Invalid work experience data")

    validate_cv(payload.get("cv"))


def parse_candidate_request(payload: Any) -> Union[CreateCandidateRequest, UpdateCandidateRequest]:
    """
    Splits a raw payload into a create or an update request, raising CandidateValidationError
    on the first violation.

    A payload carrying a truthy "id" is an edit of an existing candidate and becomes an
    UpdateCandidateRequest without any field checks. Everything else is validated in full.
    """
    if not isinstance(payload, Mapping):
        raise CandidateValidationError("candidate", "Invalid candidate data")

    if payload.get("id"):
        logger.debug("Skipping validation for edit of candidate %s", payload["id"])
        return UpdateCandidateRequest(candidate_id=payload["id"], payload=dict(payload))

    _validate_fields(payload)
    return CreateCandidateRequest(payload=dict(payload))


def validate_candidate_data(payload: Any) -> None:
    """
    Validates a raw candidate payload, raising CandidateValidationError on the first violation.
    Edit payloads pass unchecked.

    :param payload: the decoded request body
    :return: None
    """
    parse_candidate_request(payload)
