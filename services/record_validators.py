from collections.abc import Mapping
from typing import Any

from services.field_validators import (
    validate_date,
    validate_end_date,
    validate_optional_text,
    validate_required_text,
)
from utils.exceptions import CandidateValidationError

CV_KEYS = ("filePath", "fileType")


def _as_record(record: Any, category: str, message: str) -> Mapping:
    if not isinstance(record, Mapping):
        raise CandidateValidationError(category, message)
    return record


def validate_education(education: Any) -> None:
    """
    Checks one education entry, stopping at the first failing field.
    Order: institution, title, startDate, endDate.
    """
    education = _as_record(education, "institution", "Invalid institution")

    validate_required_text(education.get("institution"), "institution")
    validate_required_text(education.get("title"), "title")
    validate_date(education.get("startDate"))
    validate_end_date(education.get("endDate"))


def validate_work_experience(experience: Any) -> None:
    """
    Checks one work experience entry, stopping at the first failing field.
    Order: company, position, description, startDate, endDate.
    """
    experience = _as_record(experience, "company", "Invalid company")

    validate_required_text(experience.get("company"), "company")
    validate_required_text(experience.get("position"), "position")
    validate_optional_text(experience.get("description"), "description")
    validate_date(experience.get("startDate"))
    validate_end_date(experience.get("endDate"))


def validate_cv(cv: Any) -> None:
    """
    A CV reference is either absent, an empty object, or carries both filePath and fileType as strings.
    """
    if cv is None:
        return

    if not isinstance(cv, Mapping):
        raise CandidateValidationError("cv", "Invalid CV data")

    present = [key for key in CV_KEYS if key in cv]

    if not present:
        return

    if len(present) != len(CV_KEYS) or not all(isinstance(cv[key], str) for key in CV_KEYS):
        raise CandidateValidationError("cv", "Invalid CV data")
