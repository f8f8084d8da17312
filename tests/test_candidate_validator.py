import pytest

from pydantic_schemas.candidate_pydantic import CreateCandidateRequest, UpdateCandidateRequest
from services.candidate_validator import validate_candidate_data, parse_candidate_request
from utils.exceptions import CandidateValidationError


def with_fields(base, **fields):
    payload = dict(base)
    payload.update(fields)
    return payload


def test_accepts_minimum_required_fields():
    validate_candidate_data({"firstName": "José", "lastName": "González", "email": "jose@example.com"})


def test_accepts_complete_candidate(full_payload):
    validate_candidate_data(full_payload)


@pytest.mark.parametrize("payload", [None, "candidate", 42, ["firstName"]])
def test_rejects_non_object_payload(payload):
    with pytest.raises(CandidateValidationError, match="^Invalid candidate data"):
        validate_candidate_data(payload)


def test_rejects_empty_object():
    with pytest.raises(CandidateValidationError, match="^Invalid name"):
        validate_candidate_data({})


def test_reports_first_error_only():
    payload = {"firstName": "J", "lastName": "G", "email": "invalid-email", "phone": "123"}

    with pytest.raises(CandidateValidationError, match="^Invalid name"):
        validate_candidate_data(payload)


def test_checks_fields_in_order(minimal_payload):
    with pytest.raises(CandidateValidationError, match="^Invalid name"):
        validate_candidate_data(with_fields(minimal_payload, lastName="G1"))
    with pytest.raises(CandidateValidationError, match="^Invalid email"):
        validate_candidate_data(with_fields(minimal_payload, email="jose@", phone="123"))
    with pytest.raises(CandidateValidationError, match="^Invalid phone"):
        validate_candidate_data(with_fields(minimal_payload, phone="123", address="A" * 101))
    with pytest.raises(CandidateValidationError, match="^Invalid address"):
        validate_candidate_data(with_fields(minimal_payload, address="A" * 101, cv="not-an-object"))


def test_rejects_wrong_scalar_types(minimal_payload):
    with pytest.raises(CandidateValidationError):
        validate_candidate_data(with_fields(minimal_payload, firstName=123))
    with pytest.raises(CandidateValidationError):
        validate_candidate_data(with_fields(minimal_payload, email=123))


def test_phone_and_address_are_optional(minimal_payload):
    payload = dict(minimal_payload)
    del payload["phone"]
    validate_candidate_data(payload)
    validate_candidate_data(with_fields(minimal_payload, phone="", address=""))


def test_edit_mode_skips_validation():
    validate_candidate_data({"id": 1, "firstName": "Invalid", "email": "invalid-email"})


def test_falsy_id_does_not_skip_validation():
    with pytest.raises(CandidateValidationError, match="^Invalid name"):
        validate_candidate_data({"id": 0, "firstName": "J"})


@pytest.mark.parametrize("field", ["educations", "workExperiences"])
def test_collections_must_be_lists(minimal_payload, field):
    with pytest.raises(CandidateValidationError):
        validate_candidate_data(with_fields(minimal_payload, **{field: "not-an-array"}))


@pytest.mark.parametrize("field", ["educations", "workExperiences"])
def test_empty_collections_are_valid(minimal_payload, field):
    validate_candidate_data(with_fields(minimal_payload, **{field: []}))


def test_every_education_entry_is_checked(minimal_payload):
    educations = [
        {"institution": "Universidad", "title": "Grado", "startDate": "2010-09-01"},
        {"institution": "Máster", "title": "Máster", "startDate": "2015/09/01"},
    ]

    with pytest.raises(CandidateValidationError, match="^Invalid date"):
        validate_candidate_data(with_fields(minimal_payload, educations=educations))


def test_educations_are_checked_before_work_experiences(minimal_payload):
    payload = with_fields(
        minimal_payload,
        educations=[{"title": "Grado", "startDate": "2010-09-01"}],
        workExperiences=[{"position": "Engineer", "startDate": "2015-01-01"}],
    )

    with pytest.raises(CandidateValidationError, match="^Invalid institution"):
        validate_candidate_data(payload)


def test_invalid_work_experience_end_date(minimal_payload):
    experience = {"company": "Tech Corp", "position": "Engineer", "startDate": "2015-01-01", "endDate": "invalid"}

    with pytest.raises(CandidateValidationError, match="^Invalid end date"):
        validate_candidate_data(with_fields(minimal_payload, workExperiences=[experience]))


def test_cv_is_checked_last(minimal_payload):
    with pytest.raises(CandidateValidationError, match="^Invalid CV data"):
        validate_candidate_data(with_fields(minimal_payload, cv={"filePath": "x"}))

    validate_candidate_data(with_fields(minimal_payload, cv={}))


def test_parse_returns_create_request_without_id(minimal_payload):
    request = parse_candidate_request(minimal_payload)

    assert isinstance(request, CreateCandidateRequest)
    assert request.payload == minimal_payload


def test_parse_returns_update_request_with_id():
    request = parse_candidate_request({"id": 7, "firstName": "Invalid"})

    assert isinstance(request, UpdateCandidateRequest)
    assert request.candidate_id == 7
    assert request.payload["firstName"] == "Invalid"


def test_parse_raises_for_invalid_create(minimal_payload):
    with pytest.raises(CandidateValidationError, match="^Invalid email"):
        parse_candidate_request(with_fields(minimal_payload, email="jose@example"))


def test_parse_treats_falsy_id_as_create(minimal_payload):
    request = parse_candidate_request(with_fields(minimal_payload, id=0))

    assert isinstance(request, CreateCandidateRequest)
