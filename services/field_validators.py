import re
from typing import Any

from utils.exceptions import CandidateValidationError

NAME_REGEX = re.compile(r"^[a-zA-ZñÑáéíóúÁÉÍÓÚüÜ ]+$")
EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PHONE_REGEX = re.compile(r"^[679][0-9]{8}$")
DATE_REGEX = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
ADDRESS_MAX_LENGTH = 100
TEXT_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 200


def validate_name(name: Any) -> None:
    if (
        not isinstance(name, str)
        or len(name) < NAME_MIN_LENGTH
        or len(name) > NAME_MAX_LENGTH
        or NAME_REGEX.fullmatch(name) is None
    ):
        raise CandidateValidationError("name", "Invalid name")


def validate_email(email: Any) -> None:
    if not isinstance(email, str) or EMAIL_REGEX.fullmatch(email) is None:
        raise CandidateValidationError("email", "Invalid email")


def validate_phone(phone: Any) -> None:
    """Phone is optional: None or an empty string short-circuits."""
    if phone is None or phone == "":
        return

    if not isinstance(phone, str) or PHONE_REGEX.fullmatch(phone) is None:
        raise CandidateValidationError("phone", "Invalid phone")


def validate_address(address: Any) -> None:
    if address is None or address == "":
        return

    if not isinstance(address, str) or len(address) > ADDRESS_MAX_LENGTH:
        raise CandidateValidationError("address", "Invalid address")


def validate_required_text(value: Any, category: str, max_length: int = TEXT_MAX_LENGTH) -> None:
    """
    Required bounded text: a non-empty string of at most max_length characters.
    :param value: raw field value
    :param category: field category, used for the error tag and the "Invalid <category>" message
    :param max_length: inclusive upper bound on the length
    """
    if not isinstance(value, str) or len(value) == 0 or len(value) > max_length:
        raise CandidateValidationError(category, f"Invalid {category}")


def validate_optional_text(value: Any, category: str, max_length: int = DESCRIPTION_MAX_LENGTH) -> None:
    if value is None or value == "":
        return

    if not isinstance(value, str) or len(value) > max_length:
        raise CandidateValidationError(category, f"Invalid {category}")


def validate_date(date: Any) -> None:
    # shape only, "2010-13-01" is accepted
    if not isinstance(date, str) or DATE_REGEX.fullmatch(date) is None:
        raise CandidateValidationError("date", "Invalid date")


def validate_end_date(end_date: Any) -> None:
    if end_date is None or end_date == "":
        return

    if not isinstance(end_date, str) or DATE_REGEX.fullmatch(end_date) is None:
        raise CandidateValidationError("endDate", "Invalid end date")
