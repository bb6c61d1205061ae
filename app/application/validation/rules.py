"""Validation rules for the user routes"""
# Local application imports
from ...domain.constants import UserFields
from .chain import Location, ValidationChain

NAME_PATTERN = r"^[A-Za-z\s]+\Z"
PASSWORD_PATTERN = r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}\Z"


def name_rule() -> ValidationChain:
    return (
        ValidationChain(UserFields.NAME)
        .not_empty().with_message("Name is required")
        .length(min_length=2, max_length=50).with_message("Name must be between 2 and 50 characters")
        .matches(NAME_PATTERN).with_message("Name must contain only letters and spaces")
    )


def email_rule() -> ValidationChain:
    return (
        ValidationChain(UserFields.EMAIL)
        .trim()
        .is_email().with_message("Please enter valid email")
    )


def password_rule() -> ValidationChain:
    return (
        ValidationChain(UserFields.PASSWORD)
        .not_empty().with_message("Password is required")
        .length(min_length=8).with_message("Password must be at least 8 characters long")
        .matches(PASSWORD_PATTERN).with_message(
            "Password must contain at least one uppercase letter, one lowercase letter, "
            "one digit, and one special character"
        )
    )


def phone_rule() -> ValidationChain:
    return (
        ValidationChain(UserFields.PHONE)
        .not_empty().with_message("Phone number is required")
        .is_numeric().with_message("Phone number must contain only numeric characters")
        .length(min_length=10, max_length=10).with_message("Phone number must be 10 digits")
    )


def id_query_rule() -> ValidationChain:
    return (
        ValidationChain(UserFields.ID, location=Location.QUERY)
        .not_empty().with_message("Id is Required...")
    )


CREATE_USER_RULES = [name_rule(), email_rule(), password_rule(), phone_rule()]
GET_USER_QUERY_RULES = [id_query_rule()]
