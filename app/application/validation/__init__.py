from .chain import ErrorKind, FieldError, Location, ValidationChain, run_rules
from .rules import (
    CREATE_USER_RULES,
    GET_USER_QUERY_RULES,
    email_rule,
    id_query_rule,
    name_rule,
    password_rule,
    phone_rule,
)

__all__ = [
    "ErrorKind",
    "FieldError",
    "Location",
    "ValidationChain",
    "run_rules",
    "CREATE_USER_RULES",
    "GET_USER_QUERY_RULES",
    "name_rule",
    "email_rule",
    "password_rule",
    "phone_rule",
    "id_query_rule",
]
