"""
Field validation chains.

A ``ValidationChain`` targets one field of a request source (the JSON body or
the query string) and holds an ordered list of checks. Every check runs on
every validation; failures are collected rather than stopping at the first
one, so a single field can report several errors.

Example::

    name_rule = (
        ValidationChain("name")
        .not_empty().with_message("Name is required")
        .length(min_length=2, max_length=50).with_message("Name must be between 2 and 50 characters")
    )
    errors = name_rule.validate({"name": "J"})
"""
# Standard library imports
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional

# External package imports
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel


class ErrorKind(str, Enum):
    """Class of a validation failure"""
    REQUIRED_FIELD = "RequiredField"
    LENGTH_OUT_OF_RANGE = "LengthOutOfRange"
    PATTERN_MISMATCH = "PatternMismatch"


class Location(str, Enum):
    """Where the validated field is read from"""
    BODY = "body"
    QUERY = "query"


class FieldError(BaseModel):
    """A single failed check"""
    field: str
    location: Location
    kind: ErrorKind
    message: str


@dataclass
class _Check:
    predicate: Callable[[str], bool]
    kind: ErrorKind
    message: str


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


class ValidationChain:
    """Ordered checks over one field"""
    
    def __init__(self, field: str, location: Location = Location.BODY) -> None:
        self.field = field
        self.location = location
        self._trim = False
        self._checks: List[_Check] = []
    
    def trim(self) -> "ValidationChain":
        """Strip surrounding whitespace before running the checks"""
        self._trim = True
        return self
    
    def not_empty(self) -> "ValidationChain":
        return self._add(lambda value: value != "", ErrorKind.REQUIRED_FIELD)
    
    def length(self, min_length: int = 0, max_length: Optional[int] = None) -> "ValidationChain":
        return self._add(
            lambda value: len(value) >= min_length and (max_length is None or len(value) <= max_length),
            ErrorKind.LENGTH_OUT_OF_RANGE,
        )
    
    def matches(self, pattern: str) -> "ValidationChain":
        compiled = re.compile(pattern)
        return self._add(lambda value: compiled.search(value) is not None, ErrorKind.PATTERN_MISMATCH)
    
    def is_numeric(self) -> "ValidationChain":
        return self._add(lambda value: value.isascii() and value.isdigit(), ErrorKind.PATTERN_MISMATCH)
    
    def is_email(self) -> "ValidationChain":
        return self._add(_is_email, ErrorKind.PATTERN_MISMATCH)
    
    def with_message(self, message: str) -> "ValidationChain":
        """Set the message reported by the most recently added check"""
        if not self._checks:
            raise ValueError("with_message() must follow a check")
        self._checks[-1].message = message
        return self
    
    def validate(self, source: Optional[Mapping[str, Any]]) -> List[FieldError]:
        """
        Run every check against the field value
        
        Args:
            source: Request body or query parameters; None is treated as empty
            
        Returns:
            One FieldError per failed check, in check order
        """
        value = self._read(source)
        return [
            FieldError(
                field=self.field,
                location=self.location,
                kind=check.kind,
                message=check.message,
            )
            for check in self._checks
            if not check.predicate(value)
        ]
    
    def _read(self, source: Optional[Mapping[str, Any]]) -> str:
        raw = source.get(self.field) if source else None
        value = "" if raw is None else str(raw)
        return value.strip() if self._trim else value
    
    def _add(self, predicate: Callable[[str], bool], kind: ErrorKind) -> "ValidationChain":
        self._checks.append(_Check(predicate=predicate, kind=kind, message="Invalid value"))
        return self


def run_rules(rules: List[ValidationChain], source: Optional[Mapping[str, Any]]) -> List[FieldError]:
    """
    Run every rule independently and collect all failures in rule order
    
    Args:
        rules: Validation chains to apply
        source: Request body or query parameters
        
    Returns:
        All collected errors; empty when the input is valid
    """
    errors: List[FieldError] = []
    for rule in rules:
        errors.extend(rule.validate(source))
    return errors
