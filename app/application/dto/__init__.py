from .user_dto import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
    UserEnvelope,
    UserListEnvelope,
    ErrorResponse,
    ValidationErrorResponse,
)

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
    "UserEnvelope",
    "UserListEnvelope",
    "ErrorResponse",
    "ValidationErrorResponse",
]
