from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..validation import FieldError


class CreateUserRequest(BaseModel):
    """DTO for user creation request (checked by the validation rules, not by pydantic)"""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)
    
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None


class UpdateUserRequest(BaseModel):
    """DTO for user update request - only the provided fields are merged"""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)
    
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None


class UserResponse(BaseModel):
    """DTO for user response"""
    id: str
    name: str
    email: str
    password: str
    phone: str


class UserEnvelope(BaseModel):
    """Success body carrying a single (possibly absent) user"""
    message: str
    user: Optional[UserResponse] = None


class UserListEnvelope(BaseModel):
    """Success body carrying every user"""
    message: str
    users: List[UserResponse]


class ErrorResponse(BaseModel):
    """Body of every server error response"""
    message: str = "server error"


class ValidationErrorResponse(BaseModel):
    """Body returned when request validation fails"""
    errors: List[FieldError]
