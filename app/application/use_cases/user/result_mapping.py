# Local application imports
from ....domain.models.user import User
from ....domain.results import Ok, StoreResult
from ...dto.user_dto import UserResponse


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id or "",
        name=user.name,
        email=user.email,
        password=user.password,
        phone=user.phone,
    )


def map_user_result(result: StoreResult[User]) -> StoreResult[UserResponse]:
    """Convert an Ok(User) into Ok(UserResponse); NotFound and StoreError pass through"""
    if isinstance(result, Ok):
        return Ok(to_user_response(result.value))
    return result
