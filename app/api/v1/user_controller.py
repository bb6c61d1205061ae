# Standard library imports
import logging
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import HTMLResponse, JSONResponse

# Local application imports
from ...application.dto.user_dto import (
    CreateUserRequest,
    UpdateUserRequest,
    UserEnvelope,
    UserListEnvelope,
    ErrorResponse,
    ValidationErrorResponse,
)
from ...application.use_cases.user import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)
from ...application.validation import (
    CREATE_USER_RULES,
    GET_USER_QUERY_RULES,
    FieldError,
    run_rules,
)
from ...domain.results import Ok, NotFound, StoreResult
from .dependencies import provide

logger = logging.getLogger(__name__)

HOME_PAGE = "<!DOCTYPE html><html><head><title>home page</title></head><body><h1>home page</h1></body></html>"

ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": ValidationErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}

router = APIRouter(tags=["users"])


def _server_error() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse().model_dump(),
    )


def _validation_error(errors: List[FieldError]) -> JSONResponse:
    # Validation failures answer 404, not 400
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=ValidationErrorResponse(errors=errors).model_dump(mode="json"),
    )


def _user_envelope(result: StoreResult, message: str):
    """
    Map a single-user result to the HTTP response
    
    Ok and NotFound both answer 200 (NotFound carries user: null);
    StoreError answers 500 with a generic body.
    """
    if isinstance(result, Ok):
        return UserEnvelope(message=message, user=result.value)
    if isinstance(result, NotFound):
        return UserEnvelope(message=message, user=None)
    return _server_error()


@router.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Static placeholder page"""
    return HTMLResponse(content=HOME_PAGE)


@router.post("/create", response_model=UserEnvelope, responses=ERROR_RESPONSES)
async def create_user(
    request: Optional[CreateUserRequest] = None,
    create_user_use_case: CreateUserUseCase = Depends(provide(CreateUserUseCase)),
):
    """
    Create a new user
    
    Args:
        request: User fields; a missing body is treated as an empty object
        
    Returns:
        UserEnvelope with the created user, 404 with collected validation
        errors, or 500 on a store failure
    """
    request = request or CreateUserRequest()
    
    errors = run_rules(CREATE_USER_RULES, request.model_dump())
    if errors:
        return _validation_error(errors)
    
    try:
        result = await create_user_use_case.execute(request)
    except Exception as e:
        logger.error(f"Unexpected error creating user: {e}", exc_info=True)
        return _server_error()
    
    return _user_envelope(result, "user created successfully")


@router.get("/get-all", response_model=UserListEnvelope, responses=ERROR_RESPONSES)
async def get_all_users(
    list_users_use_case: ListUsersUseCase = Depends(provide(ListUsersUseCase)),
):
    """
    List every user
    
    Returns:
        UserListEnvelope (possibly empty), or 500 on a store failure
    """
    try:
        result = await list_users_use_case.execute()
    except Exception as e:
        logger.error(f"Unexpected error listing users: {e}", exc_info=True)
        return _server_error()
    
    if isinstance(result, Ok):
        return UserListEnvelope(message="get all users", users=result.value)
    return _server_error()


@router.get("/get-one/{user_id}", response_model=UserEnvelope, responses=ERROR_RESPONSES)
async def get_user(
    user_id: str,
    get_user_use_case: GetUserUseCase = Depends(provide(GetUserUseCase)),
):
    """
    Get a user by ID taken from the path
    
    Returns:
        UserEnvelope (user is null when absent), or 500 on a malformed id
        or store failure
    """
    try:
        result = await get_user_use_case.execute(user_id)
    except Exception as e:
        logger.error(f"Unexpected error getting user {user_id}: {e}", exc_info=True)
        return _server_error()
    
    return _user_envelope(result, "user find successfully")


@router.get("/get-one-query", response_model=UserEnvelope, responses=ERROR_RESPONSES)
async def get_user_by_query(
    user_id: Optional[str] = Query(None, alias="id"),
    get_user_use_case: GetUserUseCase = Depends(provide(GetUserUseCase)),
):
    """
    Get a user by ID taken from the ?id= query parameter
    
    Returns:
        UserEnvelope (user is null when absent), 404 when id is missing,
        or 500 on a malformed id or store failure
    """
    errors = run_rules(GET_USER_QUERY_RULES, {"id": user_id})
    if errors:
        return _validation_error(errors)
    
    try:
        result = await get_user_use_case.execute(user_id)
    except Exception as e:
        logger.error(f"Unexpected error getting user {user_id}: {e}", exc_info=True)
        return _server_error()
    
    return _user_envelope(result, "user find successfully")


@router.put("/update/{user_id}", response_model=UserEnvelope, responses=ERROR_RESPONSES)
async def update_user(
    user_id: str,
    request: Optional[UpdateUserRequest] = None,
    update_user_use_case: UpdateUserUseCase = Depends(provide(UpdateUserUseCase)),
):
    """
    Merge the provided fields into a user
    
    Returns:
        UserEnvelope with the updated user (null when absent), or 500 on a
        store failure
    """
    request = request or UpdateUserRequest()
    
    try:
        result = await update_user_use_case.execute(user_id, request)
    except Exception as e:
        logger.error(f"Unexpected error updating user {user_id}: {e}", exc_info=True)
        return _server_error()
    
    return _user_envelope(result, "user update successfully")


@router.delete("/delete/{user_id}", response_model=UserEnvelope, responses=ERROR_RESPONSES)
async def delete_user(
    user_id: str,
    delete_user_use_case: DeleteUserUseCase = Depends(provide(DeleteUserUseCase)),
):
    """
    Delete a user by ID
    
    Returns:
        UserEnvelope with the user as it was before deletion (null when
        absent), or 500 on a store failure
    """
    try:
        result = await delete_user_use_case.execute(user_id)
    except Exception as e:
        logger.error(f"Unexpected error deleting user {user_id}: {e}", exc_info=True)
        return _server_error()
    
    return _user_envelope(result, "user delete successfully")
