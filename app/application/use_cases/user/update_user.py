# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.results import Ok, StoreResult
from ...dto.user_dto import UpdateUserRequest, UserResponse
from .result_mapping import map_user_result

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: UpdateUserRequest) -> StoreResult[UserResponse]:
        """
        Merge the provided fields into an existing user
        
        Args:
            user_id: ID of the user
            request: Fields to change; fields left out (or null) are kept
            
        Returns:
            Ok with the updated user, NotFound, or StoreError
        """
        fields = request.model_dump(exclude_unset=True, exclude_none=True)
        result = await self.user_repository.update_by_id(user_id, fields)
        
        if isinstance(result, Ok):
            logger.info(f"Updated user {user_id} fields {sorted(fields)}")
        
        return map_user_result(result)
