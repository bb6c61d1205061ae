# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.results import Ok, StoreResult
from ...dto.user_dto import UserResponse
from .result_mapping import map_user_result

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> StoreResult[UserResponse]:
        """
        Delete a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            Ok with the user as it was before deletion, NotFound, or StoreError
        """
        result = await self.user_repository.delete_by_id(user_id)
        
        if isinstance(result, Ok):
            logger.info(f"Deleted user {user_id}")
        
        return map_user_result(result)
