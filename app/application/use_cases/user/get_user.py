# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.results import StoreResult
from ...dto.user_dto import UserResponse
from .result_mapping import map_user_result


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> StoreResult[UserResponse]:
        """
        Get a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            Ok with the user, NotFound, or StoreError (malformed ids included)
        """
        result = await self.user_repository.find_by_id(user_id)
        return map_user_result(result)
