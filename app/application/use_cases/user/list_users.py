# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.results import Ok, StoreResult
from ...dto.user_dto import UserResponse
from .result_mapping import to_user_response


class ListUsersUseCase:
    """Use case for listing every user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self) -> StoreResult[List[UserResponse]]:
        result = await self.user_repository.find_all()
        
        if isinstance(result, Ok):
            return Ok([to_user_response(user) for user in result.value])
        return result
