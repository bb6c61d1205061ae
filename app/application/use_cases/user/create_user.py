# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.results import Ok, StoreResult
from ...dto.user_dto import CreateUserRequest, UserResponse
from .result_mapping import map_user_result

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: CreateUserRequest) -> StoreResult[UserResponse]:
        """
        Create a new user
        
        Args:
            request: Creation request that already passed the validation rules
            
        Returns:
            Ok with the created user, or StoreError
        """
        fields = request.model_dump()
        # Email is stored as validated, i.e. trimmed
        if fields.get("email"):
            fields["email"] = fields["email"].strip()
        
        result = await self.user_repository.create(fields)
        
        if isinstance(result, Ok):
            logger.info(f"Created user {result.value.id}")
        
        return map_user_result(result)
