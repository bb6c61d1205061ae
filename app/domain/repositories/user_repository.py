from abc import ABC, abstractmethod
from typing import List, Mapping

from ..models.user import User
from ..results import StoreResult


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def create(self, fields: Mapping[str, str]) -> StoreResult[User]:
        """Insert a new user; the store assigns the id"""
        pass
    
    @abstractmethod
    async def find_all(self) -> StoreResult[List[User]]:
        """Return every stored user (order unspecified)"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> StoreResult[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def update_by_id(self, user_id: str, fields: Mapping[str, str]) -> StoreResult[User]:
        """Merge fields into an existing user and return the updated user"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, user_id: str) -> StoreResult[User]:
        """Delete user and return it as it was before deletion"""
        pass
