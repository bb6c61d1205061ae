# Standard library imports
import logging
from typing import Any, Dict, List, Mapping, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.results import Ok, NotFound, StoreError, StoreResult

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection
    
    async def create(self, fields: Mapping[str, str]) -> StoreResult[User]:
        """
        Insert a new user document
        
        Args:
            fields: name, email, password and phone
            
        Returns:
            Ok with the stored user (id assigned by MongoDB), or StoreError
        """
        try:
            result = await self.user_collection.insert_one(self._fields_to_dict(fields))
            
            # Fetch and return the newly created document
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                return self._store_error("create", "User was created but could not be retrieved")
            
            return Ok(self._document_to_user(new_document))
        except PyMongoError as e:
            return self._store_error("create", str(e), e)
    
    async def find_all(self) -> StoreResult[List[User]]:
        """
        Find every user
        
        Returns:
            Ok with a (possibly empty) list of users, or StoreError
        """
        try:
            documents = await self.user_collection.find({}).to_list(length=None)
            return Ok([self._document_to_user(document) for document in documents])
        except PyMongoError as e:
            return self._store_error("find_all", str(e), e)
    
    async def find_by_id(self, user_id: str) -> StoreResult[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            Ok with the user, NotFound, or StoreError (also for a malformed id)
        """
        try:
            object_id = ObjectId(user_id)
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            if document is None:
                return NotFound()
            return Ok(self._document_to_user(document))
        except (InvalidId, TypeError) as e:
            return self._store_error("find_by_id", f"Invalid user ID format: {user_id}", e)
        except PyMongoError as e:
            return self._store_error("find_by_id", str(e), e)
    
    async def update_by_id(self, user_id: str, fields: Mapping[str, str]) -> StoreResult[User]:
        """
        Merge fields into an existing user
        
        Args:
            user_id: ID of the user to update
            fields: Fields to set; unspecified fields are kept
            
        Returns:
            Ok with the post-update user, NotFound, or StoreError
        """
        update = self._fields_to_dict(fields)
        
        try:
            object_id = ObjectId(user_id)
            if update:
                document = await self.user_collection.find_one_and_update(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": update},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                # $set with no fields is rejected by MongoDB; nothing to merge
                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            
            if document is None:
                return NotFound()
            return Ok(self._document_to_user(document))
        except (InvalidId, TypeError) as e:
            return self._store_error("update_by_id", f"Invalid user ID format: {user_id}", e)
        except PyMongoError as e:
            return self._store_error("update_by_id", str(e), e)
    
    async def delete_by_id(self, user_id: str) -> StoreResult[User]:
        """
        Delete user by ID
        
        Args:
            user_id: ID of the user to delete
            
        Returns:
            Ok with the user as it was before deletion, NotFound, or StoreError
        """
        try:
            object_id = ObjectId(user_id)
            document = await self.user_collection.find_one_and_delete({UserFields.MONGO_ID: object_id})
            if document is None:
                return NotFound()
            return Ok(self._document_to_user(document))
        except (InvalidId, TypeError) as e:
            return self._store_error("delete_by_id", f"Invalid user ID format: {user_id}", e)
        except PyMongoError as e:
            return self._store_error("delete_by_id", str(e), e)
    
    def _store_error(self, operation: str, reason: str, exception: Optional[BaseException] = None) -> StoreError:
        logger.error(f"User store {operation} failed: {reason}", exc_info=exception)
        return StoreError(operation=operation, reason=reason, exception=exception)
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            password=document.get(UserFields.PASSWORD, ""),
            phone=document.get(UserFields.PHONE, ""),
        )
    
    def _fields_to_dict(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Keep only the writable business fields with a value
        
        Args:
            fields: Incoming field mapping
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            key: fields[key]
            for key in UserFields.WRITABLE
            if key in fields and fields[key] is not None
        }
