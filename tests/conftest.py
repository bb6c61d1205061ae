"""
Shared pytest fixtures for the user CRUD tests.
"""
import os
from typing import Dict, List, Mapping
from unittest.mock import patch

import pytest
from bson import ObjectId
from bson.errors import InvalidId
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.di.base_container import BaseContainer
from app.di.providers import UserProvider
from app.domain.constants import UserFields
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.domain.results import Ok, NotFound, StoreError, StoreResult


class InMemoryUserRepository(UserRepository):
    """UserRepository keeping documents in a dict, with MongoDB id semantics"""

    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, str]] = {}

    async def create(self, fields: Mapping[str, str]) -> StoreResult[User]:
        user_id = str(ObjectId())
        self.documents[user_id] = {key: fields[key] for key in UserFields.WRITABLE if fields.get(key) is not None}
        return Ok(self._to_user(user_id))

    async def find_all(self) -> StoreResult[List[User]]:
        return Ok([self._to_user(user_id) for user_id in self.documents])

    async def find_by_id(self, user_id: str) -> StoreResult[User]:
        error = self._check_id("find_by_id", user_id)
        if error:
            return error
        if user_id not in self.documents:
            return NotFound()
        return Ok(self._to_user(user_id))

    async def update_by_id(self, user_id: str, fields: Mapping[str, str]) -> StoreResult[User]:
        error = self._check_id("update_by_id", user_id)
        if error:
            return error
        if user_id not in self.documents:
            return NotFound()
        self.documents[user_id].update(
            {key: fields[key] for key in UserFields.WRITABLE if fields.get(key) is not None}
        )
        return Ok(self._to_user(user_id))

    async def delete_by_id(self, user_id: str) -> StoreResult[User]:
        error = self._check_id("delete_by_id", user_id)
        if error:
            return error
        if user_id not in self.documents:
            return NotFound()
        user = self._to_user(user_id)
        del self.documents[user_id]
        return Ok(user)

    def _check_id(self, operation: str, user_id: str):
        try:
            ObjectId(user_id)
        except InvalidId as e:
            return StoreError(operation=operation, reason=f"Invalid user ID format: {user_id}", exception=e)
        return None

    def _to_user(self, user_id: str) -> User:
        document = self.documents[user_id]
        return User(id=user_id, **document)


class FailingUserRepository(UserRepository):
    """UserRepository whose every call fails like an unreachable store"""

    def _error(self, operation: str) -> StoreError:
        return StoreError(operation=operation, reason="connection refused")

    async def create(self, fields):
        return self._error("create")

    async def find_all(self):
        return self._error("find_all")

    async def find_by_id(self, user_id):
        return self._error("find_by_id")

    async def update_by_id(self, user_id, fields):
        return self._error("update_by_id")

    async def delete_by_id(self, user_id):
        return self._error("delete_by_id")


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_crud_db",
        "MONGO_USER_COLLECTION": "user",
        "PORT": "3100",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def valid_user_payload():
    return {
        "name": "John Doe",
        "email": "john.doe@example.com",
        "password": "Passw0rd!",
        "phone": "9876543210",
    }


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


def _build_client(repository: UserRepository):
    from app.main import create_application

    settings = Settings()
    container = BaseContainer()
    container.register_singleton(Settings, settings)
    container.register_singleton(UserRepository, repository)
    UserProvider.register(container)

    return create_application(settings=settings, container=container)


@pytest.fixture
def client(user_repository):
    """Test client wired to the in-memory repository (no real DB)."""
    with TestClient(_build_client(user_repository)) as c:
        yield c


@pytest.fixture
def failing_client():
    """Test client whose store rejects every call."""
    with TestClient(_build_client(FailingUserRepository())) as c:
        yield c
