from .mongo_connection import create_mongo_client, get_database, get_user_collection
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "create_mongo_client",
    "get_database",
    "get_user_collection",
    "MongoUserRepository",
]
