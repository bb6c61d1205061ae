# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Create the MongoDB client for the process.
    
    The client owns the connection pool shared by every request; it is
    created once at startup and closed on shutdown.
    
    Args:
        settings: Settings providing the connection string
        
    Returns:
        Motor client (connects lazily on first operation)
    """
    return AsyncIOMotorClient(settings.mongo_uri)


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance
    
    Returns:
        MongoDB database instance
    """
    return client[settings.mongo_database_name]


def get_user_collection(database: AsyncIOMotorDatabase, settings: Settings) -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return database[settings.mongo_user_collection]
