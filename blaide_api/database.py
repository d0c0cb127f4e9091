import logging
from pymongo import MongoClient
from pymongo.errors import ServerSelectionTimeoutError, PyMongoError
from dotenv import load_dotenv

from blaide_api.config import get_settings

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

LOCAL_MONGODB_URL = "mongodb://localhost:27017"

client = None
db = None


# Lazy initialization - only connect when needed
def _connect_to_database():
    """Internal function to establish database connection"""
    global client, db

    if db is not None:
        return db  # Already connected

    settings = get_settings()

    try:
        logger.info(f"Attempting to connect to MongoDB: {settings.mongodb_url[:50]}...")
        client = MongoClient(
            settings.mongodb_url,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=10000,
            retryWrites=True
        )

        # Test connection
        client.admin.command("ping")
        logger.info("✅ MongoDB connected successfully")
        db = client[settings.database_name]
        return db

    except ServerSelectionTimeoutError as e:
        logger.warning(f"❌ MongoDB connection timeout: {e}")
        if settings.mongodb_url == LOCAL_MONGODB_URL:
            raise RuntimeError("❌ Database not connected. Make sure MongoDB is running.") from e

        logger.info("Attempting local MongoDB fallback...")
        try:
            client = MongoClient(LOCAL_MONGODB_URL, serverSelectionTimeoutMS=5000)
            client.admin.command("ping")
            logger.info("✅ Local MongoDB connected successfully")
            db = client[settings.database_name]
            return db
        except PyMongoError as local_err:
            logger.error(f"❌ Local MongoDB also failed: {local_err}")
            raise RuntimeError(
                "❌ Database not connected. Make sure MongoDB is running.\n"
                "   For local: run 'mongod' in a terminal\n"
                "   For Atlas: check MONGODB_URL in .env and IP whitelist"
            ) from local_err

    except PyMongoError as e:
        logger.error(f"❌ MongoDB general connection error: {e}")
        raise RuntimeError(
            "❌ Database not connected. Make sure MongoDB is running.\n"
            "   For local: run 'mongod' in a terminal\n"
            "   For Atlas: check MONGODB_URL in .env and IP whitelist"
        ) from e


def get_database():
    """Return the database instance (lazy initialization)"""
    if db is None:
        _connect_to_database()

    return db


def close_database():
    """Close the MongoDB connection"""
    global client, db
    if client:
        client.close()
        client = None
        db = None
        logger.info("MongoDB connection closed")
