"""
Database access helpers.

Handlers and the seeding pipeline receive a pymongo ``Database`` explicitly;
``get_db`` is the FastAPI dependency that provides the shared one.
"""
from typing import Any, Dict, Optional, Union

from bson import ObjectId
from pydantic import BaseModel
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from config import DB_CONFIG
from exceptions import DatabaseConnectionError
from logging_setup import get_logger

logger = get_logger(__name__)

_client: Optional[MongoClient] = None


def connect(url: Optional[str] = None, name: Optional[str] = None, timeout_ms: Optional[int] = None):
    """Open a client and verify the server answers.

    Returns:
        Tuple of (client, database)

    Raises:
        DatabaseConnectionError: if the server cannot be reached
    """
    url = url or DB_CONFIG['url']
    name = name or DB_CONFIG['name']
    timeout_ms = timeout_ms or DB_CONFIG['timeout_ms']
    try:
        client = MongoClient(url, serverSelectionTimeoutMS=timeout_ms)
        client.admin.command("ping")
    except PyMongoError as e:
        logger.error(f"MongoDB connection error: {e}")
        raise DatabaseConnectionError(str(e), details={'database': name}) from e
    logger.info(f"Connected to MongoDB database '{name}'")
    return client, client[name]


def get_db() -> Database:
    """FastAPI dependency returning the application database."""
    global _client
    if _client is None:
        _client = MongoClient(DB_CONFIG['url'], serverSelectionTimeoutMS=DB_CONFIG['timeout_ms'])
    return _client[DB_CONFIG['name']]


def serialize_doc(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not doc:
        return doc
    doc = dict(doc)
    _id = doc.pop("_id", None)
    if _id is not None:
        doc["id"] = str(_id)
    for k, v in list(doc.items()):
        if isinstance(v, ObjectId):
            doc[k] = str(v)
    return doc


def create_document(db: Database, collection_name: str, data: Union[BaseModel, Dict[str, Any]]) -> str:
    """Insert one document and return its id as a string."""
    if isinstance(data, BaseModel):
        data = data.model_dump()
    result = db[collection_name].insert_one(dict(data))
    return str(result.inserted_id)

