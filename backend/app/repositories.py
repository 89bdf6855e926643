"""Repository pattern for database operations.

This module provides repository classes for the blogs and users collections,
abstracting database operations and providing a clean interface for the service layers.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError
from bson import ObjectId
from bson.errors import InvalidId

from . import db

logger = logging.getLogger(__name__)


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Coerce a string or ObjectId into an ObjectId, returning None when malformed."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class BaseRepository:
    """Base repository class with common database operations."""

    def __init__(self, collection_name: str):
        """Initialize repository with collection name.

        Args:
            collection_name: Name of the MongoDB collection
        """
        self.collection_name = collection_name

    @property
    def collection(self) -> Collection:
        database = db.get_db()
        return database[self.collection_name]

    def find_one(self, filter_dict: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            return self.collection.find_one(filter_dict)
        except PyMongoError as e:
            logger.error(f"Error finding document in {self.collection_name}: {e}")
            raise

    def find_many(self, filter_dict: Dict[str, Any], limit: Optional[int] = None, sort: Optional[List[tuple]] = None) -> List[Dict[str, Any]]:
        try:
            cursor = self.collection.find(filter_dict)
            if sort:
                cursor = cursor.sort(sort)
            if limit:
                cursor = cursor.limit(limit)
            return list(cursor)
        except PyMongoError as e:
            logger.error(f"Error finding documents in {self.collection_name}: {e}")
            raise

    def find_by_id(self, doc_id: Any) -> Optional[Dict[str, Any]]:
        oid = to_object_id(doc_id)
        if oid is None:
            return None
        return self.find_one({'_id': oid})

    def find_by_ids(self, doc_ids: List[Any]) -> List[Dict[str, Any]]:
        oids = [oid for oid in (to_object_id(d) for d in doc_ids) if oid is not None]
        if not oids:
            return []
        return self.find_many({'_id': {'$in': oids}})

    def insert_one(self, document: Dict[str, Any]) -> ObjectId:
        try:
            result = self.collection.insert_one(document)
            return result.inserted_id
        except PyMongoError as e:
            logger.error(f"Error inserting document in {self.collection_name}: {e}")
            raise

    def update_one(self, filter_dict: Dict[str, Any], update_dict: Dict[str, Any]) -> bool:
        try:
            result = self.collection.update_one(filter_dict, update_dict)
            return result.modified_count > 0
        except PyMongoError as e:
            logger.error(f"Error updating document in {self.collection_name}: {e}")
            raise

    def delete_one(self, filter_dict: Dict[str, Any]) -> bool:
        try:
            result = self.collection.delete_one(filter_dict)
            return result.deleted_count > 0
        except PyMongoError as e:
            logger.error(f"Error deleting document in {self.collection_name}: {e}")
            raise


class BlogsRepository(BaseRepository):
    def __init__(self) -> None:
        super().__init__('blogs')

    def find_all(self) -> List[Dict[str, Any]]:
        return self.find_many({}, sort=[('_id', 1)])

    def update_by_id(self, blog_id: ObjectId, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Apply ``$set`` of fields and return the updated document (None when absent)."""
        try:
            return self.collection.find_one_and_update(
                {'_id': blog_id},
                {'$set': fields},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Error updating blog {blog_id}: {e}")
            raise

    def delete_by_id(self, blog_id: ObjectId) -> bool:
        return self.delete_one({'_id': blog_id})


class UsersRepository(BaseRepository):
    def __init__(self) -> None:
        super().__init__('users')

    def find_all(self) -> List[Dict[str, Any]]:
        return self.find_many({}, sort=[('_id', 1)])

    def find_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        return self.find_one({'username': username})

    def create_user(self, user_data: Dict[str, Any]) -> ObjectId:
        try:
            return self.insert_one(user_data)
        except DuplicateKeyError as e:
            logger.warning(f"Duplicate user creation attempt: {e}")
            raise

    def add_blog(self, user_id: ObjectId, blog_id: ObjectId) -> bool:
        return self.update_one({'_id': user_id}, {'$push': {'blogs': blog_id}})

    def remove_blog(self, user_id: ObjectId, blog_id: ObjectId) -> bool:
        return self.update_one({'_id': user_id}, {'$pull': {'blogs': blog_id}})


# Repository instances for easy import
blogs_repo = BlogsRepository()
users_repo = UsersRepository()
