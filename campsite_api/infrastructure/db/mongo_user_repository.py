"""
MongoDB User Repository
=======================

Read-only access to the users collection.
"""
from typing import Dict, Iterable, List, Optional

from bson import ObjectId
from pymongo.collection import Collection

from campsite_api.core.config import get_settings
from campsite_api.domain.constants.user_fields import UserFields
from campsite_api.domain.models.user import User
from campsite_api.domain.repositories.user_repository import UserRepository
from campsite_api.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client


def _id_candidates(user_ids: Iterable[str]) -> List[object]:
    """User ids may be stored as ObjectIds or plain strings."""
    candidates: List[object] = []
    for user_id in user_ids:
        candidates.append(user_id)
        if ObjectId.is_valid(user_id):
            candidates.append(ObjectId(user_id))
    return candidates


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None, collection_name: Optional[str] = None):
        self._client = client or get_mongo_client()
        self._collection: Collection = self._client.get_collection(
            collection_name or get_settings().users_collection
        )

    def _to_entity(self, doc: dict) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            id=str(doc[UserFields.MONGO_ID]),
            username=doc.get(UserFields.USERNAME, ""),
            first_name=doc.get(UserFields.FIRST_NAME),
            last_name=doc.get(UserFields.LAST_NAME),
            admin=bool(doc.get(UserFields.ADMIN, False)),
        )

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by id."""
        doc = self._collection.find_one({UserFields.MONGO_ID: {"$in": _id_candidates([user_id])}})
        return self._to_entity(doc) if doc else None

    def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """Batch lookup used for author resolution."""
        ids = list(dict.fromkeys(str(user_id) for user_id in user_ids))
        if not ids:
            return {}
        docs = self._collection.find({UserFields.MONGO_ID: {"$in": _id_candidates(ids)}})
        users = (self._to_entity(doc) for doc in docs)
        return {user.id: user for user in users}
