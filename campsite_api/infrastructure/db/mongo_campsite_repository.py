"""
MongoDB Campsite Repository
===========================

Concrete implementation of CampsiteRepository using MongoDB.
Comments are stored embedded in the campsite document.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.collection import Collection

from campsite_api.core.config import get_settings
from campsite_api.domain.constants.campsite_fields import CampsiteFields
from campsite_api.domain.constants.comment_fields import CommentFields
from campsite_api.domain.exceptions import ConcurrentModificationError, NotFoundError
from campsite_api.domain.models.campsite import Campsite, Comment
from campsite_api.domain.repositories.campsite_repository import CampsiteRepository, DeletionReport
from campsite_api.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from campsite_api.utils.datetime_utils import now

logger = logging.getLogger(__name__)

# Mongoose-era documents carry a version key we do not expose
_IGNORED_KEYS = frozenset({"__v"})

_COMMENT_KEYS = frozenset({
    CommentFields.ID,
    CommentFields.MONGO_ID,
    CommentFields.AUTHOR_ID,
    CommentFields.TEXT,
    CommentFields.RATING,
    CommentFields.CREATED_AT,
    CommentFields.UPDATED_AT,
})


def _is_object_id(value: Any) -> bool:
    return isinstance(value, str) and len(value) == 24 and ObjectId.is_valid(value)


def stored_id(value: Any) -> Any:
    """Ids and author references are stored as ObjectIds whenever they can be."""
    return ObjectId(value) if _is_object_id(value) else value


def _first_timestamp(doc: dict, key: str, legacy_key: str, default: Optional[datetime] = None) -> datetime:
    """Read a timestamp, falling back to the Mongoose-era key."""
    return doc.get(key) or doc.get(legacy_key) or default or now()


def id_filter(raw_id: str) -> Dict[str, Any]:
    """Match a document id stored either as a string or as an ObjectId."""
    if _is_object_id(raw_id):
        return {CampsiteFields.MONGO_ID: {"$in": [raw_id, ObjectId(raw_id)]}}
    return {CampsiteFields.MONGO_ID: raw_id}


class MongoCampsiteRepository(CampsiteRepository):
    """
    MongoDB implementation of CampsiteRepository.

    Saves replace the whole document in one ``replace_one`` call guarded by
    the ``version`` field, so a save is atomic and never overwrites a newer
    write.
    """

    def __init__(self, client: Optional[MongoClientManager] = None, collection_name: Optional[str] = None):
        """Initialize repository with MongoDB client."""
        self._client = client or get_mongo_client()
        self._collection: Collection = self._client.get_collection(
            collection_name or get_settings().campsites_collection
        )

    def _comment_to_entity(self, doc: dict) -> Comment:
        """Convert an embedded comment document to a Comment entity."""
        return Comment(
            id=str(doc.get(CommentFields.MONGO_ID) or doc.get(CommentFields.ID)),
            author_id=str(doc.get(CommentFields.AUTHOR_ID)),
            text=doc.get(CommentFields.TEXT, ""),
            rating=doc.get(CommentFields.RATING),
            created_at=_first_timestamp(doc, CommentFields.CREATED_AT, CommentFields.LEGACY_CREATED_AT),
            updated_at=_first_timestamp(doc, CommentFields.UPDATED_AT, CommentFields.LEGACY_UPDATED_AT),
            extra={k: v for k, v in doc.items() if k not in _COMMENT_KEYS},
        )

    def _comment_to_document(self, comment: Comment) -> dict:
        """Convert a Comment entity to an embedded document."""
        doc = {
            **comment.extra,
            CommentFields.MONGO_ID: stored_id(comment.id),
            CommentFields.AUTHOR_ID: stored_id(comment.author_id),
            CommentFields.TEXT: comment.text,
        }
        if comment.rating is not None:
            doc[CommentFields.RATING] = comment.rating
        if CommentFields.LEGACY_CREATED_AT in comment.extra:
            doc[CommentFields.LEGACY_CREATED_AT] = comment.created_at
            doc[CommentFields.LEGACY_UPDATED_AT] = comment.updated_at
        else:
            doc[CommentFields.CREATED_AT] = comment.created_at
            doc[CommentFields.UPDATED_AT] = comment.updated_at
        return doc

    def _to_entity(self, doc: dict) -> Campsite:
        """Convert MongoDB document to Campsite entity."""
        if not doc:
            raise ValueError("Document cannot be empty")

        fields = {
            k: v for k, v in doc.items()
            if k not in CampsiteFields.STORED and k not in _IGNORED_KEYS
        }
        raw_id = doc[CampsiteFields.MONGO_ID]
        # Documents without any timestamp still carry their creation time in an ObjectId
        fallback = raw_id.generation_time if isinstance(raw_id, ObjectId) else None
        created_at = _first_timestamp(doc, CampsiteFields.CREATED_AT, CampsiteFields.LEGACY_CREATED_AT, fallback)
        return Campsite(
            id=str(raw_id),
            fields=fields,
            comments=[self._comment_to_entity(c) for c in doc.get(CampsiteFields.COMMENTS) or []],
            version=doc.get(CampsiteFields.VERSION, 0),
            created_at=created_at,
            updated_at=_first_timestamp(doc, CampsiteFields.UPDATED_AT, CampsiteFields.LEGACY_UPDATED_AT, created_at),
        )

    def _to_document(self, campsite: Campsite) -> dict:
        """Convert Campsite entity to MongoDB document (without _id)."""
        doc = {
            **campsite.fields,
            CampsiteFields.COMMENTS: [self._comment_to_document(c) for c in campsite.comments],
            CampsiteFields.VERSION: campsite.version,
        }
        # Keep whichever timestamp convention the stored document already uses
        if CampsiteFields.LEGACY_CREATED_AT in campsite.fields:
            doc[CampsiteFields.LEGACY_CREATED_AT] = campsite.created_at
            doc[CampsiteFields.LEGACY_UPDATED_AT] = campsite.updated_at
        else:
            doc[CampsiteFields.CREATED_AT] = campsite.created_at
            doc[CampsiteFields.UPDATED_AT] = campsite.updated_at
        return doc

    def create(self, campsite: Campsite) -> Campsite:
        """Create a new campsite."""
        campsite.created_at = now()
        campsite.updated_at = campsite.created_at
        campsite.version = 0

        doc = {CampsiteFields.MONGO_ID: stored_id(campsite.id), **self._to_document(campsite)}
        self._collection.insert_one(doc)
        logger.info(f"Campsite {campsite.id} created")
        return campsite

    def save(self, campsite: Campsite) -> Campsite:
        """Replace the stored document if nobody saved it in the meantime."""
        expected_version = campsite.version
        version_filter: Dict[str, Any] = {CampsiteFields.VERSION: expected_version}
        if expected_version == 0:
            # Documents written before versioning have no version field
            version_filter = {"$or": [version_filter, {CampsiteFields.VERSION: {"$exists": False}}]}

        doc = self._to_document(campsite)
        doc[CampsiteFields.VERSION] = expected_version + 1

        # Replacement omits _id so legacy ObjectId ids are kept as stored
        result = self._collection.replace_one(
            {"$and": [id_filter(campsite.id), version_filter]},
            doc,
        )
        if result.matched_count == 0:
            if self._collection.count_documents(id_filter(campsite.id), limit=1) == 0:
                raise NotFoundError(f"Campsite {campsite.id} not found")
            logger.warning(f"Campsite {campsite.id} save rejected: stale version {expected_version}")
            raise ConcurrentModificationError(campsite.id, expected_version)

        campsite.version = expected_version + 1
        return campsite

    def find_by_id(self, campsite_id: str) -> Optional[Campsite]:
        """Find a campsite by its ID."""
        doc = self._collection.find_one(id_filter(campsite_id))
        return self._to_entity(doc) if doc else None

    def find_all(self) -> List[Campsite]:
        """Find all campsites, oldest first (ObjectIds grow with creation time)."""
        docs = self._collection.find({}).sort(CampsiteFields.MONGO_ID, 1)
        return [self._to_entity(doc) for doc in docs]

    def delete_by_id(self, campsite_id: str) -> DeletionReport:
        """Delete a campsite together with its embedded comments."""
        result = self._collection.delete_one(id_filter(campsite_id))
        return DeletionReport(acknowledged=result.acknowledged, deleted_count=result.deleted_count)

    def delete_all(self) -> DeletionReport:
        """Delete every campsite."""
        result = self._collection.delete_many({})
        return DeletionReport(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
