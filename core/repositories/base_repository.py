"""
Base repository for MongoDB.

Location: core/repositories/base_repository.py

Repositories extend this class to share the common CRUD operations.
"""
from typing import Optional, Dict, Any, List

from bson import ObjectId
from bson.errors import InvalidId

from core.database import get_database
from core.utils.dates import now_ist


class BaseRepository:
    """
    Repository with the common CRUD operations.

    Documents use ObjectId primary keys unless the subclass sets
    `object_id_keys = False` (users are keyed by an opaque string).

    Example usage:
        class CurrencyRepository(BaseRepository):
            def __init__(self):
                super().__init__('currencies')
    """

    object_id_keys = True

    def __init__(self, collection_name: str):
        """
        Args:
            collection_name: Name of the MongoDB collection
        """
        self.db = get_database()
        self.collection = self.db[collection_name]
        self._ensure_indexes()

    def _ensure_indexes(self):
        """
        Creates the indexes the collection needs.
        Subclasses override it.
        """
        pass

    def _key(self, document_id: Any) -> Optional[Any]:
        """
        Converts an id received from the outside into the stored key.

        Returns None when the id cannot be a key of this collection,
        so lookups with a malformed id behave like a miss.
        """
        if not self.object_id_keys:
            return document_id
        if isinstance(document_id, ObjectId):
            return document_id
        try:
            return ObjectId(document_id)
        except (InvalidId, TypeError):
            return None

    def find_by_id(self, document_id: Any) -> Optional[Dict[str, Any]]:
        """
        Finds a document by its id.

        Args:
            document_id: Document id (ObjectId string for ObjectId collections)

        Returns:
            Document or None
        """
        key = self._key(document_id)
        if key is None:
            return None
        return self.collection.find_one({'_id': key})

    def find_many(self, query: Dict[str, Any] = None,
                  limit: int = 0, skip: int = 0,
                  sort: tuple = None) -> List[Dict[str, Any]]:
        """
        Finds several documents.

        Args:
            query: MongoDB query (None for every document)
            limit: Maximum number of results (0 = no limit)
            skip: Number of documents to skip
            sort: Tuple (field, direction)

        Returns:
            List of documents
        """
        cursor = self.collection.find(query or {})

        if sort:
            cursor = cursor.sort(sort[0], sort[1])

        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Inserts a document, filling created_at/updated_at when absent.

        Returns:
            The inserted document (with _id)
        """
        now = now_ist()
        data.setdefault('created_at', now)
        data.setdefault('updated_at', now)
        result = self.collection.insert_one(data)
        data['_id'] = result.inserted_id
        return data

    def create_many(self, documents: List[Dict[str, Any]]) -> List[Any]:
        if not documents:
            return []
        now = now_ist()
        for document in documents:
            document.setdefault('created_at', now)
            document.setdefault('updated_at', now)
        result = self.collection.insert_many(documents)
        return list(result.inserted_ids)

    def update(self, document_id: Any, data: Dict[str, Any]) -> bool:
        """
        Sets fields on a document and refreshes updated_at.

        Returns:
            True if a document matched
        """
        key = self._key(document_id)
        if key is None:
            return False
        data['updated_at'] = now_ist()
        result = self.collection.update_one({'_id': key}, {'$set': data})
        return result.matched_count > 0

    def delete(self, document_id: Any) -> bool:
        """
        Deletes a document.

        Returns:
            True if a document was deleted
        """
        key = self._key(document_id)
        if key is None:
            return False
        result = self.collection.delete_one({'_id': key})
        return result.deleted_count > 0

    def count(self, query: Dict[str, Any] = None) -> int:
        return self.collection.count_documents(query or {})

