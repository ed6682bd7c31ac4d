"""
MongoDB Repository Base
=======================

Plumbing shared by the MongoDB repositories: document conversion hooks,
duplicate-key translation, paging and text-search helpers.

Unique indexes are the authority for uniqueness; a DuplicateKeyError raised
by the server is re-raised as ConflictError.
"""
import logging
import re
from decimal import Decimal
from typing import Any, Dict, Generic, Iterable, List, Optional, TypeVar

from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from salon_crm.domain.errors import ConflictError, NotFoundError
from salon_crm.domain.repositories.pagination import Page, PageRequest, SortOrder, resolve_sort

logger = logging.getLogger(__name__)

T = TypeVar("T")

ID_FIELD = "id"
MONGO_ID = "_id"


def sortable(*fields: str) -> Dict[str, str]:
    """
    Build a sort whitelist accepting snake_case and camelCase names.

    ``sortable("created_at")`` -> ``{"created_at": "created_at", "createdAt": "created_at"}``
    """
    mapping: Dict[str, str] = {}
    for name in fields:
        head, *rest = name.split("_")
        mapping[name] = name
        mapping[head + "".join(part.capitalize() for part in rest)] = name
    return mapping


def text_search(text: Optional[str], fields: Iterable[str]) -> Optional[Dict[str, Any]]:
    """Case-insensitive substring match over several fields."""
    if not text or not text.strip():
        return None
    pattern = re.escape(text.strip())
    return {"$or": [{name: {"$regex": pattern, "$options": "i"}} for name in fields]}


def range_filter(minimum: Any = None, maximum: Any = None) -> Optional[Dict[str, Any]]:
    condition: Dict[str, Any] = {}
    if minimum is not None:
        condition["$gte"] = minimum
    if maximum is not None:
        condition["$lte"] = maximum
    return condition or None


def field_condition(name: str, condition: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    return {name: condition} if condition else None


def combine(*conditions: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """AND together non-empty query fragments."""
    parts = [condition for condition in conditions if condition]
    if not parts:
        return {}
    if len(parts) == 1:
        return parts[0]
    return {"$and": parts}


def to_money_field(value: Decimal) -> float:
    return float(value)


def from_money_field(value: Any) -> Decimal:
    return Decimal(str(value)).quantize(Decimal("0.01"))


class MongoRepository(Generic[T]):
    """
    Generic MongoDB repository.

    Subclasses set ``RESOURCE_NAME``, implement ``_to_entity`` /
    ``_to_document`` and create their indexes in ``_ensure_indexes``.
    """

    RESOURCE_NAME = "Resource"

    def __init__(self, collection: Collection):
        """
        Initialize repository with its MongoDB collection.

        Args:
            collection: Collection holding this repository's documents
        """
        self._collection = collection
        self._ensure_indexes()

    def _ensure_indexes(self) -> None:
        self._collection.create_index(ID_FIELD, unique=True)

    def _to_entity(self, doc: Dict[str, Any]) -> T:
        raise NotImplementedError

    def _to_document(self, entity: T) -> Dict[str, Any]:
        raise NotImplementedError

    def _conflict(self, error: DuplicateKeyError) -> ConflictError:
        details = error.details or {}
        fields = list((details.get("keyPattern") or details.get("keyValue") or {}).keys())
        if fields:
            message = f"{self.RESOURCE_NAME} with this {', '.join(fields)} already exists"
        else:
            message = f"{self.RESOURCE_NAME} violates a uniqueness constraint"
        logger.info(f"Duplicate key on {self._collection.name}: {error}")
        return ConflictError(message)

    # Writes

    def _insert(self, entity: T) -> T:
        doc = self._to_document(entity)
        try:
            self._collection.insert_one(doc)
        except DuplicateKeyError as e:
            raise self._conflict(e)
        logger.debug(f"Inserted {self.RESOURCE_NAME} {doc[ID_FIELD]}")
        return entity

    def _replace(self, entity_id: str, entity: T) -> T:
        doc = self._to_document(entity)
        doc.pop("created_at", None)
        try:
            result = self._collection.find_one_and_update(
                {ID_FIELD: entity_id},
                {"$set": doc},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise self._conflict(e)

        if not result:
            raise NotFoundError(self.RESOURCE_NAME, entity_id)
        logger.debug(f"Updated {self.RESOURCE_NAME} {entity_id}")
        return self._to_entity(result)

    def _delete(self, entity_id: str) -> None:
        result = self._collection.delete_one({ID_FIELD: entity_id})
        if result.deleted_count == 0:
            raise NotFoundError(self.RESOURCE_NAME, entity_id)
        logger.debug(f"Deleted {self.RESOURCE_NAME} {entity_id}")

    # Reads

    def _find_one(self, query: Dict[str, Any]) -> Optional[T]:
        doc = self._collection.find_one(query)
        if not doc:
            return None
        return self._to_entity(doc)

    def _find_many(self, query: Dict[str, Any], sort: List[tuple]) -> List[T]:
        docs = self._collection.find(query).sort(sort)
        return [self._to_entity(doc) for doc in docs]

    def _exists(self, entity_id: str) -> bool:
        return self._collection.find_one({ID_FIELD: entity_id}, {MONGO_ID: 1}) is not None

    def _find_page(
        self,
        query: Dict[str, Any],
        page_request: PageRequest,
        sort_fields: Dict[str, str],
        default_sort: str,
        default_order: SortOrder,
    ) -> Page[T]:
        sort = resolve_sort(page_request, sort_fields, default_sort, default_order)
        total = self._collection.count_documents(query)
        docs = (
            self._collection.find(query)
            .sort(sort)
            .skip(page_request.skip)
            .limit(page_request.limit)
        )
        return Page.of((self._to_entity(doc) for doc in docs), page_request, total)
