"""Base MongoDB repository with reusable patterns.

Provides common functionality for all MongoDB repositories:
- Connection management
- Document mapping (domain <-> MongoDB)
- Error logging with re-raise
- Duplicate key translation to ConflictError

All concrete MongoDB repositories inherit from MongoBaseRepository.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError

from domain.shared.errors import ConflictError
from infrastructure.config import get_mongodb_database, get_mongodb_uri

TEntity = TypeVar("TEntity")

logger = structlog.get_logger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Example:
        class MongoMealRepository(MongoBaseRepository[Meal]):
            @property
            def collection_name(self) -> str:
                return "meals"
    """

    def __init__(self, client: Optional[AsyncIOMotorClient] = None):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)

        Raises:
            ValueError: If no client is given and MONGODB_URI is not set
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            self._client: AsyncIOMotorClient = AsyncIOMotorClient(uri)
        else:
            self._client = client

        self._db = self._client[get_mongodb_database()]
        self._collection = self._db[self.collection_name]

        logger.info(
            "Mongo repository initialized",
            repository=self.__class__.__name__,
            collection=self.collection_name,
        )

    # ============================================================
    # Abstract Properties/Methods
    # ============================================================

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Convert domain entity to MongoDB document."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            KeyError: If required fields are missing
        """
        pass

    # ============================================================
    # Protected Utility Methods
    # ============================================================

    @property
    def collection(self) -> AsyncIOMotorCollection:
        """Get MongoDB collection handle."""
        return self._collection

    @staticmethod
    def date_to_iso(value: date) -> str:
        return value.isoformat()

    @staticmethod
    def iso_to_date(value: str) -> date:
        return date.fromisoformat(value)

    @staticmethod
    def datetime_to_iso(dt: datetime) -> str:
        """
        Convert datetime to ISO string for MongoDB storage.

        Raises:
            ValueError: If dt is naive
        """
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")
        return dt.isoformat()

    @staticmethod
    def iso_to_datetime(iso_str: str) -> datetime:
        """Convert ISO string to timezone-aware datetime (naive values are UTC)."""
        dt = datetime.fromisoformat(iso_str)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        projection: Optional[Dict[str, int]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Find single document.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            return await self._collection.find_one(filter_dict, projection)
        except Exception as e:
            logger.error(
                "find_one failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: Optional[int] = None,
        skip: Optional[int] = None,
        projection: Optional[Dict[str, int]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents.

        Args:
            filter_dict: MongoDB filter
            sort: Sort specification [(field, direction), ...]
            limit: Max documents to return
            skip: Documents to skip
            projection: Optional projection

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            cursor = self._collection.find(filter_dict, projection)

            if sort:
                cursor = cursor.sort(sort)
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)

            return await cursor.to_list(length=limit)
        except Exception as e:
            logger.error(
                "find_many failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _insert_one(self, document: Dict[str, Any]) -> None:
        """
        Insert single document.

        Raises:
            ConflictError: On a unique index violation
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            await self._collection.insert_one(document)
        except DuplicateKeyError as e:
            logger.warning("insert_one duplicate key", collection=self.collection_name)
            raise ConflictError(self.duplicate_key_message) from e
        except Exception as e:
            logger.error("insert_one failed", collection=self.collection_name, error=str(e))
            raise

    async def _update_one(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
        upsert: bool = False,
    ) -> int:
        """
        Update single document.

        Returns:
            Number of documents modified (0 or 1)

        Raises:
            ConflictError: On a unique index violation
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            result = await self._collection.update_one(filter_dict, update_dict, upsert=upsert)
            return result.modified_count
        except DuplicateKeyError as e:
            logger.warning("update_one duplicate key", collection=self.collection_name)
            raise ConflictError(self.duplicate_key_message) from e
        except Exception as e:
            logger.error(
                "update_one failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        """
        Delete single document.

        Returns:
            Number of documents deleted (0 or 1)
        """
        try:
            result = await self._collection.delete_one(filter_dict)
            return result.deleted_count
        except Exception as e:
            logger.error(
                "delete_one failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _count(self, filter_dict: Dict[str, Any]) -> int:
        """Count documents matching a filter."""
        try:
            return await self._collection.count_documents(filter_dict)
        except Exception as e:
            logger.error(
                "count failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    @property
    def duplicate_key_message(self) -> str:
        return f"duplicate document in {self.collection_name}"

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info("Mongo connection closed", repository=self.__class__.__name__)
