import contextlib
from typing import Any
from uuid import UUID

import structlog
from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import CollectionInvalid, PyMongoError

from hitbadge.core.core import Service
from hitbadge.core.modules.counter.models import Counter
from hitbadge.errors import StorageError

logger = structlog.get_logger(__name__)

COLLECTION_NAME = "counts"


class CounterService(Service):
    """Service owning the persisted visitor counters."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection(COLLECTION_NAME)

    async def on_start(self) -> None:
        """Fail fast when the database is unreachable and make sure the collection exists."""
        logger.info("connecting", database=self.database.name)
        await self.database.command("ping")

        logger.info("bootstrapping", collection=COLLECTION_NAME)
        with contextlib.suppress(CollectionInvalid):
            await self.database.create_collection(COLLECTION_NAME)
        logger.debug("counter_service_started")

    async def create_counter(self) -> UUID:
        """Insert a new counter with count 0 and return its id."""
        counter = Counter()
        try:
            await self._collection.insert_one(counter.to_mongo())
        except PyMongoError as e:
            raise StorageError(str(e)) from e
        logger.info("counter_created", counter_id=str(counter.id))
        return counter.id

    async def increment_and_get(self, counter_id: UUID) -> int | None:
        """Atomically increment a counter and return the new value.

        Returns None when no counter exists for the id. The increment and the
        read happen in one server-side operation, so concurrent callers never
        lose updates or observe the same value twice.
        """
        try:
            doc = await self._collection.find_one_and_update(
                {"_id": counter_id},
                {"$inc": {"count": 1}},
                projection={"count": True},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StorageError(str(e)) from e

        if doc is None:
            return None
        return int(doc["count"])

    async def get_count(self, counter_id: UUID) -> int | None:
        """Get the current count without incrementing."""
        try:
            doc = await self._collection.find_one({"_id": counter_id}, projection={"count": True})
        except PyMongoError as e:
            raise StorageError(str(e)) from e
        if doc is None:
            return None
        return int(doc["count"])
