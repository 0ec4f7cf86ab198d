"""
Repository for the cars collection
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId

logger = logging.getLogger(__name__)


class CarRepository:
    """Narrow data access layer over a MongoDB collection of car documents.

    Errors raised by the driver are not caught here; the service layer
    decides how they surface.
    """

    def __init__(self, collection):
        """Initialize repository.

        Args:
            collection: Async collection (``AsyncCollection`` or a compatible double)
        """
        self.collection = collection

    async def ping(self) -> None:
        """Round-trip to the database that owns the collection"""
        await self.collection.database.command("ping")

    async def find_all(self) -> List[Dict[str, Any]]:
        """Return every stored document"""
        cursor = self.collection.find({})
        return await cursor.to_list(None)

    async def insert(self, document: Dict[str, Any]) -> ObjectId:
        """Insert a document and return the identifier assigned by storage"""
        result = await self.collection.insert_one(dict(document))
        return result.inserted_id

    async def find_by_id(self, car_id: ObjectId) -> Optional[Dict[str, Any]]:
        """Return the document with the given identifier, or None"""
        return await self.collection.find_one({"_id": car_id})

    async def replace_fields(self, car_id: ObjectId, fields: Dict[str, Any]) -> int:
        """Overwrite the given fields of one document.

        Returns:
            Number of documents matched (0 or 1)
        """
        result = await self.collection.update_one({"_id": car_id}, {"$set": fields})
        return result.matched_count

    async def delete(self, car_id: ObjectId) -> int:
        """Delete one document.

        Returns:
            Number of documents deleted (0 or 1)
        """
        result = await self.collection.delete_one({"_id": car_id})
        return result.deleted_count
