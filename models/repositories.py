"""Repositories mapping collection schemas to MongoDB documents."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from schemas.exercise import Exercise
from schemas.user import User


def to_object_id(value: str) -> Optional[ObjectId]:
    """Convert a path id to an ObjectId, or None if it is malformed."""
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def build_log_query(
    user_id: ObjectId,
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Filter for a user's exercises within an inclusive date range.

    Each bound is only added when supplied.
    """
    query: Dict[str, Any] = {"userId": user_id}
    date_filter: Dict[str, datetime] = {}
    if date_from is not None:
        date_filter["$gte"] = date_from
    if date_to is not None:
        date_filter["$lte"] = date_to
    if date_filter:
        query["date"] = date_filter
    return query


class UserRepository:
    """Reads and writes documents in the users collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create(self, user: User) -> Dict[str, Any]:
        document = user.model_dump(by_alias=True)
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    async def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Find a user by its string id; malformed ids never match."""
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        return await self.collection.find_one({"_id": object_id})

    async def list(self) -> List[Dict[str, Any]]:
        cursor = self.collection.find({}, {"username": 1})
        return await cursor.to_list(length=None)


class ExerciseRepository:
    """Reads and writes documents in the exercises collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create(self, exercise: Exercise) -> Dict[str, Any]:
        document = exercise.model_dump(by_alias=True)
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    async def find_for_user(
        self,
        user_id: ObjectId,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Exercises for a user in natural storage order, at most ``limit``."""
        cursor = self.collection.find(
            build_log_query(user_id, date_from, date_to),
            {"description": 1, "duration": 1, "date": 1},
        )
        if limit:
            cursor = cursor.limit(limit)
        return await cursor.to_list(length=None)
