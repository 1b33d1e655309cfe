"""
Pytest configuration and shared fixtures for the exercise tracker tests.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from api.dependencies import get_exercise_repository, get_user_repository
from api.main import app
from models.repositories import to_object_id
from schemas.exercise import Exercise
from schemas.user import User


class InMemoryUserRepository:
    """UserRepository stand-in keeping documents in a list."""

    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.fail_with: Optional[Exception] = None

    async def create(self, user: User) -> Dict[str, Any]:
        if self.fail_with:
            raise self.fail_with
        document = user.model_dump(by_alias=True)
        document["_id"] = ObjectId()
        self.documents.append(document)
        return document

    async def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(user_id)
        for document in self.documents:
            if document["_id"] == object_id:
                return document
        return None

    async def list(self) -> List[Dict[str, Any]]:
        if self.fail_with:
            raise self.fail_with
        return [{"_id": d["_id"], "username": d["username"]} for d in self.documents]


class InMemoryExerciseRepository:
    """ExerciseRepository stand-in keeping documents in insertion order."""

    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.fail_with: Optional[Exception] = None

    async def create(self, exercise: Exercise) -> Dict[str, Any]:
        if self.fail_with:
            raise self.fail_with
        document = exercise.model_dump(by_alias=True)
        document["_id"] = ObjectId()
        self.documents.append(document)
        return document

    async def find_for_user(
        self,
        user_id: ObjectId,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        if self.fail_with:
            raise self.fail_with
        matches = [
            d for d in self.documents
            if d["userId"] == user_id
            and (date_from is None or d["date"] >= date_from)
            and (date_to is None or d["date"] <= date_to)
        ]
        if limit:
            matches = matches[:limit]
        return matches


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def exercise_repository() -> InMemoryExerciseRepository:
    return InMemoryExerciseRepository()


@pytest.fixture
def client(
    user_repository: InMemoryUserRepository,
    exercise_repository: InMemoryExerciseRepository,
):
    """TestClient with repositories swapped for in-memory ones.

    The lifespan is not entered, so no MongoDB connection is attempted.
    """
    app.dependency_overrides[get_user_repository] = lambda: user_repository
    app.dependency_overrides[get_exercise_repository] = lambda: exercise_repository
    yield TestClient(app)
    app.dependency_overrides.clear()
