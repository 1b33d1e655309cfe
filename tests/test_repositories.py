"""Unit tests for the MongoDB repositories and database manager."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId

from config.settings import Settings, database_name_from_url
from models.database import Database, init_mongo
from models.repositories import (
    ExerciseRepository,
    UserRepository,
    build_log_query,
    to_object_id,
)
from schemas.exercise import Exercise
from schemas.user import User


def _mock_collection(documents=None) -> MagicMock:
    """Create a mock motor collection whose find() cursor yields documents."""
    cursor = MagicMock()
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=documents or [])
    collection = MagicMock()
    collection.find.return_value = cursor
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.create_index = AsyncMock()
    return collection


class TestBuildLogQuery:
    """Tests for build_log_query."""

    def test_user_only(self) -> None:
        user_id = ObjectId()
        assert build_log_query(user_id) == {"userId": user_id}

    def test_both_bounds(self) -> None:
        user_id = ObjectId()
        start, end = datetime(2023, 1, 1), datetime(2023, 1, 31)
        assert build_log_query(user_id, start, end) == {
            "userId": user_id,
            "date": {"$gte": start, "$lte": end},
        }

    def test_upper_bound_only(self) -> None:
        end = datetime(2023, 1, 31)
        assert build_log_query(ObjectId(), date_to=end)["date"] == {"$lte": end}


class TestToObjectId:
    """Tests for to_object_id."""

    def test_valid(self) -> None:
        oid = ObjectId()
        assert to_object_id(str(oid)) == oid

    def test_malformed(self) -> None:
        assert to_object_id("123") is None


class TestUserRepository:
    """Tests for UserRepository."""

    @pytest.mark.asyncio
    async def test_create_inserts_document(self) -> None:
        """Inserted document uses camelCase timestamps and gains its _id."""
        collection = _mock_collection()
        inserted_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)

        document = await UserRepository(collection).create(User(username="alice"))

        stored = collection.insert_one.call_args.args[0]
        assert stored["username"] == "alice"
        assert "createdAt" in stored and "updatedAt" in stored
        assert document["_id"] == inserted_id

    @pytest.mark.asyncio
    async def test_get_by_object_id(self) -> None:
        collection = _mock_collection()
        oid = ObjectId()
        collection.find_one.return_value = {"_id": oid, "username": "alice"}

        user = await UserRepository(collection).get(str(oid))

        collection.find_one.assert_awaited_once_with({"_id": oid})
        assert user["username"] == "alice"

    @pytest.mark.asyncio
    async def test_get_malformed_id_skips_query(self) -> None:
        collection = _mock_collection()

        assert await UserRepository(collection).get("nope") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_projects_username(self) -> None:
        docs = [{"_id": ObjectId(), "username": "alice"}]
        collection = _mock_collection(docs)

        assert await UserRepository(collection).list() == docs
        collection.find.assert_called_once_with({}, {"username": 1})


class TestExerciseRepository:
    """Tests for ExerciseRepository."""

    @pytest.mark.asyncio
    async def test_create_stores_user_reference(self) -> None:
        collection = _mock_collection()
        collection.insert_one.return_value = MagicMock(inserted_id=ObjectId())
        user_id = ObjectId()
        exercise = Exercise(user_id=user_id, description="run", duration=30, date=datetime(2023, 1, 2))

        await ExerciseRepository(collection).create(exercise)

        stored = collection.insert_one.call_args.args[0]
        assert stored["userId"] == user_id
        assert stored["date"] == datetime(2023, 1, 2)

    @pytest.mark.asyncio
    async def test_find_applies_limit(self) -> None:
        collection = _mock_collection([{"description": "run"}])
        user_id = ObjectId()

        result = await ExerciseRepository(collection).find_for_user(user_id, limit=1)

        collection.find.assert_called_once_with(
            {"userId": user_id}, {"description": 1, "duration": 1, "date": 1}
        )
        collection.find.return_value.limit.assert_called_once_with(1)
        assert result == [{"description": "run"}]

    @pytest.mark.asyncio
    async def test_find_without_limit(self) -> None:
        collection = _mock_collection()

        await ExerciseRepository(collection).find_for_user(ObjectId())

        collection.find.return_value.limit.assert_not_called()


class TestDatabase:
    """Tests for the Database connection manager."""

    def test_name_from_url(self) -> None:
        assert Database("mongodb://localhost:27017/gym").name == "gym"

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("mongodb://localhost:27017", "exercise_tracker"),
            ("mongodb://localhost:27017/", "exercise_tracker"),
            ("mongodb+srv://u:p@cluster0.example.net/tracker?retryWrites=true", "tracker"),
        ],
    )
    def test_database_name_from_url(self, url, expected) -> None:
        assert database_name_from_url(url) == expected

    def test_collections_require_connection(self) -> None:
        with pytest.raises(RuntimeError):
            Database("mongodb://localhost/x").users

    @pytest.mark.asyncio
    async def test_init_mongo_connects_and_indexes(self) -> None:
        """init_mongo builds the client and creates the log index."""
        client = MagicMock()
        exercises = _mock_collection()
        client.__getitem__.return_value.__getitem__.return_value = exercises

        with patch("models.database.AsyncIOMotorClient", return_value=client) as client_cls:
            db = await init_mongo("mongodb://localhost:27017/gym")

        client_cls.assert_called_once_with("mongodb://localhost:27017/gym")
        exercises.create_index.assert_awaited_once()
        db.close()
        client.close.assert_called_once()
        assert db.client is None


class TestSettings:
    """Tests for Settings."""

    def test_mongo_uri_env(self, monkeypatch) -> None:
        monkeypatch.setenv("MONGO_URI", "mongodb://db:27017/tracker")
        assert Settings().mongodb_url == "mongodb://db:27017/tracker"

    def test_port_env(self, monkeypatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        assert Settings().port == 8080
