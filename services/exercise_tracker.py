"""Request handlers for users, exercises and logs.

Handlers receive their repositories as arguments, validate input before
any write, and return response schemas. Unexpected database failures are
logged and re-raised as ``PersistenceError``.
"""

from typing import Any, Dict, List, Mapping, Optional

from models.repositories import ExerciseRepository, UserRepository
from schemas.api import ExerciseResponse, LogEntry, LogResponse, UserResponse
from services.exceptions import ExerciseTrackerError, NotFoundError, PersistenceError
from services.validation import (
    validate_log_filters,
    validate_new_exercise,
    validate_new_user,
)
from utils.helpers import format_display_date
from utils.logger import setup_logger

logger = setup_logger(__name__)

USER_NOT_FOUND = "User not found"


async def _get_user(users: UserRepository, user_id: str) -> Dict[str, Any]:
    user = await users.get(user_id)
    if not user:
        raise NotFoundError(USER_NOT_FOUND)
    return user


async def create_user(users: UserRepository, payload: Mapping[str, Any]) -> UserResponse:
    """Create a user. Duplicate usernames get distinct ids."""
    try:
        user = validate_new_user(payload)
        document = await users.create(user)
        logger.info(f"Created user {document['_id']} ({user.username})")
        return UserResponse(username=document["username"], id=str(document["_id"]))
    except ExerciseTrackerError:
        raise
    except Exception as e:
        logger.error(f"Error creating user: {e}", exc_info=True)
        raise PersistenceError(str(e))


async def list_users(users: UserRepository) -> List[UserResponse]:
    """Return every user as ``{username, _id}``."""
    try:
        documents = await users.list()
    except Exception as e:
        logger.error(f"Error listing users: {e}", exc_info=True)
        raise PersistenceError("Internal server error", status_code=500)
    return [
        UserResponse(username=doc["username"], id=str(doc["_id"]))
        for doc in documents
    ]


async def create_exercise(
    users: UserRepository,
    exercises: ExerciseRepository,
    user_id: str,
    payload: Mapping[str, Any],
) -> ExerciseResponse:
    """Log an exercise for an existing user.

    The response's ``_id`` is the user's id, not the new exercise's.
    """
    try:
        user = await _get_user(users, user_id)
        exercise = validate_new_exercise(user["_id"], payload)
        document = await exercises.create(exercise)
        logger.info(f"Created exercise {document['_id']} for user {user_id}")
        return ExerciseResponse(
            id=user_id,
            username=user["username"],
            date=format_display_date(exercise.date),
            duration=exercise.duration,
            description=exercise.description,
        )
    except ExerciseTrackerError:
        raise
    except Exception as e:
        logger.error(f"Error creating exercise for user {user_id}: {e}", exc_info=True)
        raise PersistenceError(str(e))


async def list_logs(
    users: UserRepository,
    exercises: ExerciseRepository,
    user_id: str,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    limit: Optional[str] = None,
) -> LogResponse:
    """Return a user's exercises, optionally bounded by date and count."""
    try:
        user = await _get_user(users, user_id)
        filters = validate_log_filters(date_from, date_to, limit)
        documents = await exercises.find_for_user(
            user["_id"],
            date_from=filters.date_from,
            date_to=filters.date_to,
            limit=filters.limit,
        )
    except ExerciseTrackerError:
        raise
    except Exception as e:
        logger.error(f"Error fetching logs for user {user_id}: {e}", exc_info=True)
        raise PersistenceError(str(e))

    log = [
        LogEntry(
            description=doc["description"],
            duration=doc["duration"],
            date=format_display_date(doc["date"]),
        )
        for doc in documents
    ]
    logger.info(f"Retrieved {len(log)} exercises for user {user_id}")
    return LogResponse(id=user_id, username=user["username"], count=len(log), log=log)
