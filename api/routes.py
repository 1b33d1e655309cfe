"""REST API routes for users, exercises and logs."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_exercise_repository, get_user_repository, read_payload
from models.repositories import ExerciseRepository, UserRepository
from schemas.api import ExerciseResponse, LogResponse, UserResponse
from services import exercise_tracker

router = APIRouter(prefix="/api", tags=["api"])


@router.post("/users", response_model=UserResponse)
async def create_user(
    payload: Dict[str, Any] = Depends(read_payload),
    users: UserRepository = Depends(get_user_repository),
):
    """Create a new user."""
    return await exercise_tracker.create_user(users, payload)


@router.get("/users", response_model=List[UserResponse])
async def list_users(users: UserRepository = Depends(get_user_repository)):
    """List all users."""
    return await exercise_tracker.list_users(users)


@router.post("/users/{_id}/exercises", response_model=ExerciseResponse, status_code=201)
async def create_exercise(
    _id: str,
    payload: Dict[str, Any] = Depends(read_payload),
    users: UserRepository = Depends(get_user_repository),
    exercises: ExerciseRepository = Depends(get_exercise_repository),
):
    """Log an exercise for a user."""
    return await exercise_tracker.create_exercise(users, exercises, _id, payload)


@router.get("/users/{_id}/logs", response_model=LogResponse)
async def get_logs(
    _id: str,
    date_from: Optional[str] = Query(None, alias="from", description="Earliest date, inclusive"),
    date_to: Optional[str] = Query(None, alias="to", description="Latest date, inclusive"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
    users: UserRepository = Depends(get_user_repository),
    exercises: ExerciseRepository = Depends(get_exercise_repository),
):
    """Get a user's exercise log."""
    return await exercise_tracker.list_logs(
        users, exercises, _id, date_from=date_from, date_to=date_to, limit=limit
    )
