"""FastAPI dependencies wiring the database into the handlers."""

import json
from typing import Any, Dict

from fastapi import Depends, Request
from starlette.exceptions import HTTPException

from models.database import Database
from models.repositories import ExerciseRepository, UserRepository
from services.exceptions import ValidationError


def get_database(request: Request) -> Database:
    """Database built by the application lifespan."""
    return request.app.state.db


def get_user_repository(db: Database = Depends(get_database)) -> UserRepository:
    return UserRepository(db.users)


def get_exercise_repository(db: Database = Depends(get_database)) -> ExerciseRepository:
    return ExerciseRepository(db.exercises)


async def read_payload(request: Request) -> Dict[str, Any]:
    """Request body as a dict, from either a form or a JSON object."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise ValidationError("Invalid request body")
        if not isinstance(payload, dict):
            raise ValidationError("Invalid request body")
        return payload

    try:
        form = await request.form()
    except HTTPException:
        raise ValidationError("Invalid request body")
    return dict(form)
