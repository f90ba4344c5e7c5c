"""Todo data models using Pydantic."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class TodoPayload(BaseModel):
    """Request body for creating and updating todos."""

    content: str = Field(..., description="The todo content")
    status: StrictInt = Field(..., description="Status of the todo, one of 1, 2 or 3")

    model_config = ConfigDict(
        json_schema_extra={"example": {"content": "This is my first todo", "status": 1}}
    )


class Todo(BaseModel):
    """A todo row as stored in the ``todo`` table."""

    id: int = Field(..., description="The auto-generated id of the todo")
    content: Optional[str] = None
    status: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
