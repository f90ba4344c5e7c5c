"""Todo service - business logic layer."""

from __future__ import annotations

import logging
from typing import List

from todo_api.errors import StorageError, TodoValidationError
from todo_api.models.todo import Todo
from todo_api.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)

MIN_STATUS = 1
MAX_STATUS = 3

RETRIEVE_ERROR = "Error retrieving data from database"
INSERT_ERROR = "Error inserting data into database"
UPDATE_ERROR = "Error updating data in database"
DELETE_ERROR = "Error deleting data from database"


def validate_status(status: int) -> None:
    if status < MIN_STATUS or status > MAX_STATUS:
        raise TodoValidationError()


class TodoService:
    """Service for todo business logic.

    Every storage failure is logged with its cause and re-raised as a
    ``StorageError`` whose message names only the failed operation.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self.repository = repository

    async def list_todos(self) -> List[Todo]:
        try:
            return await self.repository.list_all()
        except Exception as exc:
            logger.exception("Listing todos failed")
            raise StorageError(RETRIEVE_ERROR) from exc

    async def get_todo(self, todo_id: str) -> List[Todo]:
        """Get todos matching ``todo_id``; zero or one item, never unwrapped."""
        try:
            return await self.repository.get_by_id(todo_id)
        except Exception as exc:
            logger.exception("Fetching todo id=%s failed", todo_id)
            raise StorageError(RETRIEVE_ERROR) from exc

    async def create_todo(self, content: str, status: int) -> None:
        validate_status(status)
        try:
            await self.repository.create(content, status)
        except Exception as exc:
            logger.exception("Creating todo failed")
            raise StorageError(INSERT_ERROR) from exc
        logger.info("Todo created with status=%s", status)

    async def update_todo(self, todo_id: str, content: str, status: int) -> None:
        validate_status(status)
        try:
            await self.repository.update(todo_id, content, status)
        except Exception as exc:
            logger.exception("Updating todo id=%s failed", todo_id)
            raise StorageError(UPDATE_ERROR) from exc
        logger.info("Todo id=%s updated", todo_id)

    async def delete_todo(self, todo_id: str) -> None:
        try:
            await self.repository.delete(todo_id)
        except Exception as exc:
            logger.exception("Deleting todo id=%s failed", todo_id)
            raise StorageError(DELETE_ERROR) from exc
        logger.info("Todo id=%s deleted", todo_id)
