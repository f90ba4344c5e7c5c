"""API dependencies for todo management."""

from typing import Annotated

from fastapi import Depends, Request

from todo_api.repositories.todo_repository import TodoRepository
from todo_api.services.todo_service import TodoService


def get_todo_repository(request: Request) -> TodoRepository:
    """Dependency for the repository created during application startup."""
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise RuntimeError("TodoRepository not initialized. Check lifespan setup.")
    return repository


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(repository)


ServiceDep = Annotated[TodoService, Depends(get_todo_service)]
