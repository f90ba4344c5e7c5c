from todo_api.repositories.todo_repository import (
    InMemoryTodoRepository,
    PostgresTodoRepository,
    TodoRepository,
)

__all__ = ["TodoRepository", "PostgresTodoRepository", "InMemoryTodoRepository"]
