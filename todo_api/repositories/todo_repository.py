"""Todo repository - data access layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List

from todo_api.db import Database
from todo_api.models.todo import Todo

# Path ids arrive as text and are cast by the database, so a non-numeric id
# is reported by storage rather than rejected by the router.
SELECT_ALL = "SELECT * FROM todo"
SELECT_BY_ID = "SELECT * FROM todo WHERE id = $1::text::integer"
INSERT = "INSERT INTO todo (content, status) VALUES ($1, $2)"
UPDATE = "UPDATE todo SET content = $1, status = $2 WHERE id = $3::text::integer"
DELETE = "DELETE FROM todo WHERE id = $1::text::integer"

INT4_MIN = -(2 ** 31)
INT4_MAX = 2 ** 31 - 1


class TodoRepository(ABC):
    """Storage contract: one statement per operation, no cross-call state."""

    name = "abstract"

    @abstractmethod
    async def list_all(self) -> List[Todo]:
        ...

    @abstractmethod
    async def get_by_id(self, todo_id: str) -> List[Todo]:
        """Return the matching rows; an unknown id yields an empty list."""

    @abstractmethod
    async def create(self, content: str, status: int) -> None:
        ...

    @abstractmethod
    async def update(self, todo_id: str, content: str, status: int) -> None:
        """Update in place; an unknown id is a no-op."""

    @abstractmethod
    async def delete(self, todo_id: str) -> None:
        """Delete by id; an unknown id is a no-op."""

    @abstractmethod
    async def ping(self) -> bool:
        ...


class PostgresTodoRepository(TodoRepository):
    """Repository backed by the ``todo`` table."""

    name = "postgres"

    def __init__(self, database: Database) -> None:
        self.database = database

    async def list_all(self) -> List[Todo]:
        rows = await self.database.fetch(SELECT_ALL)
        return [Todo.model_validate(dict(row)) for row in rows]

    async def get_by_id(self, todo_id: str) -> List[Todo]:
        rows = await self.database.fetch(SELECT_BY_ID, todo_id)
        return [Todo.model_validate(dict(row)) for row in rows]

    async def create(self, content: str, status: int) -> None:
        await self.database.execute(INSERT, content, status)

    async def update(self, todo_id: str, content: str, status: int) -> None:
        await self.database.execute(UPDATE, content, status, todo_id)

    async def delete(self, todo_id: str) -> None:
        await self.database.execute(DELETE, todo_id)

    async def ping(self) -> bool:
        return await self.database.ping()


class InMemoryTodoRepository(TodoRepository):
    """Repository with in-memory storage for local runs and tests."""

    name = "memory"

    def __init__(self) -> None:
        self._todos: Dict[int, Todo] = {}
        self._next_id = 1

    @staticmethod
    def _coerce_id(todo_id: str) -> int:
        # Same rules as the text-to-integer cast in PostgreSQL.
        try:
            key = int(str(todo_id).strip())
        except ValueError as exc:
            raise ValueError(f'invalid input syntax for type integer: "{todo_id}"') from exc
        if not INT4_MIN <= key <= INT4_MAX:
            raise ValueError(f'value "{todo_id}" is out of range for type integer')
        return key

    async def list_all(self) -> List[Todo]:
        return [todo.model_copy() for todo in self._todos.values()]

    async def get_by_id(self, todo_id: str) -> List[Todo]:
        todo = self._todos.get(self._coerce_id(todo_id))
        return [todo.model_copy()] if todo else []

    async def create(self, content: str, status: int) -> None:
        todo = Todo(id=self._next_id, content=content, status=status)
        self._todos[self._next_id] = todo
        self._next_id += 1

    async def update(self, todo_id: str, content: str, status: int) -> None:
        key = self._coerce_id(todo_id)
        if key in self._todos:
            self._todos[key] = Todo(id=key, content=content, status=status)

    async def delete(self, todo_id: str) -> None:
        self._todos.pop(self._coerce_id(todo_id), None)

    async def ping(self) -> bool:
        return True

    def clear(self) -> None:
        """Clear all stored todos (testing helper)."""
        self._todos.clear()
        self._next_id = 1
