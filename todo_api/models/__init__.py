from todo_api.models.todo import Todo, TodoPayload

__all__ = ["Todo", "TodoPayload"]
