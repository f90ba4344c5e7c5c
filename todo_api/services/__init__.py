from todo_api.services.todo_service import TodoService, validate_status

__all__ = ["TodoService", "validate_status"]
