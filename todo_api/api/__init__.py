from todo_api.api.routes import router

__all__ = ["router"]
