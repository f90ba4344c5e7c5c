"""Todo API - CRUD service for todo items stored in PostgreSQL.

Layers:
    - api: HTTP routes and dependencies
    - services: status validation and error translation
    - repositories: one SQL statement per operation
    - db: asyncpg pool wrapper

For the HTTP app:
    ```python
    from todo_api.main import app
    ```
"""

__version__ = "1.0.0"
