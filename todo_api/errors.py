"""Domain errors raised by the todo service."""

STATUS_RANGE_MESSAGE = "You can only enter values between 1 and 3"


class TodoApiError(Exception):
    """Base class for errors reported to API clients."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TodoValidationError(TodoApiError, ValueError):
    """A write carried a status outside the allowed range."""

    def __init__(self, message: str = STATUS_RANGE_MESSAGE) -> None:
        super().__init__(message)


class StorageError(TodoApiError, RuntimeError):
    """The storage backend failed; ``message`` is safe to show to clients."""
