"""API routes for todo management."""

from typing import Annotated, List, Union

from fastapi import APIRouter, Path, status
from fastapi.responses import PlainTextResponse

from todo_api.api.dependencies import ServiceDep
from todo_api.errors import TodoApiError
from todo_api.models.todo import Todo, TodoPayload

router = APIRouter(tags=["Todo"])

TEXT_RESPONSE = {"content": {"text/plain": {"schema": {"type": "string"}}}}
SERVER_ERROR = {500: {"description": "Some server error", **TEXT_RESPONSE}}

TodoId = Annotated[str, Path(description="The Todo task id")]


def error_response(exc: TodoApiError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get(
    "",
    response_model=List[Todo],
    summary="Returns all the tasks",
    responses=SERVER_ERROR,
)
@router.get("/", response_model=List[Todo], include_in_schema=False)
async def list_todos(service: ServiceDep) -> Union[List[Todo], PlainTextResponse]:
    """Get every todo in storage order."""
    try:
        return await service.list_todos()
    except TodoApiError as exc:
        return error_response(exc)


@router.get(
    "/{todo_id}",
    response_model=List[Todo],
    summary="Get the Todo task by id",
    responses=SERVER_ERROR,
)
async def get_todo(
    todo_id: TodoId,
    service: ServiceDep,
) -> Union[List[Todo], PlainTextResponse]:
    """Get the todo with the given id as a list of zero or one item."""
    try:
        return await service.get_todo(todo_id)
    except TodoApiError as exc:
        return error_response(exc)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
    summary="Create a new Todo task",
    responses={
        201: {"description": "New Todo task is created successfully"},
        **SERVER_ERROR,
    },
)
@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
    include_in_schema=False,
)
async def create_todo(payload: TodoPayload, service: ServiceDep) -> PlainTextResponse:
    try:
        await service.create_todo(payload.content, payload.status)
    except TodoApiError as exc:
        return error_response(exc)
    return PlainTextResponse(
        "New Todo task is created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.put(
    "/{todo_id}",
    response_class=PlainTextResponse,
    summary="Update the Todo task by the id",
    responses={200: {"description": "Task updated successfully"}, **SERVER_ERROR},
)
async def update_todo(
    payload: TodoPayload,
    todo_id: TodoId,
    service: ServiceDep,
) -> PlainTextResponse:
    try:
        await service.update_todo(todo_id, payload.content, payload.status)
    except TodoApiError as exc:
        return error_response(exc)
    return PlainTextResponse("Task updated successfully")


@router.delete(
    "/{todo_id}",
    response_class=PlainTextResponse,
    summary="Remove the Todo task by id",
    responses={200: {"description": "The Todo task was deleted"}, **SERVER_ERROR},
)
async def delete_todo(todo_id: TodoId, service: ServiceDep) -> PlainTextResponse:
    try:
        await service.delete_todo(todo_id)
    except TodoApiError as exc:
        return error_response(exc)
    return PlainTextResponse(f"The todo task with id {todo_id} was deleted")
