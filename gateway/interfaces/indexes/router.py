"""
FastAPI routers for indexes and tasks.

All routes delegate to use cases. No business logic here.
Bodies and query strings go through gateway.interfaces.extractors.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request

from gateway.application.indexes.add_documents import AddDocumentsUseCase
from gateway.application.indexes.create_index import CreateIndexUseCase
from gateway.application.indexes.dtos import (
    AddDocumentsCommand,
    CreateIndexCommand,
    ListTasksQuery,
)
from gateway.application.indexes.get_index import GetIndexUseCase
from gateway.application.indexes.tasks import GetTaskUseCase, ListTasksUseCase
from gateway.core.config import settings
from gateway.domain.sources.documents import PayloadType
from gateway.interfaces.extractors import (
    json_body,
    negotiate_content_type,
    query_params,
    read_body,
)
from gateway.interfaces.indexes.dependencies import (
    get_add_documents_use_case,
    get_create_index_use_case,
    get_index_use_case,
    get_list_tasks_use_case,
    get_task_use_case,
)
from gateway.interfaces.indexes.schemas import (
    AddDocumentsParams,
    CreateIndexRequest,
    IndexResponse,
    ListTasksParams,
    TaskListResponse,
    TaskResponse,
    TaskSummaryResponse,
)
from gateway.shared.errors.response import ResponseError

DOCUMENT_MEDIA_TYPES: dict[str, PayloadType] = {
    "application/json": PayloadType.JSON,
    "application/x-ndjson": PayloadType.NDJSON,
    "text/csv": PayloadType.CSV,
}

ERROR_RESPONSES = {
    400: {"model": ResponseError},
    413: {"model": ResponseError},
    415: {"model": ResponseError},
    500: {"model": ResponseError},
}

indexes_router = APIRouter(prefix="/indexes", tags=["indexes"])
tasks_router = APIRouter(prefix="/tasks", tags=["tasks"])


@indexes_router.post(
    "",
    status_code=202,
    response_model=TaskSummaryResponse,
    responses={**ERROR_RESPONSES, 409: {"model": ResponseError}},
    summary="Create an index",
)
def create_index(
    body: CreateIndexRequest = Depends(json_body(CreateIndexRequest)),
    use_case: CreateIndexUseCase = Depends(get_create_index_use_case),
) -> TaskSummaryResponse:
    """Register an index creation."""
    task = use_case.execute(
        CreateIndexCommand(uid=body.uid, primary_key=body.primary_key)
    )
    return TaskSummaryResponse.from_task(task)


@indexes_router.get(
    "/{index_uid}",
    response_model=IndexResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ResponseError}},
    summary="Get an index",
)
def get_index(
    index_uid: str,
    use_case: GetIndexUseCase = Depends(get_index_use_case),
) -> IndexResponse:
    """Return an index by uid."""
    return IndexResponse.from_index(use_case.execute(index_uid))


@indexes_router.post(
    "/{index_uid}/documents",
    status_code=202,
    response_model=TaskSummaryResponse,
    responses=ERROR_RESPONSES,
    summary="Add documents",
    description="Add JSON, NDJSON or CSV documents to an index.",
)
async def add_documents(
    index_uid: str,
    request: Request,
    params: AddDocumentsParams = Depends(query_params(AddDocumentsParams)),
    use_case: AddDocumentsUseCase = Depends(get_add_documents_use_case),
) -> TaskSummaryResponse:
    """Parse the payload and register a document addition."""
    media_type = negotiate_content_type(request, DOCUMENT_MEDIA_TYPES)
    payload = await read_body(request, settings.http_payload_size_limit)
    task = await use_case.execute(
        AddDocumentsCommand(
            index_uid=index_uid,
            payload_type=DOCUMENT_MEDIA_TYPES[media_type],
            payload=payload,
            primary_key=params.primary_key,
        )
    )
    return TaskSummaryResponse.from_task(task)


@tasks_router.get(
    "",
    response_model=TaskListResponse,
    responses=ERROR_RESPONSES,
    summary="List tasks",
)
def list_tasks(
    params: ListTasksParams = Depends(query_params(ListTasksParams)),
    use_case: ListTasksUseCase = Depends(get_list_tasks_use_case),
) -> TaskListResponse:
    """Return the most recent tasks, newest first."""
    # One extra task tells whether another page exists.
    tasks = use_case.execute(
        ListTasksQuery(limit=params.limit + 1, from_uid=params.from_uid)
    )
    page, rest = tasks[: params.limit], tasks[params.limit :]
    return TaskListResponse(
        results=[TaskResponse.from_task(task) for task in page],
        limit=params.limit,
        from_uid=page[0].uid if page else None,
        next=rest[0].uid if rest else None,
    )


@tasks_router.get(
    "/{task_uid}",
    response_model=TaskResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ResponseError}},
    summary="Get a task",
)
def get_task(
    task_uid: int,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskResponse:
    """Return a task by uid."""
    return TaskResponse.from_task(use_case.execute(task_uid))
