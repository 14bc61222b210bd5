from __future__ import annotations

from typing import Any, AsyncIterator, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from starlette.concurrency import run_in_threadpool

from ...clients.jira_client import JiraClient
from ...core.config import Settings, get_settings
from ...core.decoder import Document, decode_query_result
from ...core.security import AuthenticatedClient, get_current_client
from ...models.common import ErrorResponse, SearchQuery

router = APIRouter(prefix="/jira", tags=["JIRA"])

DECODE_ERRORS = {
    413: {"model": ErrorResponse, "description": "Document too large"},
    422: {"model": ErrorResponse, "description": "Document does not match the Jira record shapes"},
}


async def get_jira_client(settings: Settings = Depends(get_settings)) -> AsyncIterator[JiraClient]:
    async with JiraClient(settings) as client:
        yield client


def check_document_size(size: Optional[str], limit: int) -> None:
    """Reject a body whose declared or actual size is over the limit. Unparseable sizes are left to the body check."""
    try:
        declared = int(size) if size is not None else 0
    except ValueError:
        return
    if declared > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Document exceeds {limit} bytes",
        )


async def _decode_to_wire(request: Request, document: Document) -> Dict[str, Any]:
    # Decoding is CPU bound; keep it off the event loop.
    result = await run_in_threadpool(decode_query_result, document)
    request.state.decoded_issues = len(result.issues)
    return await run_in_threadpool(result.to_wire)


@router.post(
    "/decode",
    summary="Decode Search Response",
    responses=DECODE_ERRORS,
)
async def decode_search_response(
    request: Request,
    auth: AuthenticatedClient = Depends(get_current_client),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Decode a raw JQL search response body into typed records.

    Returns the decoded tree in wire form; unknown fields are echoed back unchanged.
    """
    check_document_size(request.headers.get("content-length"), settings.MAX_DOCUMENT_BYTES)
    body = await request.body()
    check_document_size(str(len(body)), settings.MAX_DOCUMENT_BYTES)
    return await _decode_to_wire(request, body)


@router.post(
    "/search",
    summary="Search Issues",
    responses=DECODE_ERRORS,
)
async def search_issues(
    query: SearchQuery,
    request: Request,
    auth: AuthenticatedClient = Depends(get_current_client),
    jira: JiraClient = Depends(get_jira_client),
) -> Dict[str, Any]:
    """Search JIRA issues with JQL and return the decoded result."""
    data = await jira.search(jql=query.jql, start_at=query.start_at, max_results=query.max_results, fields=query.fields)
    return await _decode_to_wire(request, data)
