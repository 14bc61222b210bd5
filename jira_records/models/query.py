from __future__ import annotations

from typing import Tuple

from pydantic import Field

from .base import JiraRecord
from .issue import Issue


class QueryResult(JiraRecord):
    """
    PUBLIC_INTERFACE
    The response to a JQL search: the issues plus whatever paging metadata
    (startAt, maxResults, total, ...) Jira sent, kept in ``extra``.
    """

    issues: Tuple[Issue, ...] = Field(..., description="Issues returned by the query")
