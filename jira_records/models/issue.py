from __future__ import annotations

from typing import Optional, Tuple

from pydantic import Field, StrictStr

from .base import Int32, JiraRecord, Timestamp
from .entities import Component, IssueType, Priority, Project, Resolution, Status, User, Version
from .values import Progress, Visibility, Votes, Watches


class IssueLinkType(JiraRecord):
    """The kind of a link and its wording in each direction."""

    id: StrictStr = Field(..., description="Link type ID")
    inward: StrictStr = Field(..., description="Inward wording, e.g. 'is blocked by'")
    name: StrictStr = Field(..., description="Link type name")
    outward: StrictStr = Field(..., description="Outward wording, e.g. 'blocks'")
    self_link: StrictStr = Field(..., alias="self", description="Link type resource URL")


class LinkedIssueFields(JiraRecord):
    """
    The reduced fields of an issue on the other end of a link.

    Same field names as CondensedFields, but priority is optional here.
    """

    issuetype: IssueType = Field(..., description="Issue type")
    priority: Optional[Priority] = Field(default=None, description="Issue priority")
    status: Status = Field(..., description="Issue status")
    summary: StrictStr = Field(..., description="Issue summary/title")


class LinkedIssue(JiraRecord):
    """An issue referenced from an IssueLink."""

    id: StrictStr = Field(..., description="Issue ID")
    key: StrictStr = Field(..., description="Issue key")
    fields: LinkedIssueFields = Field(..., description="Reduced issue fields")
    self_link: StrictStr = Field(..., alias="self", description="Issue resource URL")


class IssueLink(JiraRecord):
    """
    A link from one issue to another.

    Jira populates one of outward_issue / inward_issue, but both are decoded
    independently and neither is enforced.
    """

    id: StrictStr = Field(..., description="Link ID")
    outward_issue: Optional[LinkedIssue] = Field(default=None, alias="outwardIssue", description="Issue this one points to")
    inward_issue: Optional[LinkedIssue] = Field(default=None, alias="inwardIssue", description="Issue pointing to this one")
    link_type: IssueLinkType = Field(..., alias="type", description="Kind of link")
    self_link: StrictStr = Field(..., alias="self", description="Link resource URL")


class CondensedFields(JiraRecord):
    """The reduced fields of a parent or sub-task issue."""

    issuetype: IssueType = Field(..., description="Issue type")
    priority: Priority = Field(..., description="Issue priority")
    status: Status = Field(..., description="Issue status")
    summary: StrictStr = Field(..., description="Issue summary/title")


class CondensedIssue(JiraRecord):
    """A lightweight issue reference (parent, sub-tasks). Never expands to a full Issue."""

    fields: CondensedFields = Field(..., description="Reduced issue fields")
    id: StrictStr = Field(..., description="Issue ID")
    key: StrictStr = Field(..., description="Issue key")
    self_link: StrictStr = Field(..., alias="self", description="Issue resource URL")


class Comment(JiraRecord):
    author: User = Field(..., description="Comment author")
    body: StrictStr = Field(..., description="Comment text")
    created: Timestamp = Field(..., description="Creation time")
    id: StrictStr = Field(..., description="Comment ID")
    update_author: User = Field(..., alias="updateAuthor", description="Author of the last edit")
    updated: Timestamp = Field(..., description="Time of the last edit")
    visibility: Optional[Visibility] = Field(default=None, description="Visibility restriction, if any")
    self_link: StrictStr = Field(..., alias="self", description="Comment resource URL")


class Comments(JiraRecord):
    """One page of comments below an issue."""

    comments: Tuple[Comment, ...] = Field(..., description="Comments on this page")
    max_results: Int32 = Field(..., alias="maxResults", description="Page size")
    start_at: Int32 = Field(..., alias="startAt", description="Page offset")
    total: Int32 = Field(..., description="Total number of comments")


class FieldSet(JiraRecord):
    """
    The bulk of an issue's data, found under ``fields``.

    Custom fields (customfield_NNNNN) and any other fields not declared here
    are kept in ``extra``. Time estimates are in seconds.
    """

    # Timestamps
    created: Timestamp = Field(..., description="Creation time")
    updated: Timestamp = Field(..., description="Last update time")
    duedate: Optional[Timestamp] = Field(default=None, description="Due time")
    last_viewed: Optional[Timestamp] = Field(default=None, alias="lastViewed", description="Last time the caller viewed the issue")
    resolutiondate: Optional[Timestamp] = Field(default=None, description="Resolution time")
    archiveddate: Optional[Timestamp] = Field(default=None, description="Archival time")
    archivedby: Optional[Timestamp] = Field(default=None, description="Archival marker as reported by Jira")

    # Text
    summary: StrictStr = Field(..., description="Issue summary/title")
    description: Optional[StrictStr] = Field(default=None, description="Issue description")

    # People
    reporter: User = Field(..., description="Reporter")
    creator: User = Field(..., description="Creator")
    assignee: Optional[User] = Field(default=None, description="Assignee")

    # Classification
    status: Status = Field(..., description="Workflow status")
    issuetype: IssueType = Field(..., description="Issue type")
    priority: Priority = Field(..., description="Priority")
    project: Project = Field(..., description="Owning project")
    resolution: Optional[Resolution] = Field(default=None, description="Resolution once closed")

    # Collections
    labels: Tuple[StrictStr, ...] = Field(..., description="Labels")
    versions: Tuple[Version, ...] = Field(..., description="Affected versions")
    fix_versions: Tuple[Version, ...] = Field(..., alias="fixVersions", description="Fix versions")
    components: Tuple[Component, ...] = Field(..., description="Components")
    issuelinks: Tuple[IssueLink, ...] = Field(..., description="Links to other issues")
    subtasks: Tuple[CondensedIssue, ...] = Field(..., description="Sub-tasks")

    # Estimates
    timeestimate: Optional[Int32] = Field(default=None, description="Remaining estimate")
    aggregatetimeestimate: Optional[Int32] = Field(default=None, description="Remaining estimate including sub-tasks")
    timeoriginalestimate: Optional[Int32] = Field(default=None, description="Original estimate")
    aggregatetimeoriginalestimate: Optional[Int32] = Field(default=None, description="Original estimate including sub-tasks")
    timespent: Optional[Int32] = Field(default=None, description="Time logged")
    aggregatetimespent: Optional[Int32] = Field(default=None, description="Time logged including sub-tasks")
    progress: Progress = Field(..., description="Progress")
    aggregateprogress: Progress = Field(..., description="Progress including sub-tasks")
    workratio: Int32 = Field(..., description="Percentage of original estimate logged, -1 when unestimated")

    # Activity
    watches: Watches = Field(..., description="Watchers")
    votes: Votes = Field(..., description="Votes")
    comment: Optional[Comments] = Field(default=None, description="Comments, when requested")

    # Hierarchy
    parent: Optional[CondensedIssue] = Field(default=None, description="Parent issue of a sub-task")


class Issue(JiraRecord):
    """A single Jira issue with all its fields."""

    id: StrictStr = Field(..., description="Issue ID")
    key: StrictStr = Field(..., description="Issue key (e.g., PROJ-123)")
    expand: StrictStr = Field(..., description="Expand hint sent back by Jira")
    fields: FieldSet = Field(..., description="Issue fields")
    self_link: StrictStr = Field(..., alias="self", description="Issue resource URL")
