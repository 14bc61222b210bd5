from __future__ import annotations

from typing import Optional

from pydantic import Field, StrictBool, StrictStr

from .base import CalendarDate, Int32, JiraRecord
from .values import AvatarUrls


class User(JiraRecord):
    """A Jira user account."""

    active: StrictBool = Field(..., description="Whether the account is active")
    display_name: StrictStr = Field(..., alias="displayName", description="Human readable name")
    email_address: Optional[StrictStr] = Field(default=None, alias="emailAddress", description="Email, hidden by privacy settings on some instances")
    key: StrictStr = Field(..., description="User key")
    name: StrictStr = Field(..., description="User name")
    time_zone: StrictStr = Field(..., alias="timeZone", description="IANA time zone of the user")
    avatar_urls: AvatarUrls = Field(..., alias="avatarUrls", description="Avatar in several sizes")
    self_link: StrictStr = Field(..., alias="self", description="User resource URL")


class Version(JiraRecord):
    """A product version, used by both versions and fixVersions."""

    id: StrictStr = Field(..., description="Version ID")
    description: Optional[StrictStr] = Field(default=None, description="Version description")
    name: StrictStr = Field(..., description="Version name")
    archived: StrictBool = Field(..., description="Whether the version is archived")
    released: StrictBool = Field(..., description="Whether the version is released")
    # Jira only stores the day of a release, never a time of day.
    release_date: Optional[CalendarDate] = Field(default=None, alias="releaseDate", description="Release day (YYYY-MM-DD)")
    self_link: StrictStr = Field(..., alias="self", description="Version resource URL")


class StatusCategory(JiraRecord):
    """The category of a status (to do, in progress, done)."""

    color_name: StrictStr = Field(..., alias="colorName", description="Board color of the category")
    id: Int32 = Field(..., description="Category ID")
    key: StrictStr = Field(..., description="Category key")
    name: StrictStr = Field(..., description="Category name")
    self_link: StrictStr = Field(..., alias="self", description="Category resource URL")


class Status(JiraRecord):
    """The workflow status of an issue."""

    description: StrictStr = Field(..., description="Status description")
    icon_url: StrictStr = Field(..., alias="iconUrl", description="Status icon URL")
    id: StrictStr = Field(..., description="Status ID")
    name: StrictStr = Field(..., description="Status name")
    status_category: StatusCategory = Field(..., alias="statusCategory", description="Category of the status")
    self_link: StrictStr = Field(..., alias="self", description="Status resource URL")


class Resolution(JiraRecord):
    """How an issue was closed."""

    description: StrictStr = Field(..., description="Resolution description")
    id: StrictStr = Field(..., description="Resolution ID")
    name: StrictStr = Field(..., description="Resolution name")
    self_link: StrictStr = Field(..., alias="self", description="Resolution resource URL")


class IssueType(JiraRecord):
    """The type of an issue (bug, story, sub-task, ...)."""

    avatar_id: Int32 = Field(..., alias="avatarId", description="Avatar ID of the type icon")
    description: StrictStr = Field(..., description="Issue type description")
    icon_url: StrictStr = Field(..., alias="iconUrl", description="Issue type icon URL")
    id: StrictStr = Field(..., description="Issue type ID")
    name: StrictStr = Field(..., description="Issue type name")
    subtask: StrictBool = Field(..., description="Whether issues of this type are sub-tasks")
    self_link: StrictStr = Field(..., alias="self", description="Issue type resource URL")


class ProjectCategory(JiraRecord):
    description: StrictStr = Field(..., description="Category description")
    id: StrictStr = Field(..., description="Category ID")
    name: StrictStr = Field(..., description="Category name")
    self_link: StrictStr = Field(..., alias="self", description="Category resource URL")


class Project(JiraRecord):
    """A project namespace grouping issues."""

    id: StrictStr = Field(..., description="Project ID")
    key: StrictStr = Field(..., description="Project key (e.g., PROJ)")
    name: StrictStr = Field(..., description="Project name")
    project_type_key: StrictStr = Field(..., alias="projectTypeKey", description="Project type, e.g. software")
    project_category: ProjectCategory = Field(..., alias="projectCategory", description="Project category")
    avatar_urls: AvatarUrls = Field(..., alias="avatarUrls", description="Project avatar in several sizes")
    self_link: StrictStr = Field(..., alias="self", description="Project resource URL")


class Priority(JiraRecord):
    icon_url: StrictStr = Field(..., alias="iconUrl", description="Priority icon URL")
    id: StrictStr = Field(..., description="Priority ID")
    name: StrictStr = Field(..., description="Priority name")
    self_link: StrictStr = Field(..., alias="self", description="Priority resource URL")


class Component(JiraRecord):
    description: Optional[StrictStr] = Field(default=None, description="Component description")
    id: StrictStr = Field(..., description="Component ID")
    name: StrictStr = Field(..., description="Component name")
    self_link: StrictStr = Field(..., alias="self", description="Component resource URL")
