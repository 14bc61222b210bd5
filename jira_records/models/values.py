from __future__ import annotations

from pydantic import Field, StrictBool, StrictStr

from .base import Int32, JiraRecord


class AvatarUrls(JiraRecord):
    """
    A Jira avatar in several sizes.

    Wire keys are pixel dimensions: 16x16 is xsmall, 24x24 small, 32x32 medium and 48x48 full.
    """

    xsmall: StrictStr = Field(..., alias="16x16", description="16x16 px avatar URL")
    small: StrictStr = Field(..., alias="24x24", description="24x24 px avatar URL")
    medium: StrictStr = Field(..., alias="32x32", description="32x32 px avatar URL")
    full: StrictStr = Field(..., alias="48x48", description="48x48 px avatar URL")


class Progress(JiraRecord):
    """Logged versus total work on an issue, in seconds."""

    progress: Int32 = Field(..., description="Work logged so far")
    total: Int32 = Field(..., description="Total of logged and remaining work")


class Visibility(JiraRecord):
    """Restriction on who can see a comment."""

    type: StrictStr = Field(..., description="Restriction kind, e.g. role or group")
    value: StrictStr = Field(..., description="Name of the role or group")


class Watches(JiraRecord):
    """Users watching a Jira issue."""

    is_watching: StrictBool = Field(..., alias="isWatching", description="Whether the caller watches the issue")
    watch_count: Int32 = Field(..., alias="watchCount", description="Number of watchers")
    self_link: StrictStr = Field(..., alias="self", description="Watchers resource URL")


class Votes(JiraRecord):
    """The votes for a Jira issue."""

    has_voted: StrictBool = Field(..., alias="hasVoted", description="Whether the caller voted")
    votes: Int32 = Field(..., description="Number of votes")
    self_link: StrictStr = Field(..., alias="self", description="Votes resource URL")
