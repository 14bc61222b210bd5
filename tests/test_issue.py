from datetime import date, datetime, timezone

import pytest

import payloads
from jira_records.core.decoder import MissingRequiredField, ShapeMismatch, decode_record
from jira_records.models.entities import User, Version
from jira_records.models.issue import (
    Comment,
    CondensedFields,
    CondensedIssue,
    FieldSet,
    Issue,
    IssueLink,
    LinkedIssueFields,
)
from jira_records.models.values import AvatarUrls, Visibility


def test_release_date_is_a_calendar_date():
    record = decode_record(Version, payloads.version("2024-01-15"))
    assert record.release_date == date(2024, 1, 15)
    assert not isinstance(record.release_date, datetime)
    assert record.to_wire()["releaseDate"] == "2024-01-15"


def test_release_date_rejects_full_timestamp():
    with pytest.raises(ShapeMismatch) as excinfo:
        decode_record(Version, payloads.version("2024-01-15T10:00:00Z"))
    assert excinfo.value.field == "release_date"
    assert excinfo.value.path == ("releaseDate",)


def test_release_date_is_optional():
    data = payloads.version()
    del data["releaseDate"]
    assert decode_record(Version, data).release_date is None


def test_same_timestamp_is_fine_for_created_and_updated():
    data = payloads.fields()
    data["created"] = "2024-01-15T10:00:00Z"
    data["updated"] = "2024-01-15T10:00:00Z"
    record = decode_record(FieldSet, data)
    assert record.created == datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
    assert record.updated == record.created


def test_linked_issue_fields_priority_is_optional():
    data = payloads.linked_issue_fields()
    del data["priority"]
    assert decode_record(LinkedIssueFields, data).priority is None


def test_condensed_fields_priority_is_required():
    data = payloads.condensed_fields()
    del data["priority"]
    with pytest.raises(MissingRequiredField) as excinfo:
        decode_record(CondensedFields, data)
    assert excinfo.value.entity == "CondensedFields"
    assert excinfo.value.field == "priority"


def test_reduced_shapes_stay_distinct():
    assert LinkedIssueFields is not CondensedFields
    assert not issubclass(LinkedIssueFields, CondensedFields)
    assert not issubclass(CondensedFields, LinkedIssueFields)


def test_subtask_without_priority_fails_the_whole_issue():
    issue = payloads.issue()
    subtask = payloads.condensed_issue()
    del subtask["fields"]["priority"]
    issue["fields"]["subtasks"] = [payloads.condensed_issue("ABC-5"), subtask]
    with pytest.raises(MissingRequiredField) as excinfo:
        decode_record(Issue, issue)
    assert excinfo.value.path == ("fields", "subtasks", 1, "fields", "priority")
    assert excinfo.value.entity == "CondensedFields"


def test_parent_and_subtasks_are_condensed():
    issue = payloads.issue("ABC-2")
    issue["fields"]["parent"] = payloads.condensed_issue("ABC-1")
    issue["fields"]["subtasks"] = [payloads.condensed_issue("ABC-3"), payloads.condensed_issue("ABC-4")]
    record = decode_record(Issue, issue)

    assert isinstance(record.fields.parent, CondensedIssue)
    assert record.fields.parent.key == "ABC-1"
    assert [subtask.key for subtask in record.fields.subtasks] == ["ABC-3", "ABC-4"]
    assert record.fields.subtasks[0].fields.priority.name == "Medium"


def test_condensed_issue_does_not_expand_nested_fields():
    subtask = payloads.condensed_issue()
    subtask["fields"]["subtasks"] = [payloads.condensed_issue("ABC-9")]
    record = decode_record(CondensedIssue, subtask)
    assert record.fields.extra["subtasks"][0]["key"] == "ABC-9"


@pytest.mark.parametrize(
    "outward, inward",
    [(True, False), (False, True), (True, True), (False, False)],
)
def test_issue_link_directions_are_independent(outward, inward):
    data = payloads.issue_link()
    data.pop("outwardIssue")
    if outward:
        data["outwardIssue"] = payloads.linked_issue("ABC-7")
    if inward:
        data["inwardIssue"] = payloads.linked_issue("ABC-8")
    record = decode_record(IssueLink, data)
    assert (record.outward_issue is not None) == outward
    assert (record.inward_issue is not None) == inward


def test_type_maps_per_entity():
    link = decode_record(IssueLink, payloads.issue_link())
    assert link.link_type.name == "Blocks"
    assert link.link_type.outward == "blocks"
    assert link.to_wire()["type"]["inward"] == "is blocked by"

    visibility = decode_record(Visibility, payloads.visibility())
    assert visibility.type == "role"
    assert visibility.value == "Developers"


def test_avatar_sizes():
    record = decode_record(AvatarUrls, payloads.avatar_urls())
    assert record.xsmall.endswith("xsmall")
    assert record.small.endswith("small")
    assert record.medium.endswith("medium")
    assert record.full.endswith("large")
    assert set(record.to_wire()) == {"16x16", "24x24", "32x32", "48x48"}


def test_self_is_renamed_and_kept_verbatim():
    data = payloads.user()
    data["self"] = "not even a url"
    record = decode_record(User, data)
    assert record.self_link == "not even a url"
    assert record.to_wire()["self"] == "not even a url"
    assert "self_link" not in record.to_wire()


def test_comment_with_visibility():
    data = payloads.comment()
    data["visibility"] = payloads.visibility()
    data["jsdPublic"] = True
    record = decode_record(Comment, data)
    assert record.update_author.display_name == "Jane Doe"
    assert record.visibility.type == "role"
    assert record.created == datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
    assert dict(record.extra) == {"jsdPublic": True}


def test_fully_populated_issue():
    issue = payloads.issue()
    fields = issue["fields"]
    fields.update(
        {
            "lastViewed": "2024-02-01T08:30:00.000+0100",
            "duedate": "2024-03-01T00:00:00.000+0000",
            "resolutiondate": "2024-02-20T17:45:12.123+0000",
            "description": "Steps to reproduce",
            "assignee": payloads.user("assignee"),
            "resolution": payloads.resolution(),
            "labels": ["backend", "urgent"],
            "versions": [payloads.version()],
            "fixVersions": [payloads.version(None)],
            "components": [payloads.component()],
            "issuelinks": [payloads.issue_link()],
            "timeestimate": 0,
            "aggregatetimeestimate": 0,
            "timeoriginalestimate": 7200,
            "aggregatetimeoriginalestimate": 7200,
            "timespent": 7200,
            "aggregatetimespent": 7200,
            "progress": payloads.progress(7200, 7200),
            "aggregateprogress": payloads.progress(7200, 7200),
            "workratio": 100,
            "comment": payloads.comments(),
        }
    )
    record = decode_record(Issue, issue).fields

    assert record.last_viewed == datetime(2024, 2, 1, 7, 30, tzinfo=timezone.utc)
    assert record.resolutiondate.microsecond == 123000
    assert record.assignee.key == "assignee"
    assert record.resolution.name == "Done"
    assert record.labels == ("backend", "urgent")
    assert record.versions[0].release_date == date(2024, 1, 15)
    assert record.fix_versions[0].release_date is None
    assert record.components[0].description is None
    assert record.issuelinks[0].outward_issue.fields.status.status_category.color_name == "yellow"
    assert record.timeoriginalestimate == 7200
    assert record.progress.progress == record.progress.total == 7200
    assert record.comment.comments[0].author.time_zone == "Europe/Berlin"
    assert record.comment.max_results == 1
    assert record.comment.start_at == 0
    assert record.project.project_category.name == "Tools"
    assert record.project.project_type_key == "software"
    assert record.issuetype.avatar_id == 10318
    assert record.watches.watch_count == 1
    assert record.votes.has_voted is False
    assert record.archiveddate is None
    assert record.archivedby is None
    assert dict(record.extra) == {}
