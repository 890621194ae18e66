"""The Jira issue and its fields."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping

from .jiratime import format_date, format_time, parse_date, parse_time
from .links import IssueLinkType, Transition
from .models import (
    Attachment,
    Comment,
    Comments,
    Component,
    Epic,
    FixVersion,
    IssueType,
    Parent,
    Progress,
    TimeTracking,
    Watches,
    _encode_value,
    _json_field,
    _Model,
)
from .worklog import Changelog, Worklog


def _time_field(key: str) -> Any:
    return _json_field(key, None, nullable=True, decode=parse_time, encode=format_time)


def _nullable(key: str, model: type | None = None) -> Any:
    return _json_field(key, None, nullable=True, model=model)


def _many(key: str, model: type | None = None) -> Any:
    return _json_field(key, default_factory=list, model=model, many=True)


@dataclass
class IssueRenderedFields(_Model):
    """The fields of an issue as rendered by Jira."""

    resolutiondate: str = _json_field("resolutiondate", "")
    created: str = _json_field("created", "")
    duedate: str = _json_field("duedate", "")
    updated: str = _json_field("updated", "")
    comments: Comments | None = _nullable("comment", Comments)
    description: str = _json_field("description", "")


def _decode_issue(raw: Any) -> "Issue":
    return Issue.from_dict(raw)


@dataclass
class IssueLink(_Model):
    """A link between two issues."""

    id: str = _json_field("id", "")
    self_url: str = _json_field("self", "")
    type: IssueLinkType = _json_field(
        "type", default_factory=IssueLinkType, omitempty=False, model=IssueLinkType
    )
    outward_issue: "Issue | None" = _json_field(
        "outwardIssue", None, omitempty=False, decode=_decode_issue
    )
    inward_issue: "Issue | None" = _json_field(
        "inwardIssue", None, omitempty=False, decode=_decode_issue
    )
    comment: Comment | None = _nullable("comment", Comment)


@dataclass
class IssueFields(_Model):
    """The fields of an issue.

    Keys that have no attribute here, such as custom fields, are kept in
    ``unknowns`` and written back at the top level.
    """

    expand: str = _json_field("expand", "")
    type: IssueType = _json_field("issuetype", default_factory=IssueType, model=IssueType)
    project: dict[str, Any] = _json_field("project", default_factory=dict)
    resolution: dict[str, Any] | None = _nullable("resolution")
    priority: dict[str, Any] | None = _nullable("priority")
    resolutiondate: datetime | None = _time_field("resolutiondate")
    created: datetime | None = _time_field("created")
    duedate: date | None = _json_field(
        "duedate", None, nullable=True, decode=parse_date, encode=format_date
    )
    watches: Watches | None = _nullable("watches", Watches)
    assignee: dict[str, Any] | None = _nullable("assignee")
    updated: datetime | None = _time_field("updated")
    description: str = _json_field("description", "")
    summary: str = _json_field("summary", "")
    creator: dict[str, Any] | None = _nullable("Creator")
    reporter: dict[str, Any] | None = _nullable("reporter")
    components: list[Component] = _many("components", Component)
    status: dict[str, Any] | None = _nullable("status")
    progress: Progress | None = _nullable("progress", Progress)
    aggregate_progress: Progress | None = _nullable("aggregateprogress", Progress)
    time_tracking: TimeTracking | None = _nullable("timetracking", TimeTracking)
    time_spent: int = _json_field("timespent", 0)
    time_estimate: int = _json_field("timeestimate", 0)
    time_original_estimate: int = _json_field("timeoriginalestimate", 0)
    worklog: Worklog | None = _nullable("worklog", Worklog)
    issue_links: list[IssueLink] = _many("issuelinks", IssueLink)
    comments: Comments | None = _nullable("comment", Comments)
    fix_versions: list[FixVersion] = _many("fixVersions", FixVersion)
    affects_versions: list[dict[str, Any]] = _many("versions")
    labels: list[str] = _many("labels")
    subtasks: list[dict[str, Any]] = _many("subtasks")
    attachments: list[Attachment] = _many("attachment", Attachment)
    epic: Epic | None = _nullable("epic", Epic)
    sprint: dict[str, Any] | None = _nullable("sprint")
    parent: Parent | None = _nullable("parent", Parent)
    aggregate_time_original_estimate: int = _json_field("aggregatetimeoriginalestimate", 0)
    aggregate_time_spent: int = _json_field("aggregatetimespent", 0)
    aggregate_time_estimate: int = _json_field("aggregatetimeestimate", 0)
    unknowns: dict[str, Any] = dataclasses.field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, with the unknown keys merged in at the top level."""
        result = super().to_dict()
        if self.type == IssueType():
            result.pop("issuetype", None)
        for key, value in self.unknowns.items():
            result[key] = _encode_value(value)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IssueFields":
        """Build the fields from JSON, keeping unrecognised keys in ``unknowns``."""
        fields = super().from_dict(data)
        known = {
            spec.metadata["json"]
            for spec in dataclasses.fields(cls)
            if spec.metadata.get("json") is not None
        }
        fields.unknowns = {key: value for key, value in data.items() if key not in known}
        return fields


@dataclass
class Issue(_Model):
    """A Jira issue."""

    expand: str = _json_field("expand", "")
    id: str = _json_field("id", "")
    self_url: str = _json_field("self", "")
    key: str = _json_field("key", "")
    fields: IssueFields | None = _nullable("fields", IssueFields)
    rendered_fields: IssueRenderedFields | None = _nullable(
        "renderedFields", IssueRenderedFields
    )
    changelog: Changelog | None = _nullable("changelog", Changelog)
    transitions: list[Transition] = _many("transitions", Transition)
    names: dict[str, str] = _json_field("names", default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of the issue, leaving out empty values."""
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Issue":
        """Build an issue from its JSON form."""
        return super().from_dict(data)