"""Worklogs and changelogs of a Jira issue."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .jiratime import format_time, parse_time
from .models import _json_field, _Model


def _time_field(key: str) -> Any:
    return _json_field(key, None, nullable=True, decode=parse_time, encode=format_time)


@dataclass
class EntityProperty(_Model):
    """A key and value stored on an entity."""

    key: str = _json_field("key", "", omitempty=False)
    value: Any = _json_field("value", None, omitempty=False)


@dataclass
class WorklogRecord(_Model):
    """One entry of a worklog."""

    self_url: str = _json_field("self", "")
    author: dict[str, Any] | None = _json_field("author", None, nullable=True)
    update_author: dict[str, Any] | None = _json_field("updateAuthor", None, nullable=True)
    comment: str = _json_field("comment", "")
    created: datetime | None = _time_field("created")
    updated: datetime | None = _time_field("updated")
    started: datetime | None = _time_field("started")
    time_spent: str = _json_field("timeSpent", "")
    time_spent_seconds: int = _json_field("timeSpentSeconds", 0)
    id: str = _json_field("id", "")
    issue_id: str = _json_field("issueId", "")
    properties: list[EntityProperty] = _json_field(
        "properties", default_factory=list, model=EntityProperty, many=True
    )


@dataclass
class Worklog(_Model):
    """The work log of an issue: zero or more records, with paging details."""

    start_at: int = _json_field("startAt", 0, omitempty=False)
    max_results: int = _json_field("maxResults", 0, omitempty=False)
    total: int = _json_field("total", 0, omitempty=False)
    worklogs: list[WorklogRecord] = _json_field(
        "worklogs", default_factory=list, omitempty=False, model=WorklogRecord, many=True
    )


@dataclass
class ChangelogItems(_Model):
    """One change within a changelog history entry."""

    field: str = _json_field("field", "", omitempty=False)
    field_type: str = _json_field("fieldtype", "", omitempty=False)
    from_: Any = _json_field("from", None, omitempty=False)
    from_string: str = _json_field("fromString", "", omitempty=False)
    to: Any = _json_field("to", None, omitempty=False)
    to_string: str = _json_field("toString", "", omitempty=False)


@dataclass
class ChangelogHistory(_Model):
    """One entry of an issue's change history."""

    id: str = _json_field("id", "", omitempty=False)
    author: dict[str, Any] = _json_field("author", default_factory=dict, omitempty=False)
    created: str = _json_field("created", "", omitempty=False)
    items: list[ChangelogItems] = _json_field(
        "items", default_factory=list, omitempty=False, model=ChangelogItems, many=True
    )

    def created_time(self) -> datetime | None:
        """Return the creation time; ``None`` when Jira reported ``null``."""
        if self.created == "null":
            return None
        return parse_time(self.created)


@dataclass
class Changelog(_Model):
    """The change log of an issue."""

    histories: list[ChangelogHistory] = _json_field(
        "histories", default_factory=list, model=ChangelogHistory, many=True
    )