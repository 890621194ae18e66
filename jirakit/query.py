"""Query-string options accepted by the Jira REST endpoints."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Iterator
from urllib.parse import urlencode, urlsplit, urlunsplit


def _param(name: str, default: Any = None, **kwargs: Any) -> Any:
    metadata = {"query": name}
    if "default_factory" in kwargs:
        return field(metadata=metadata, **kwargs)
    return field(default=default, metadata=metadata)


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class _QueryOptions:
    """Base for option sets that are sent as query parameters.

    Empty values (``False``, ``0``, ``""`` and empty lists) are left out.
    """

    def query_items(self) -> Iterator[tuple[str, str]]:
        """Yield the (name, value) pairs this option set sends."""
        for spec in dataclasses.fields(self):  # type: ignore[arg-type]
            name = spec.metadata.get("query")
            if name is None:
                continue
            value = getattr(self, spec.name)
            if not value:
                continue
            if isinstance(value, (list, tuple)):
                for item in value:
                    yield name, _encode_value(item)
            else:
                yield name, _encode_value(value)


@dataclass
class SearchOptions(_QueryOptions):
    """Paging and expansion options for list and search calls."""

    start_at: int = _param("startAt", 0)
    max_results: int = _param("maxResults", 0)
    expand: str = _param("expand", "")
    fields: list[str] = _param("Fields", default_factory=list)
    validate_query: str = _param("validateQuery", "")


@dataclass
class GetQueryOptions(_QueryOptions):
    """Options for fetching a single issue."""

    fields: str = _param("fields", "")
    expand: str = _param("expand", "")
    properties: str = _param("properties", "")
    fields_by_keys: bool = _param("fieldsByKeys", False)
    update_history: bool = _param("updateHistory", False)
    project_keys: str = _param("projectKeys", "")


@dataclass
class UpdateQueryOptions(_QueryOptions):
    """Options for editing an issue."""

    notify_users: bool = _param("notifyUsers", False)
    override_screen_security: bool = _param("overrideScreenSecurity", False)
    override_editable_flag: bool = _param("overrideEditableFlag", False)


@dataclass
class GetWorklogsQueryOptions(_QueryOptions):
    """Options for reading the worklogs of an issue."""

    start_at: int = _param("startAt", 0)
    max_results: int = _param("maxResults", 0)
    started_after: int = _param("startedAfter", 0)
    expand: str = _param("expand", "")


@dataclass
class AddWorklogQueryOptions(_QueryOptions):
    """Options for adding or updating a worklog record."""

    notify_users: bool = _param("notifyUsers", False)
    adjust_estimate: str = _param("adjustEstimate", "")
    new_estimate: str = _param("newEstimate", "")
    reduce_by: str = _param("reduceBy", "")
    expand: str = _param("expand", "")
    override_editable_flag: bool = _param("overrideEditableFlag", False)


def encode_options(options: Any) -> str:
    """Encode an option set as a query string, with keys in sorted order."""
    if options is None:
        return ""
    items = getattr(options, "query_items", None)
    if items is None:
        raise TypeError(f"cannot encode {type(options).__name__} as query options")
    grouped: dict[str, list[str]] = {}
    for name, value in items():
        grouped.setdefault(name, []).append(value)
    pairs = [(name, value) for name in sorted(grouped) for value in grouped[name]]
    return urlencode(pairs)


def add_options(endpoint: str, options: Any) -> str:
    """Return the endpoint with its query string replaced by the encoded options."""
    if options is None:
        return endpoint
    parts = urlsplit(endpoint)
    return urlunsplit(parts._replace(query=encode_options(options)))