"""Plain data types that make up a Jira issue."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping


def _json_field(
    key: str,
    default: Any = None,
    *,
    default_factory: Callable[[], Any] | None = None,
    omitempty: bool = True,
    nullable: bool = False,
    model: type | None = None,
    many: bool = False,
    decode: Callable[[Any], Any] | None = None,
    encode: Callable[[Any], Any] | None = None,
) -> Any:
    """Declare a dataclass field together with how it maps to JSON.

    ``omitempty`` leaves the key out of the encoded form when the value is
    empty; ``nullable`` fields are only left out when they are ``None``.
    """
    metadata = {
        "json": key,
        "omitempty": omitempty,
        "nullable": nullable,
        "model": model,
        "many": many,
        "decode": decode,
        "encode": encode,
    }
    if default_factory is not None:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def _encode_value(value: Any) -> Any:
    if isinstance(value, _Model):
        return value.to_dict()
    if isinstance(value, Mapping):
        return dict(value)
    return value


class _Model:
    """Base for data types that convert to and from Jira's JSON form."""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of this value."""
        result: dict[str, Any] = {}
        for spec in dataclasses.fields(self):  # type: ignore[arg-type]
            meta = spec.metadata
            key = meta.get("json")
            if key is None:
                continue
            value = getattr(self, spec.name)
            if value is None:
                if not meta["omitempty"]:
                    result[key] = None
                continue
            if meta["omitempty"] and not meta["nullable"] and not value:
                continue
            if meta["encode"] is not None:
                result[key] = meta["encode"](value)
            elif meta["many"]:
                result[key] = [_encode_value(item) for item in value]
            else:
                result[key] = _encode_value(value)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Any:
        """Build a value from its JSON form; absent or null keys keep defaults."""
        if not isinstance(data, Mapping):
            raise ValueError(f"{cls.__name__} payload is not a JSON object")
        kwargs: dict[str, Any] = {}
        for spec in dataclasses.fields(cls):  # type: ignore[arg-type]
            meta = spec.metadata
            key = meta.get("json")
            if key is None:
                continue
            raw = data.get(key)
            if raw is None:
                continue
            model = meta["model"]
            if meta["decode"] is not None:
                value = meta["decode"](raw)
            elif meta["many"]:
                value = [model.from_dict(item) for item in raw] if model else list(raw)
            elif model is not None:
                value = model.from_dict(raw)
            elif isinstance(raw, Mapping):
                value = dict(raw)
            else:
                value = raw
            kwargs[spec.name] = value
        return cls(**kwargs)


@dataclass
class IssueType(_Model):
    """The type of an issue, such as Bug or Story."""

    self_url: str = _json_field("self", "")
    id: str = _json_field("id", "")
    description: str = _json_field("description", "")
    icon_url: str = _json_field("iconUrl", "")
    name: str = _json_field("name", "")
    subtask: bool = _json_field("subtask", False)
    avatar_id: int = _json_field("avatarId", 0)


@dataclass
class Component(_Model):
    """A component an issue belongs to."""

    self_url: str = _json_field("self", "")
    id: str = _json_field("id", "")
    name: str = _json_field("name", "")
    description: str = _json_field("description", "")


@dataclass
class Progress(_Model):
    """The progress of an issue."""

    progress: int = _json_field("progress", 0, omitempty=False)
    total: int = _json_field("total", 0, omitempty=False)
    percent: int = _json_field("percent", 0, omitempty=False)


@dataclass
class Parent(_Model):
    """The parent of a sub-task."""

    id: str = _json_field("id", "")
    key: str = _json_field("key", "")


@dataclass
class Epic(_Model):
    """The epic an issue is associated with."""

    id: int = _json_field("id", 0, omitempty=False)
    key: str = _json_field("key", "", omitempty=False)
    self_url: str = _json_field("self", "", omitempty=False)
    name: str = _json_field("name", "", omitempty=False)
    summary: str = _json_field("summary", "", omitempty=False)
    done: bool = _json_field("done", False, omitempty=False)


@dataclass
class Attachment(_Model):
    """A file attached to an issue."""

    self_url: str = _json_field("self", "")
    id: str = _json_field("id", "")
    filename: str = _json_field("filename", "")
    author: dict[str, Any] | None = _json_field("author", None, nullable=True)
    created: str = _json_field("created", "")
    size: int = _json_field("size", 0)
    mime_type: str = _json_field("mimeType", "")
    content: str = _json_field("content", "")
    thumbnail: str = _json_field("thumbnail", "")


@dataclass
class Watcher(_Model):
    """A user who watches an issue."""

    self_url: str = _json_field("self", "")
    name: str = _json_field("name", "")
    account_id: str = _json_field("accountId", "")
    display_name: str = _json_field("displayName", "")
    active: bool = _json_field("active", False)


@dataclass
class Watches(_Model):
    """How many and which users watch an issue."""

    self_url: str = _json_field("self", "")
    watch_count: int = _json_field("watchCount", 0)
    is_watching: bool = _json_field("isWatching", False)
    watchers: list[Watcher] = _json_field(
        "watchers", default_factory=list, model=Watcher, many=True
    )


@dataclass
class CommentVisibility(_Model):
    """Who may see a comment, e.g. type "role" and value "Administrators"."""

    type: str = _json_field("type", "")
    value: str = _json_field("value", "")


@dataclass
class Comment(_Model):
    """A comment on an issue."""

    id: str = _json_field("id", "")
    self_url: str = _json_field("self", "")
    name: str = _json_field("name", "")
    author: dict[str, Any] = _json_field("author", default_factory=dict, omitempty=False)
    body: str = _json_field("body", "")
    update_author: dict[str, Any] = _json_field(
        "updateAuthor", default_factory=dict, omitempty=False
    )
    updated: str = _json_field("updated", "")
    created: str = _json_field("created", "")
    visibility: CommentVisibility = _json_field(
        "visibility", default_factory=CommentVisibility, omitempty=False, model=CommentVisibility
    )


@dataclass
class Comments(_Model):
    """The comments of an issue."""

    comments: list[Comment] = _json_field(
        "comments", default_factory=list, model=Comment, many=True
    )


@dataclass
class FixVersion(_Model):
    """A release in which an issue is fixed."""

    self_url: str = _json_field("self", "")
    id: str = _json_field("id", "")
    name: str = _json_field("name", "")
    description: str = _json_field("description", "")
    archived: bool | None = _json_field("archived", None, nullable=True)
    released: bool | None = _json_field("released", None, nullable=True)
    release_date: str = _json_field("releaseDate", "")
    user_release_date: str = _json_field("userReleaseDate", "")
    project_id: int = _json_field("projectId", 0)
    start_date: str = _json_field("startDate", "")


@dataclass
class TimeTracking(_Model):
    """The time tracking fields of an issue."""

    original_estimate: str = _json_field("originalEstimate", "")
    remaining_estimate: str = _json_field("remainingEstimate", "")
    time_spent: str = _json_field("timeSpent", "")
    original_estimate_seconds: int = _json_field("originalEstimateSeconds", 0)
    remaining_estimate_seconds: int = _json_field("remainingEstimateSeconds", 0)
    time_spent_seconds: int = _json_field("timeSpentSeconds", 0)