"""Issue link types, transitions and remote links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .models import _json_field, _Model


@dataclass
class IssueLinkType(_Model):
    """A kind of link between two issues, such as "Duplicate" or "Blocks"."""

    id: str = _json_field("id", "")
    self_url: str = _json_field("self", "")
    name: str = _json_field("name", "", omitempty=False)
    inward: str = _json_field("inward", "", omitempty=False)
    outward: str = _json_field("outward", "", omitempty=False)


@dataclass
class TransitionField(_Model):
    """Whether a field must be set when a transition is performed."""

    required: bool = _json_field("required", False, omitempty=False)


def _decode_transition_fields(raw: Any) -> dict[str, TransitionField]:
    if not isinstance(raw, Mapping):
        raise ValueError("transition fields payload is not a JSON object")
    return {str(key): TransitionField.from_dict(value) for key, value in raw.items()}


def _encode_transition_fields(value: Mapping[str, TransitionField]) -> dict[str, Any]:
    return {key: item.to_dict() for key, item in value.items()}


@dataclass
class Transition(_Model):
    """A transition an issue can go through."""

    id: str = _json_field("id", "", omitempty=False)
    name: str = _json_field("name", "", omitempty=False)
    to: dict[str, Any] = _json_field("to", default_factory=dict, omitempty=False)
    fields: dict[str, TransitionField] = _json_field(
        "fields",
        default_factory=dict,
        omitempty=False,
        decode=_decode_transition_fields,
        encode=_encode_transition_fields,
    )


@dataclass
class RemoteLinkIcon(_Model):
    """The icon shown next to a remote link."""

    url16x16: str = _json_field("url16x16", "")
    title: str = _json_field("title", "")
    link: str = _json_field("link", "")


@dataclass
class RemoteLinkStatus(_Model):
    """The status of a remote object that can be resolved, such as an issue."""

    resolved: bool = _json_field("resolved", False)
    icon: RemoteLinkIcon | None = _json_field("icon", None, nullable=True, model=RemoteLinkIcon)


@dataclass
class RemoteLinkObject(_Model):
    """The object a remote link points to."""

    url: str = _json_field("url", "")
    title: str = _json_field("title", "")
    summary: str = _json_field("summary", "")
    icon: RemoteLinkIcon | None = _json_field("icon", None, nullable=True, model=RemoteLinkIcon)
    status: RemoteLinkStatus | None = _json_field(
        "status", None, nullable=True, model=RemoteLinkStatus
    )


@dataclass
class RemoteLinkApplication(_Model):
    """The application a remote link belongs to."""

    type: str = _json_field("type", "")
    name: str = _json_field("name", "")


@dataclass
class RemoteLink(_Model):
    """A link from an issue to something outside the Jira instance."""

    id: int = _json_field("id", 0)
    self_url: str = _json_field("self", "")
    global_id: str = _json_field("globalId", "")
    application: RemoteLinkApplication | None = _json_field(
        "application", None, nullable=True, model=RemoteLinkApplication
    )
    relationship: str = _json_field("relationship", "")
    object: RemoteLinkObject | None = _json_field(
        "object", None, nullable=True, model=RemoteLinkObject
    )