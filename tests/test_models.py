import pytest

from jirakit.models import (
    Attachment,
    Comment,
    Comments,
    CommentVisibility,
    Component,
    Epic,
    FixVersion,
    IssueType,
    Parent,
    Progress,
    TimeTracking,
    Watcher,
    Watches,
)

COMPONENT_PAYLOAD = {
    "self": "http://www.example.com/jira/rest/api/2/component/10000",
    "id": "10000",
    "name": "Component 1",
    "description": "This is a Jira component",
}


def test_component_round_trip():
    component = Component.from_dict(COMPONENT_PAYLOAD)
    assert component.id == "10000"
    assert component.self_url == COMPONENT_PAYLOAD["self"]
    assert component.to_dict() == COMPONENT_PAYLOAD


def test_empty_component_omits_every_key():
    assert Component().to_dict() == {}


def test_issue_type_round_trip():
    payload = {"id": "1", "name": "Bug", "subtask": True, "avatarId": 3, "iconUrl": "x"}
    issue_type = IssueType.from_dict(payload)
    assert issue_type.name == "Bug"
    assert issue_type.subtask is True
    assert issue_type.to_dict() == payload


def test_progress_keeps_zero_values():
    encoded = Progress().to_dict()
    assert set(encoded) == {"progress", "total", "percent"}
    assert all(value == 0 for value in encoded.values())


def test_parent_omits_empty_id():
    parent = Parent(key="PROJ-1")
    assert parent.to_dict() == {"key": "PROJ-1"}


def test_epic_keeps_every_key():
    epic = Epic.from_dict({"id": 7, "key": "E-7", "done": True})
    assert epic.id == 7
    encoded = epic.to_dict()
    assert encoded["done"] is True
    assert set(encoded) == {"id", "key", "self", "name", "summary", "done"}


def test_fix_version_nullable_flags():
    assert "archived" not in FixVersion(name="1.0").to_dict()
    encoded = FixVersion(name="1.0", archived=False, released=True).to_dict()
    assert encoded["archived"] is False
    assert encoded["released"] is True


def test_fix_version_from_dict_reads_flags():
    version = FixVersion.from_dict({"name": "2.0", "archived": False, "projectId": 10000})
    assert version.archived is False
    assert version.released is None
    assert version.project_id == 10000


def test_watches_decodes_nested_watchers():
    payload = {
        "self": "s",
        "watchCount": 2,
        "isWatching": True,
        "watchers": [{"name": "fred", "accountId": "a1"}, {"name": "alex", "active": True}],
    }
    watches = Watches.from_dict(payload)
    assert [w.name for w in watches.watchers] == ["fred", "alex"]
    assert isinstance(watches.watchers[0], Watcher)
    assert watches.to_dict() == payload


def test_comment_round_trip_with_visibility():
    payload = {
        "id": "10",
        "body": "hello",
        "author": {"name": "fred"},
        "updateAuthor": {"name": "alex"},
        "visibility": {"type": "role", "value": "Administrators"},
    }
    comment = Comment.from_dict(payload)
    assert comment.visibility == CommentVisibility(type="role", value="Administrators")
    assert comment.author == {"name": "fred"}
    assert comment.to_dict() == payload


def test_comments_list_round_trip():
    comments = Comments(comments=[Comment(id="1", body="a"), Comment(id="2", body="b")])
    decoded = Comments.from_dict(comments.to_dict())
    assert decoded == comments


def test_attachment_author_omitted_when_missing():
    attachment = Attachment(filename="file.txt", size=12)
    encoded = attachment.to_dict()
    assert "author" not in encoded
    assert Attachment.from_dict(encoded) == attachment


def test_time_tracking_round_trip():
    tracking = TimeTracking(original_estimate="1d", time_spent_seconds=3600)
    assert TimeTracking.from_dict(tracking.to_dict()) == tracking


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ValueError):
        Component.from_dict(["not", "a", "mapping"])