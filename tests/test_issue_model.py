from datetime import date, datetime, timezone

import pytest

from jirakit.issue_model import Issue, IssueFields, IssueLink, IssueRenderedFields
from jirakit.links import IssueLinkType, Transition
from jirakit.models import Comment, Comments, Component, IssueType


def test_fields_keep_unknown_keys():
    fields = IssueFields.from_dict(
        {"summary": "Just a demo issue", "customfield_10220": "value", "labels": ["a"]}
    )
    assert fields.summary == "Just a demo issue"
    assert fields.labels == ["a"]
    assert fields.unknowns == {"customfield_10220": "value"}


def test_fields_to_dict_lifts_unknowns():
    fields = IssueFields(summary="s", unknowns={"customfield_1": "x"})
    encoded = fields.to_dict()
    assert encoded["customfield_1"] == "x"
    assert "unknowns" not in encoded
    assert encoded["summary"] == "s"


def test_fields_unknown_models_are_encoded():
    fields = IssueFields(unknowns={"customfield_2": [Component(name="c")]})
    assert fields.to_dict() == {"customfield_2": [{"name": "c"}]}


def test_empty_issuetype_is_left_out():
    assert "issuetype" not in IssueFields().to_dict()
    encoded = IssueFields(type=IssueType(name="Bug")).to_dict()
    assert encoded["issuetype"] == {"name": "Bug"}


def test_fields_times_and_dates():
    fields = IssueFields.from_dict(
        {"created": "2016-03-16T04:22:35.386+0000", "duedate": "2016-03-16"}
    )
    assert fields.created == datetime(2016, 3, 16, 4, 22, 35, 386000, tzinfo=timezone.utc)
    assert fields.duedate == date(2016, 3, 16)
    encoded = fields.to_dict()
    assert encoded["created"] == "2016-03-16T04:22:35.386+0000"
    assert encoded["duedate"] == "2016-03-16"


def test_fields_null_keys_are_known_not_unknown():
    fields = IssueFields.from_dict({"resolution": None, "created": None})
    assert fields.resolution is None
    assert fields.created is None
    assert fields.unknowns == {}


def test_fields_round_trip():
    fields = IssueFields(
        type=IssueType(name="Bug"),
        project={"key": "PROJ1"},
        summary="Just a demo issue",
        description="Test Issue",
        assignee={"name": "myuser"},
        components=[Component(name="core")],
        comments=Comments(comments=[Comment(body="hello")]),
        unknowns={"customfield_10220": "v"},
    )
    assert IssueFields.from_dict(fields.to_dict()) == fields


def test_issue_link_emits_null_issues():
    link = IssueLink(type=IssueLinkType(name="Duplicate"))
    encoded = link.to_dict()
    assert encoded["outwardIssue"] is None
    assert encoded["inwardIssue"] is None
    assert encoded["type"]["name"] == "Duplicate"


def test_issue_link_decodes_nested_issues():
    link = IssueLink.from_dict(
        {"type": {"name": "Blocks"}, "outwardIssue": {"key": "PROJ-2"}, "inwardIssue": None}
    )
    assert link.outward_issue == Issue(key="PROJ-2")
    assert link.inward_issue is None


def test_issue_from_dict():
    issue = Issue.from_dict(
        {
            "id": "10002",
            "key": "EX-1",
            "fields": {"summary": "example", "issuelinks": [{"type": {"name": "Blocks"}}]},
            "renderedFields": {"description": "<p>x</p>"},
            "transitions": [{"id": "2", "name": "Close"}],
            "names": {"summary": "Summary"},
        }
    )
    assert issue.key == "EX-1"
    assert issue.fields.summary == "example"
    assert issue.fields.issue_links[0].type.name == "Blocks"
    assert issue.rendered_fields == IssueRenderedFields(description="<p>x</p>")
    assert issue.transitions == [Transition(id="2", name="Close")]
    assert issue.names == {"summary": "Summary"}


def test_issue_to_dict_omits_empty():
    assert Issue(key="EX-1").to_dict() == {"key": "EX-1"}


def test_issue_round_trip():
    issue = Issue(
        id="1",
        key="EX-1",
        fields=IssueFields(summary="s", unknowns={"customfield_9": 3}),
        transitions=[Transition(id="4", name="Start")],
    )
    assert Issue.from_dict(issue.to_dict()) == issue


def test_issue_rejects_non_mapping():
    with pytest.raises(ValueError):
        Issue.from_dict(["not", "an", "issue"])