# jirakit

Typed data classes for the JSON that the Jira REST API sends and accepts,
together with helpers for Jira's time and date strings and for the query
options its endpoints take. Everything is plain standard-library Python.

## Installation

```
pip install jirakit
```

## Issues and their fields

`jirakit.issue_model` holds `Issue`, `IssueFields`, `IssueRenderedFields`
and `IssueLink`. Every data class has `to_dict()` and the class method
`from_dict()`, which convert to and from Jira's JSON form. Empty values are
left out when encoding; absent or `null` keys keep their defaults when
decoding. The JSON key `self` is held in the attribute `self_url`.

`IssueFields` keeps any key it has no attribute for, such as custom fields,
in its `unknowns` dictionary and writes those keys back at the top level:

```python
from jirakit.issue_model import Issue, IssueFields
from jirakit.models import IssueType

issue = Issue(
    fields=IssueFields(
        summary="Just a demo issue",
        type=IssueType(name="Bug"),
        project={"key": "PROJ1"},
        unknowns={"customfield_10220": "some value"},
    )
)
issue.to_dict()
# {'fields': {'issuetype': {'name': 'Bug'}, 'project': {'key': 'PROJ1'},
#             'summary': 'Just a demo issue', 'customfield_10220': 'some value'}}

parsed = Issue.from_dict({"key": "PROJ-1", "fields": {"customfield_1": 3}})
parsed.fields.unknowns  # {'customfield_1': 3}
```

Time fields such as `created`, `updated` and `resolutiondate` decode to
`datetime`, and `duedate` to `date`.

## Other types

- `jirakit.models` – `IssueType`, `Component`, `Progress`, `Parent`, `Epic`,
  `Attachment`, `Watcher`, `Watches`, `CommentVisibility`, `Comment`,
  `Comments`, `FixVersion`, `TimeTracking`.
- `jirakit.worklog` – `EntityProperty`, `WorklogRecord`, `Worklog`,
  `ChangelogItems`, `ChangelogHistory` (with `created_time()`, which returns
  `None` when Jira reported `"null"`) and `Changelog`.
- `jirakit.links` – `IssueLinkType`, `TransitionField`, `Transition`,
  `RemoteLinkIcon`, `RemoteLinkStatus`, `RemoteLinkObject`,
  `RemoteLinkApplication` and `RemoteLink`.

## Dates and times

`jirakit.jiratime` converts between Jira's strings and Python values:

- `parse_time("2016-03-16T04:22:35.386+0000")` gives an aware `datetime`;
  `None` and `"null"` give `None`, anything else malformed raises
  `ValueError`.
- `format_time(dt)` writes `YYYY-MM-DDTHH:MM:SS.mmm+HHMM`, with milliseconds
  truncated; a naive `datetime` is taken as UTC.
- `parse_date("2016-03-16")` and `format_date(d)` do the same for dates.

## Query options

`jirakit.query` has the option sets `SearchOptions`, `GetQueryOptions`,
`UpdateQueryOptions`, `GetWorklogsQueryOptions` and `AddWorklogQueryOptions`.
Empty values (`False`, `0`, `""`, empty lists) are not sent.

```python
from jirakit.query import SearchOptions, UpdateQueryOptions, add_options, encode_options

encode_options(SearchOptions(start_at=50, max_results=25, fields=["summary", "status"]))
# 'Fields=summary&Fields=status&maxResults=25&startAt=50'

add_options("rest/api/2/issue/PROJ-1", UpdateQueryOptions(notify_users=True))
# 'rest/api/2/issue/PROJ-1?notifyUsers=true'
```

`encode_options` sorts the parameter names; `add_options` replaces any query
string the endpoint already had, and returns the endpoint unchanged when the
options are `None`.

## What this package does not do

It sends no HTTP requests. There is no client, no authentication and no
service for issues, searches, fields, components, groups or link types, and
no error type for Jira's error responses. Use the data classes and helpers
here with whatever HTTP library you already have.

## Running the tests

```
pip install -e ".[test]"
pytest
```