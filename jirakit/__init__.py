"""Data types, time helpers and query options for Jira REST API payloads."""

__version__ = "0.1.0"