"""Core data models for RepoMan."""

from .entities import CommentSnapshot, FlushResult, IssueSnapshot, RunOutcome

__all__ = [
    "CommentSnapshot",
    "FlushResult",
    "IssueSnapshot",
    "RunOutcome",
]
