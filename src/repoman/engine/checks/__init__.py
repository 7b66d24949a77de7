"""Concrete check steps."""

from .content import BodyMatches, CommentBodyMatches
from .item import AuthorIsFte, IsDraft, IsPullRequest
from .labels import LabelMissing, LabelPresent
from .metadata import MetadataExists, MetadataMatches

__all__ = [
    "AuthorIsFte",
    "BodyMatches",
    "CommentBodyMatches",
    "IsDraft",
    "IsPullRequest",
    "LabelMissing",
    "LabelPresent",
    "MetadataExists",
    "MetadataMatches",
]
