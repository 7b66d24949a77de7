"""Concrete action steps."""

from .assignees import Assignees
from .branch import CheckGroup
from .comment import Comment
from .labels import Labels

__all__ = ["Assignees", "CheckGroup", "Comment", "Labels"]
