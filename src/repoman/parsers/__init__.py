"""Body parsers feeding check evaluation."""

from .comment_metadata import CommentMetadataExtractor, MetadataExtractor

__all__ = ["CommentMetadataExtractor", "MetadataExtractor"]
