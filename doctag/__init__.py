"""Extract structured metadata from @tag annotations in doc comments."""

from .cursor import Cursor
from .models import Comment, Diagnostic, ProcessedComment, TagOccurrence
from .processor import DocCommentProcessor, tokenize
from .registry import TagRegistry, build_registry
from .tags import TagDefinition, builtin_tags, discover_tags

__all__ = [
    "Comment",
    "Cursor",
    "Diagnostic",
    "DocCommentProcessor",
    "ProcessedComment",
    "TagDefinition",
    "TagOccurrence",
    "TagRegistry",
    "build_registry",
    "builtin_tags",
    "discover_tags",
    "tokenize",
]
