"""Core data models shared across doctag components."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

EntityMetadata = Dict[str, Any]


@dataclass(frozen=True)
class Comment:
    """A documentation comment body and where it was found."""

    text: str
    file: Optional[str] = None
    line: int = 1

    def line_at(self, offset: int) -> int:
        """Return the 1-based source line for an offset into ``text``."""
        return self.line + self.text.count("\n", 0, max(offset, 0))


@dataclass(frozen=True)
class TagOccurrence:
    """One `@pattern argument...` span inside a comment."""

    pattern: str
    argument_text: str
    position: int


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal problem reported while processing a comment."""

    kind: str
    message: str
    pattern: Optional[str] = None
    position: Optional[int] = None
    file: Optional[str] = None
    line: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "pattern": self.pattern,
            "position": self.position,
            "file": self.file,
            "line": self.line,
        }


@dataclass
class ProcessedComment:
    """Merged metadata for one comment plus the diagnostics raised along the way."""

    comment: Comment
    metadata: EntityMetadata = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    doc: str = ""

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.comment.file,
            "line": self.comment.line,
            "metadata": self.metadata,
            "diagnostics": [diagnostic.to_dict() for diagnostic in self.diagnostics],
            "doc": self.doc,
        }
