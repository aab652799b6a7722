"""Turns one doc comment into merged entity metadata."""

from __future__ import annotations

import re
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .cursor import Cursor
from .errors import ConflictingTags, DuplicateField, TagParseError
from .logging import get_logger
from .models import Comment, Diagnostic, EntityMetadata, ProcessedComment, TagOccurrence
from .registry import TagRegistry
from .tags.base import MergedFragment, RawRecord

logger = get_logger("processor")

# An "@" only introduces a tag at the start of the text or after whitespace,
# so e-mail addresses and inline {@link ...} references stay in the text.
_INTRODUCER = re.compile(r"(?<!\S)@([A-Za-z][A-Za-z0-9_]*)")

UNRESOLVED_PATTERN = "UnresolvedPattern"


def tokenize(text: str) -> Tuple[str, List[TagOccurrence]]:
    """Split comment text into the leading prose and tag occurrences.

    Each occurrence's argument text runs from just after its pattern to the
    next tag introducer (or the end of the text), unmodified.
    """
    matches = list(_INTRODUCER.finditer(text))
    if not matches:
        return text, []

    occurrences: List[TagOccurrence] = []
    for index, found in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        occurrences.append(
            TagOccurrence(
                pattern=found.group(1),
                argument_text=text[found.end() : end],
                position=found.start(),
            )
        )
    return text[: matches[0].start()], occurrences


class DocCommentProcessor:
    """Parses comments against a frozen tag registry.

    Problems local to one tag occurrence (an unknown pattern, a malformed
    argument, conflicting tags within one key) become diagnostics on the
    result and never abort the rest of the comment.
    """

    def __init__(self, registry: TagRegistry, *, ignore_unknown: Iterable[str] = ()) -> None:
        registry.freeze()
        self.registry = registry
        self._ignore_unknown = frozenset(ignore_unknown)

    def process_text(self, text: str, *, file: Optional[str] = None, line: int = 1) -> ProcessedComment:
        return self.process(Comment(text=text, file=file, line=line))

    def process_all(self, comments: Iterable[Comment]) -> List[ProcessedComment]:
        return [self.process(comment) for comment in comments]

    def process(self, comment: Comment) -> ProcessedComment:
        leading, occurrences = tokenize(comment.text)
        diagnostics: List[Diagnostic] = []
        groups: Dict[str, List[RawRecord]] = defaultdict(list)

        for occurrence in occurrences:
            definition = self.registry.lookup(occurrence.pattern)
            if definition is None:
                if occurrence.pattern not in self._ignore_unknown:
                    diagnostics.append(
                        self._diagnostic(
                            comment,
                            occurrence,
                            UNRESOLVED_PATTERN,
                            f"Unknown tag @{occurrence.pattern}",
                        )
                    )
                continue
            try:
                record = definition.parse(Cursor(occurrence.argument_text))
            except TagParseError as exc:
                diagnostics.append(
                    self._diagnostic(comment, occurrence, type(exc).__name__, f"@{occurrence.pattern}: {exc}")
                )
                continue
            groups[definition.key].append(record)

        metadata = self._fold(comment, groups, diagnostics)
        self._report(diagnostics)
        return ProcessedComment(
            comment=comment,
            metadata=metadata,
            diagnostics=diagnostics,
            doc=leading.strip(),
        )

    def _fold(
        self,
        comment: Comment,
        groups: Dict[str, List[RawRecord]],
        diagnostics: List[Diagnostic],
    ) -> EntityMetadata:
        metadata: EntityMetadata = {}
        for key in self.registry.keys():
            records = groups.get(key)
            if not records:
                continue
            try:
                fragment: MergedFragment = self.registry.folder(key).process_doc(records)
            except ConflictingTags as exc:
                diagnostics.append(
                    Diagnostic(
                        kind=type(exc).__name__,
                        message=str(exc),
                        pattern=str(records[0].get("tagname")),
                        file=comment.file,
                        line=comment.line,
                    )
                )
                continue
            declared = self.registry.folder(key).fields
            undeclared = [name for name in fragment if name not in declared]
            if undeclared:
                # Overlap is only checked for declared fields when the registry freezes.
                raise DuplicateField(
                    f"Key '{key}' emitted undeclared field(s) {', '.join(undeclared)}; "
                    f"declared: {', '.join(declared)}"
                )
            metadata.update(fragment)
        return metadata

    @staticmethod
    def _diagnostic(comment: Comment, occurrence: TagOccurrence, kind: str, message: str) -> Diagnostic:
        return Diagnostic(
            kind=kind,
            message=message,
            pattern=occurrence.pattern,
            position=occurrence.position,
            file=comment.file,
            line=comment.line_at(occurrence.position),
        )

    @staticmethod
    def _report(diagnostics: Sequence[Diagnostic]) -> None:
        for diagnostic in diagnostics:
            location = f"{diagnostic.file or '<comment>'}:{diagnostic.line}"
            if diagnostic.kind == UNRESOLVED_PATTERN:
                logger.debug("%s %s", location, diagnostic.message)
            else:
                logger.warning("%s %s", location, diagnostic.message)


__all__ = ["DocCommentProcessor", "UNRESOLVED_PATTERN", "tokenize"]
