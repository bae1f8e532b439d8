"""Replace the body of one marker-delimited region in a document.

The document is never parsed; the start marker must occur exactly once,
and the end marker exactly once after it. Text before the start marker
and from the end marker onward is kept byte for byte.
"""

from __future__ import annotations

from dataclasses import dataclass

from autodoc_engine.docsync import provenance


class MalformedDocumentError(ValueError):
    """A region marker is missing or repeated where exactly one is required."""

    def __init__(self, marker: str, count: int, kind: str = "start") -> None:
        self.marker = marker
        self.count = count
        self.kind = kind
        super().__init__(
            f"Did not find exactly one {kind} tag {marker!r} (found {count})"
        )


@dataclass(frozen=True)
class SpliceResult:
    """Either the spliced document or the reason splicing failed."""

    document: str | None = None
    marker: str | None = None
    kind: str | None = None
    count: int = 0

    @property
    def ok(self) -> bool:
        return self.document is not None

    @property
    def reason(self) -> str | None:
        """Why splicing failed, or None on success."""
        if self.ok:
            return None
        return str(self.error())

    def error(self) -> MalformedDocumentError:
        return MalformedDocumentError(self.marker or "", self.count, self.kind or "start")

    def unwrap(self) -> str:
        """Return the document or raise the failure."""
        if self.document is None:
            raise self.error()
        return self.document


def find_occurrences(text: str, marker: str, start: int = 0) -> list[int]:
    """Indexes of every non-overlapping occurrence of marker in text."""
    if not marker:
        raise ValueError("marker must be a non-empty string")
    positions = []
    idx = text.find(marker, start)
    while idx != -1:
        positions.append(idx)
        idx = text.find(marker, idx + len(marker))
    return positions


def try_splice(
    document: str,
    start_tag: str,
    end_tag: str,
    body: str,
    source: str,
) -> SpliceResult:
    """Splice body between the tags, reporting malformation as a result."""
    starts = find_occurrences(document, start_tag)
    if len(starts) != 1:
        return SpliceResult(marker=start_tag, kind="start", count=len(starts))

    body_start = starts[0] + len(start_tag)
    ends = find_occurrences(document, end_tag, body_start)
    if len(ends) != 1:
        return SpliceResult(marker=end_tag, kind="end", count=len(ends))

    comment = provenance(source)
    return SpliceResult(document="".join([
        document[:body_start],
        f"\n{comment}\n",
        body,
        f"\n\n{comment}",
        "\n\n",
        document[ends[0]:],
    ]))


def splice(
    document: str,
    start_tag: str,
    end_tag: str,
    body: str,
    source: str,
) -> str:
    """Return document with the region between the tags replaced by body.

    Args:
        document: Full document text.
        start_tag: Literal start marker.
        end_tag: Literal end marker.
        body: New region content.
        source: Path named in the provenance comments.

    Raises:
        MalformedDocumentError: If the start tag does not occur exactly once,
            or the end tag does not occur exactly once after it.
    """
    return try_splice(document, start_tag, end_tag, body, source).unwrap()
