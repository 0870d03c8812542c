from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Literal

from diff_match_patch import diff_match_patch

SegmentKind = Literal["added", "removed", "unchanged"]


@dataclass(frozen=True)
class DiffSegment:
    text: str
    kind: SegmentKind

    @property
    def added(self) -> bool:
        return self.kind == "added"

    @property
    def removed(self) -> bool:
        return self.kind == "removed"


def _append(segments: List[DiffSegment], text: str, kind: SegmentKind) -> None:
    if not text:
        return
    if segments and segments[-1].kind == kind:
        segments[-1] = DiffSegment(segments[-1].text + text, kind)
        return
    segments.append(DiffSegment(text, kind))


def diff_chars(old: str, new: str) -> List[DiffSegment]:
    """Character-level diff of ``old`` (local) against ``new`` (remote).

    Myers diff via diff-match-patch. Between two unchanged runs the removed
    text is emitted before the added text.
    """
    segments: List[DiffSegment] = []
    removed: List[str] = []
    added: List[str] = []

    def flush() -> None:
        _append(segments, "".join(removed), "removed")
        _append(segments, "".join(added), "added")
        removed.clear()
        added.clear()

    for op, text in diff_match_patch().diff_main(old, new):
        if op == diff_match_patch.DIFF_DELETE:
            removed.append(text)
        elif op == diff_match_patch.DIFF_INSERT:
            added.append(text)
        else:
            flush()
            _append(segments, text, "unchanged")
    flush()
    return segments


def local_text(segments: Iterable[DiffSegment]) -> str:
    return "".join(segment.text for segment in segments if not segment.added)


def remote_text(segments: Iterable[DiffSegment]) -> str:
    return "".join(segment.text for segment in segments if not segment.removed)
