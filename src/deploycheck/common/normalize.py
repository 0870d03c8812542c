from __future__ import annotations

from pathlib import Path

ESCAPED_CRLF = "\\r\\n"
ESCAPED_LF = "\\n"


def normalize_text(text: str) -> str:
    """Strip carriage returns and collapse escaped ``\\r\\n`` text into ``\\n``.

    Both checks run on the raw characters: real CR characters are dropped, and
    the literal four-character escape ``\\r\\n`` (as it appears inside
    serialized strings in built bundles) becomes the two-character ``\\n``.
    The collapse repeats until no escape remains so the result is stable;
    input that one replace pass already leaves stable comes out unchanged
    from that single pass.
    """
    text = text.replace("\r", "")
    while ESCAPED_CRLF in text:
        text = text.replace(ESCAPED_CRLF, ESCAPED_LF)
    return text


def read_source(path: Path) -> str:
    # newline="" keeps CR characters for normalize_text to drop.
    with path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()
