"""CI status side channel and colorized console output.

Mirrors the GitHub Actions toolkit conventions: inputs arrive as
``INPUT_<NAME>`` environment variables and a failed step is reported with an
``::error::`` workflow command plus a non-zero exit code, without raising.
"""

from __future__ import annotations

import os
from typing import IO, Iterable, List, Mapping, Optional

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from deploycheck.common.diffing import DiffSegment

THEME = Theme({
    "download": "bright_blue",
    "changed": "bright_yellow",
    "unchanged": "bright_green",
    "success": "bright_green",
    "added": "green",
    "removed": "red",
    "diff.unchanged": "bright_black",
})

SEGMENT_STYLES = {
    "added": "added",
    "removed": "removed",
    "unchanged": "diff.unchanged",
}


def get_input(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    key = "INPUT_" + name.replace(" ", "_").upper()
    return env.get(key, "").strip()


def escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def make_console(file: Optional[IO[str]] = None, stderr: bool = False) -> Console:
    return Console(
        file=file,
        stderr=stderr,
        theme=THEME,
        highlight=False,
        emoji=False,
        soft_wrap=True,
        force_terminal=True if os.environ.get("GITHUB_ACTIONS") == "true" else None,
    )


class StatusReporter:
    def __init__(self, out: Optional[Console] = None, err: Optional[Console] = None) -> None:
        self.out = out if out is not None else make_console()
        self.err = err if err is not None else make_console(stderr=True)
        self.failures: List[str] = []

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    def info(self, message: str, style: Optional[str] = None) -> None:
        self.out.print(message, style=style, markup=False)

    def write_diff(self, segments: Iterable[DiffSegment]) -> None:
        for segment in segments:
            self.err.print(Text(segment.text, style=SEGMENT_STYLES[segment.kind]), end="")
        self.err.print("\n", markup=False)

    def trace(self) -> None:
        """Print the exception being handled to stderr."""
        self.err.print_exception()

    def set_failed(self, message: str) -> None:
        self.failures.append(message)
        self.out.print(f"::error::{escape_data(message)}", markup=False)
