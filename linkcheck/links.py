"""Reading link lists and writing reports.

Errors from the filesystem are not handled here; an unreadable input or an
unwritable output aborts the run.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from linkcheck.validator.scheduler import dedupe

PathLike = Union[str, Path]


def parse_links(text: str) -> List[str]:
    """Return the non-blank, stripped, de-duplicated lines of *text*."""
    return dedupe(line.strip() for line in text.split("\n") if line.strip())


def read_links(path: PathLike) -> List[str]:
    """Read a newline-separated link list from *path*."""
    return parse_links(Path(path).read_text(encoding="utf-8"))


def write_report(path: PathLike, text: str) -> None:
    """Write the rendered report *text* to *path* exactly as given."""
    Path(path).write_text(text, encoding="utf-8")
