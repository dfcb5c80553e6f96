"""Data models for the validation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set, Union


@dataclass(frozen=True)
class Resolved:
    """A probe that got a response, after following any redirects."""

    url: str
    final_url: str
    redirects: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Failed:
    """A probe that never got a response."""

    url: str
    error: Exception


ProbeOutcome = Union[Resolved, Failed]


@dataclass(frozen=True)
class CheckedResult:
    """The single classification for one raw URL.

    ``url`` is the resolved address when ``valid`` is true and the raw URL,
    unchanged, otherwise.
    """

    valid: bool
    url: str


@dataclass
class ValidationReport:
    """Valid and invalid URL sets for one batch."""

    valid_urls: Set[str] = field(default_factory=set)
    invalid_urls: Set[str] = field(default_factory=set)
    dropped: List[str] = field(default_factory=list)

    def add(self, result: CheckedResult) -> None:
        # An address some check reached is never listed as invalid, whichever
        # result arrives first.
        if result.valid:
            self.valid_urls.add(result.url)
            self.invalid_urls.discard(result.url)
        elif result.url not in self.valid_urls:
            self.invalid_urls.add(result.url)

    def drop(self, url: str) -> None:
        """Record a URL whose check never produced a result."""
        self.dropped.append(url)

    def render(self) -> str:
        """Return the report text with each section sorted and deduplicated."""
        return (
            "valid urls:\n"
            f"{_sorted_lines(self.valid_urls)}\n\n"
            "invalid urls:\n"
            f"{_sorted_lines(self.invalid_urls)}"
        )


def _sorted_lines(urls: Set[str]) -> str:
    return "\n".join(sorted(set(urls)))
