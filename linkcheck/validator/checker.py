"""Reduce one raw URL to a single valid/invalid classification."""

from __future__ import annotations

from typing import Callable

from linkcheck.validator.models import CheckedResult, ProbeOutcome, Resolved
from linkcheck.validator.prober import probe_url
from linkcheck.validator.variations import build_url_variations

Prober = Callable[[str], ProbeOutcome]


def check_url(url: str, probe: Prober = probe_url) -> CheckedResult:
    """Try each variation of *url* in order until one answers.

    The first variation that gets any response wins and its resolved address
    (after redirects) is reported.  A failed variation is never retried; if
    all of them fail the raw *url* is reported as invalid.
    """
    for variation in build_url_variations(url):
        outcome = probe(variation)
        if isinstance(outcome, Resolved):
            return CheckedResult(valid=True, url=outcome.final_url)

    print(f"[CHECK] invalid - {url}")
    return CheckedResult(valid=False, url=url)
