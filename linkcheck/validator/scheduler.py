"""Bounded-concurrency batch checking.

Each raw URL becomes one unit of work on a ``ThreadPoolExecutor`` whose
``max_workers`` is the concurrency ceiling; a worker takes the next queued
URL as soon as it frees up.  Results are folded into a
:class:`ValidationReport` by a single loop in the calling thread, in
completion order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, List, Optional

from linkcheck.config import settings
from linkcheck.validator.checker import check_url
from linkcheck.validator.models import CheckedResult, ValidationReport

Checker = Callable[[str], CheckedResult]


def dedupe(urls: Iterable[str]) -> List[str]:
    """Drop repeated URLs (exact string match), keeping first occurrences."""
    seen: set[str] = set()
    unique: List[str] = []
    for u in urls:
        if u not in seen:
            seen.add(u)
            unique.append(u)
    return unique


def check_urls(
    urls: Iterable[str],
    check: Checker = check_url,
    max_concurrency: Optional[int] = None,
) -> ValidationReport:
    """Check every URL in *urls* with at most *max_concurrency* in flight.

    *max_concurrency* defaults to ``settings.max_concurrency``.  A check that
    raises is reported and its URL left out of both result sets; the rest of
    the batch is unaffected.
    """
    limit = settings.max_concurrency if max_concurrency is None else max_concurrency
    if limit < 1:
        raise ValueError(f"max_concurrency must be at least 1, got {limit}")

    unique = dedupe(urls)
    report = ValidationReport()
    if not unique:
        return report

    print(f"[SCHEDULER] Checking {len(unique)} URL(s), {limit} at a time.")
    with ThreadPoolExecutor(max_workers=limit) as pool:
        future_to_url = {pool.submit(check, url): url for url in unique}
        for future in as_completed(future_to_url):
            url = future_to_url[future]
            try:
                result = future.result()
            except Exception as exc:
                print(f"[SCHEDULER] ✗ Check failed for {url!r}: {exc!r}")
                report.drop(url)
                continue
            report.add(result)

    print(
        f"[SCHEDULER] Done: {len(report.valid_urls)} valid, "
        f"{len(report.invalid_urls)} invalid, {len(report.dropped)} dropped."
    )
    return report
