"""Validator package — variation building, probing, checking and scheduling."""

from linkcheck.validator.checker import check_url
from linkcheck.validator.models import (
    CheckedResult,
    Failed,
    ProbeOutcome,
    Resolved,
    ValidationReport,
)
from linkcheck.validator.prober import probe_url
from linkcheck.validator.scheduler import check_urls
from linkcheck.validator.variations import build_url_variations, sanitize_url

__all__ = [
    "sanitize_url",
    "build_url_variations",
    "probe_url",
    "check_url",
    "check_urls",
    "Resolved",
    "Failed",
    "ProbeOutcome",
    "CheckedResult",
    "ValidationReport",
]
