"""URL normalisation and candidate generation.

A raw link is reduced to its bare ``host/path`` form and rebuilt under every
scheme / ``www.`` combination worth trying.
"""

from __future__ import annotations

import re
from typing import List

_SCHEME_RE = re.compile(r"^https?://")
_WWW_RE = re.compile(r"www\.")


def sanitize_url(url: str) -> str:
    """Strip a leading ``http://``/``https://`` and every ``www.`` from *url*.

    Both removals are a single pass, so the result is idempotent for ordinary
    links but not when a removal exposes a new match: ``wwww.ww.`` becomes
    ``www.`` and ``https://https://x`` becomes ``https://x``.

    >>> sanitize_url("https://www.google.com/search?q=rust")
    'google.com/search?q=rust'
    """
    return _WWW_RE.sub("", _SCHEME_RE.sub("", url, count=1))


def build_url_variations(url: str) -> List[str]:
    """Return the candidate URLs to try for *url*, most preferred first.

    HTTPS before HTTP, bare host before ``www.``; the original string is
    appended last unless it already matches one of the four rebuilt forms.
    """
    partial = sanitize_url(url)
    # Order matters: the checker stops at the first candidate that answers.
    variations = [
        f"https://{partial}",
        f"https://www.{partial}",
        f"http://{partial}",
        f"http://www.{partial}",
    ]
    if url not in variations:
        variations.append(url)
    return variations
