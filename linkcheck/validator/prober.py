"""Single-request reachability probe.

One GET per candidate URL, redirects followed by ``httpx``.  Only whether a
response arrived matters; the status code and body are ignored, so the body
is never downloaded.

Each probe gets one total deadline (``settings.request_timeout``) covering
every redirect hop, enforced with ``asyncio.wait_for`` around an
``httpx.AsyncClient`` request.  ``probe_url`` itself stays synchronous so it
can run on a scheduler worker thread.
"""

from __future__ import annotations

import asyncio
import time
from typing import List

import httpx

from linkcheck.config import settings
from linkcheck.validator.models import Failed, ProbeOutcome, Resolved

# Everything raised for an unreachable or unusable candidate.  Hosts the IDNA
# codec rejects (empty or over-long labels) raise UnicodeError.
PROBE_ERRORS = (httpx.HTTPError, httpx.InvalidURL, UnicodeError, asyncio.TimeoutError)


def _build_client() -> httpx.AsyncClient:
    """Return a client configured from ``settings``."""
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
        max_redirects=settings.max_redirects,
    )


def _redirect_trail(response: httpx.Response) -> List[str]:
    """Return each redirect target followed to reach *response*, in order.

    Every entry in ``response.history`` is a redirect; its target is the URL
    of the request that came after it.
    """
    if not response.history:
        return []
    hops = [str(r.request.url) for r in response.history[1:]]
    hops.append(str(response.request.url))
    return hops


async def _fetch_trail(url: str) -> List[str]:
    async with _build_client() as client:
        async with client.stream("GET", url) as response:
            return _redirect_trail(response)


def probe_url(url: str) -> ProbeOutcome:
    """GET *url* and report the address it finally resolved to.

    Returns :class:`Resolved` for any response, whatever its status, and
    :class:`Failed` for connection errors, timeouts, DNS failures, malformed
    URLs and redirect loops.  The resolved address is *url* itself when no
    redirect happened, otherwise the target of the last hop.
    """
    print(f"[PROBE] hitting {url}")
    started = time.monotonic()
    try:
        hops = asyncio.run(
            asyncio.wait_for(_fetch_trail(url), timeout=settings.request_timeout)
        )
    except PROBE_ERRORS as exc:
        print(f"[PROBE] ✗ {url}: {exc!r:.120}")
        return Failed(url=url, error=exc)

    final_url = url
    for hop in hops:
        print(f"[REDIRECT] redirecting to {hop} from {final_url}")
        final_url = hop

    print(f"[PROBE] {time.monotonic() - started:.1f} secs for {url}")
    return Resolved(url=url, final_url=final_url, redirects=hops)
