"""URL canonicalization: redirect unwrapping and tracking-parameter removal."""

from __future__ import annotations

import logging
import re
from urllib.parse import parse_qs, unquote_plus, urlsplit, urlunsplit

logger = logging.getLogger(__name__)

TRACKING_PARAMS = frozenset(
    {"utm_source", "utm_medium", "utm_campaign", "utm_term", "utm_content", "fbclid", "gclid"}
)

_REDIRECT_WRAPPER_RE = re.compile(
    r"^https?://(?:www\.)?(?:google\.[a-z.]+/url|[a-z0-9.-]+/search/visit)\?",
    re.IGNORECASE,
)


def unwrap_redirect(url: str) -> str:
    """Replace search-engine visit links with the destination in their url= parameter."""

    # Each pass yields a strictly shorter string.
    while _REDIRECT_WRAPPER_RE.match(url):
        try:
            target = parse_qs(urlsplit(url).query).get("url", [""])[0]
        except ValueError:
            break
        if not target:
            break
        url = target.strip()
    return url


def _strip_tracking(query: str) -> str:
    kept: list[str] = []
    for pair in query.split("&"):
        if not pair:
            continue
        key = unquote_plus(pair.split("=", 1)[0])
        if not key:
            logger.warning("Dropping query parameter with empty name: %r", pair)
            continue
        if key in TRACKING_PARAMS:
            continue
        kept.append(pair)
    return "&".join(kept)


def normalize_url(url: str) -> str:
    """Return a canonical form of url; unparseable input comes back unchanged."""

    working = unwrap_redirect(url)
    try:
        parsed = urlsplit(working)
    except ValueError:
        return working
    if not parsed.scheme or not parsed.netloc:
        return working

    query = _strip_tracking(parsed.query)
    return urlunsplit((parsed.scheme, parsed.netloc, parsed.path, query, parsed.fragment))
