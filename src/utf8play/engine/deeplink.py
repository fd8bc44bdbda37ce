"""Deep links: a URL path segment of 1-8 hex digits names a code point."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from ..core.encoder import encode_code_point
from .samples import random_packed

FRAGMENT_RE = re.compile(r"/([0-9A-Fa-f]{1,8})")


def extract_fragment(url: str) -> str | None:
    """The first hex path segment of url, or None.

    Only the path is searched, so hex-looking host names are ignored.
    """
    match = FRAGMENT_RE.search(urlsplit(url).path)
    return match.group(1) if match else None


def resolve_fragment(url: str, rng=None) -> int:
    """Packed value for the code point a URL names.

    Missing, invalid or out-of-range fragments fall back to a random
    sample.
    """
    fragment = extract_fragment(url)
    packed = encode_code_point(fragment) if fragment else None
    return packed if packed is not None else random_packed(rng)
