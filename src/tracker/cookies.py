"""Read tracker session cookies from the local browser stores."""

from __future__ import annotations

import logging
from http.cookiejar import Cookie
from typing import Callable, Iterable, List

import browser_cookie3

LOGGER = logging.getLogger(__name__)

CookieSource = Callable[[str], Iterable[Cookie]]


def _browser_cookies(domain: str) -> Iterable[Cookie]:
    return browser_cookie3.load(domain_name=domain)


def load_tracker_cookies(domain: str, source: CookieSource | None = None) -> List[Cookie]:
    """Return browser cookies whose domain ends with ``domain``."""
    source = source or _browser_cookies
    cookies = [cookie for cookie in source(domain) if cookie.domain.endswith(domain)]
    if not cookies:
        LOGGER.warning("Got 0 cookies for %s; tracker request will be unauthenticated.", domain)
    else:
        LOGGER.debug("Loaded %s cookies for %s", len(cookies), domain)
    return cookies


def cookie_header(cookies: Iterable[Cookie]) -> str:
    """Serialize cookies into a single ``Cookie`` header value."""
    return "; ".join(f"{cookie.name}={cookie.value}" for cookie in cookies)
