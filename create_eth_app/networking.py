from __future__ import annotations

import logging

import requests

from create_eth_app.config import http_timeout_s

logger = logging.getLogger(__name__)


def is_url_ok(url: str, *, session: requests.Session | None = None) -> bool:
    """Return True iff a HEAD request to `url`, after redirects, answers with a 2xx status."""
    http = session or requests.Session()
    res = http.head(url, allow_redirects=True, timeout=http_timeout_s())
    ok = 200 <= res.status_code < 300
    logger.debug("HEAD %s -> %s", url, res.status_code)
    return ok
