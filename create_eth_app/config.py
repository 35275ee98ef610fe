from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

_DEFAULT_GITHUB_HOST = "github.com"
_DEFAULT_TEMPLATE_REPO = "paulrberg/create-eth-app"
_DEFAULT_TEMPLATE_BRANCH = "refactor-templating-system"
_DEFAULT_HTTP_TIMEOUT_S = 30


def _env_int(name: str, default: int) -> int:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return int(default)
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r, using default %d", name, raw, default)
        return int(default)


def github_host() -> str:
    return (
        (os.environ.get("CREATE_ETH_APP_GITHUB_HOST") or _DEFAULT_GITHUB_HOST)
        .strip()
        .strip("/")
    ) or _DEFAULT_GITHUB_HOST


def template_repo() -> str:
    """Return the `<org>/<repo>` the templates are downloaded from."""
    return (
        (os.environ.get("CREATE_ETH_APP_TEMPLATE_REPO") or _DEFAULT_TEMPLATE_REPO)
        .strip()
        .strip("/")
    ) or _DEFAULT_TEMPLATE_REPO


def template_repo_name() -> str:
    return template_repo().rsplit("/", 1)[-1]


def template_branch() -> str:
    return (
        os.environ.get("CREATE_ETH_APP_TEMPLATE_BRANCH") or _DEFAULT_TEMPLATE_BRANCH
    ).strip() or _DEFAULT_TEMPLATE_BRANCH


def http_timeout_s() -> int:
    return max(1, _env_int("CREATE_ETH_APP_HTTP_TIMEOUT_S", _DEFAULT_HTTP_TIMEOUT_S))
