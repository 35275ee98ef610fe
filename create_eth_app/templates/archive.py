from __future__ import annotations

import logging
import os
import tarfile
import urllib.parse

import requests

from create_eth_app.config import (
    github_host,
    http_timeout_s,
    template_branch,
    template_repo,
    template_repo_name,
)
from create_eth_app.networking import is_url_ok

logger = logging.getLogger(__name__)

# <archive-root>/templates/<framework>/<template>
_STRIP_COMPONENTS = 4


def template_archive_url() -> str:
    return f"https://codeload.{github_host()}/{template_repo()}/tar.gz/{template_branch()}"


def template_archive_root() -> str:
    # GitHub names the top-level directory `<repo>-<ref>`, with slashes in the
    # ref replaced by dashes.
    return f"{template_repo_name()}-{template_branch().replace('/', '-')}"


def template_contents_url(framework: str, name: str) -> str:
    encoded = urllib.parse.quote(name, safe="")
    return (
        f"https://api.{github_host()}/repos/{template_repo()}/contents/templates/"
        f"{framework}/{encoded}?ref={template_branch()}"
    )


def has_template(
    framework: str, name: str, *, session: requests.Session | None = None
) -> bool:
    return is_url_ok(template_contents_url(framework, name), session=session)


def _strip_member_name(name: str) -> str:
    if name.startswith("/"):
        raise ValueError("tar contains absolute path")
    parts = [p for p in name.split("/") if p not in ("", ".")]
    if ".." in parts:
        raise ValueError("tar contains parent traversal")
    return "/".join(parts[_STRIP_COMPONENTS:])


def download_and_extract_template(
    root: str | os.PathLike[str],
    framework: str,
    name: str,
    *,
    session: requests.Session | None = None,
) -> list[str]:
    """Stream the template tarball and extract one template into `root`.

    Only members under `<archive-root>/templates/<framework>/<name>` are
    extracted, with the first four path components stripped. Returns the
    relative paths of the extracted members in archive order.
    """
    http = session or requests.Session()
    url = template_archive_url()
    prefix = f"{template_archive_root()}/templates/{framework}/{name}"
    dest = os.fspath(root)

    logger.info("Downloading template %s/%s from %s", framework, name, url)
    extracted: list[str] = []
    with http.get(url, stream=True, timeout=http_timeout_s()) as res:
        res.raise_for_status()
        with tarfile.open(fileobj=res.raw, mode="r|gz") as tf:
            for member in tf:
                if member.name.rstrip("/") != prefix and not member.name.startswith(prefix + "/"):
                    continue
                stripped = _strip_member_name(member.name)
                if not stripped:
                    continue
                member.name = stripped
                tf.extract(member, dest, filter="data")
                extracted.append(stripped)
                logger.debug("Extracted %s", stripped)

    if not extracted:
        logger.warning("No files found for template %s/%s in %s", framework, name, url)
    else:
        logger.info("Extracted %d entries into %s", len(extracted), dest)
    return extracted
