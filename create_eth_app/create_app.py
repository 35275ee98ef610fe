from __future__ import annotations

import logging
import os
from pathlib import Path

import requests

from create_eth_app.errors import TemplateNotFoundError
from create_eth_app.templates.archive import has_template
from create_eth_app.templates.materialize import parse_template
from create_eth_app.templates.registry import bespoke_files_for

logger = logging.getLogger(__name__)

DEFAULT_FRAMEWORK = "react"
DEFAULT_TEMPLATE = "compound"


def create_app(
    app_path: str | os.PathLike[str],
    framework: str = DEFAULT_FRAMEWORK,
    template: str = DEFAULT_TEMPLATE,
    *,
    session: requests.Session | None = None,
) -> Path:
    """Fill an app skeleton with the given framework template.

    `app_path` must already hold the `.hbs` skeleton files. The template is
    looked up in the local registry first and then on the remote, so an
    unpublished template fails before the archive is downloaded.
    """
    bespoke_files_for(framework, template)

    root = Path(app_path).resolve()
    if not root.exists():
        raise FileNotFoundError(f"App directory does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"App path is not a directory: {root}")

    http = session or requests.Session()
    if not has_template(framework, template, session=http):
        raise TemplateNotFoundError(template, framework=framework)

    logger.info("Creating %s app from template %s in %s", framework, template, root)
    parse_template(root, framework, template, session=http)
    return root
