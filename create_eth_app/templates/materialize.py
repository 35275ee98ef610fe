from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Any

import requests
from pydantic import TypeAdapter

from create_eth_app.templates.archive import download_and_extract_template
from create_eth_app.templates.registry import STANDARD_FILES, bespoke_files_for
from create_eth_app.templates.renderer import render_template

logger = logging.getLogger(__name__)

CONTEXT_DIR_NAME = "context"
CONTEXT_SUFFIX = ".context"
TEMPLATE_SUFFIX = ".hbs"

TemplateContext = dict[str, Any]

_context_adapter: TypeAdapter[TemplateContext] = TypeAdapter(TemplateContext)


def load_template_context(path: str | os.PathLike[str]) -> TemplateContext:
    """Decode a `.context` file. The top-level JSON value must be an object."""
    return _context_adapter.validate_json(Path(path).read_bytes())


def parse_template(
    app_path: str | os.PathLike[str],
    framework: str,
    template: str,
    *,
    session: requests.Session | None = None,
) -> None:
    """Materialize `framework`/`template` into the app at `app_path`.

    Every standard file is rendered from its `.hbs` sibling with the matching
    `.context` file of the downloaded template, and the bespoke files of the
    template are moved into place. Errors propagate; on failure the scratch
    `context/` directory and any files written so far are left behind.
    """
    bespoke_files = bespoke_files_for(framework, template)

    app_root = Path(app_path)
    context_root = app_root / CONTEXT_DIR_NAME
    context_root.mkdir(parents=True, exist_ok=True)
    download_and_extract_template(context_root, framework, template, session=session)

    for standard_file in STANDARD_FILES:
        context = load_template_context(context_root / (standard_file + CONTEXT_SUFFIX))

        hbs_path = app_root / (standard_file + TEMPLATE_SUFFIX)
        contents = render_template(hbs_path.read_text(encoding="utf-8"), context)

        (app_root / standard_file).write_text(contents, encoding="utf-8", newline="")
        hbs_path.unlink()
        logger.debug("Rendered %s", standard_file)

    for bespoke_file in bespoke_files:
        target = app_root / bespoke_file
        target.parent.mkdir(parents=True, exist_ok=True)
        # An existing target is replaced rather than rejected.
        if target.is_file():
            target.unlink()
        shutil.move(os.fspath(context_root / bespoke_file), os.fspath(target))
        logger.debug("Moved %s", bespoke_file)

    shutil.rmtree(context_root)
    logger.info("Materialized template %s/%s in %s", framework, template, app_root)
