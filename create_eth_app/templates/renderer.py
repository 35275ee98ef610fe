"""Render `.hbs` template files against their JSON context.

Templates are Handlebars, compiled with pybars. One block helper is
registered on top of the built-ins:

    {{{{raw-helper}}}} ... {{{{/raw-helper}}}}

The block content is emitted verbatim, which lets generated files keep their
own `{{ ... }}` syntax.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any

from pybars import Compiler

logger = logging.getLogger(__name__)

RAW_HELPER_NAME = "raw-helper"


def _raw_helper(this: Any, options: Mapping[str, Any]) -> Any:
    return options["fn"](this)


_compiler = Compiler()
_helpers: dict[str, Callable[..., Any]] = {}
_helpers_registered = False
_helpers_lock = threading.Lock()


def register_helpers() -> None:
    """Install the custom block helpers (once per process)."""
    global _helpers_registered
    if _helpers_registered:
        return
    with _helpers_lock:
        if _helpers_registered:
            return
        _helpers[RAW_HELPER_NAME] = _raw_helper
        _helpers_registered = True
        logger.debug("Registered template helper %s", RAW_HELPER_NAME)


def render_template(source: str, context: Mapping[str, Any]) -> str:
    register_helpers()
    template = _compiler.compile(source)
    return str(template(dict(context), helpers=_helpers))
