"""Template registry, download, rendering and materialization."""

from create_eth_app.templates.materialize import parse_template  # noqa: F401
