from __future__ import annotations

import argparse
import logging
import sys
import tarfile

import requests
from pybars import PybarsError

from create_eth_app.create_app import DEFAULT_FRAMEWORK, DEFAULT_TEMPLATE, create_app
from create_eth_app.errors import CreateEthAppError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="create-eth-app",
        description="Fill an app skeleton with a framework template",
    )
    parser.add_argument(
        "app_path",
        type=str,
        help="Directory holding the .hbs skeleton files",
    )
    parser.add_argument(
        "--framework",
        "-f",
        type=str,
        default=DEFAULT_FRAMEWORK,
        help=f"Framework to use (default: {DEFAULT_FRAMEWORK})",
    )
    parser.add_argument(
        "--template",
        "-t",
        type=str,
        default=DEFAULT_TEMPLATE,
        help=f"Template of the framework to use (default: {DEFAULT_TEMPLATE})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        root = create_app(args.app_path, args.framework, args.template)
    except CreateEthAppError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except requests.RequestException as exc:
        print(f"Error: failed to download template: {exc}", file=sys.stderr)
        return 1
    except (OSError, ValueError, tarfile.TarError, PybarsError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Success! Created app at {root}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
