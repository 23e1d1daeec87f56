"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from brokersync.cli.commands.advertise import run_advertise
from brokersync.cli.commands.diff import run_diff
from brokersync.cli.parser import build_parser
from brokersync.contracts.exceptions import AuthenticationError, CatalogLoadError, ConfigError, RegistryError


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "advertise":
            run_advertise(args)
        elif args.command == "diff":
            run_diff(args)
        return 0
    except (ConfigError, CatalogLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, RegistryError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
