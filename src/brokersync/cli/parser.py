"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("brokersync")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="brokersync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    advertise_parser = subparsers.add_parser("advertise", help="Advertise the broker catalog to the registry")
    advertise_parser.add_argument("--config", default="./brokersync.json", help="Path to brokersync.json")
    mode = advertise_parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--dry-run", action="store_true", help="Preview mode")
    mode.add_argument("--apply", action="store_true", help="Apply mode")
    advertise_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    diff_parser = subparsers.add_parser("diff", help="Show catalog changes without touching the registry")
    diff_parser.add_argument("--config", default="./brokersync.json", help="Path to brokersync.json")
    diff_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
