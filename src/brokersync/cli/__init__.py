"""Command-line interface for brokersync."""

from __future__ import annotations

from brokersync.cli.app import main as main
from brokersync.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main"]
