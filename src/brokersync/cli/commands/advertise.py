"""Advertise command formatting."""

from __future__ import annotations

import argparse

from brokersync.cli.common import plural
from brokersync.config import load_config
from brokersync.contracts.changes import AdvertiseResult
from brokersync.contracts.config import AdvertiserConfig
from brokersync.sdk import BrokerSync


def format_advertise_summary(result: AdvertiseResult, config: AdvertiserConfig) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    summary = result.summary

    lines = [
        "",
        f"brokersync - advertise complete ({mode})",
        "",
        f"  Registry:  {config.registry_url}",
        f"  Catalog:   {config.catalog_path}",
        "",
        f"  Offerings: {result.active} active, {result.disabled} disabled, {result.new} new",
        f"  Created:   {plural(summary.offerings_created, 'offering')}, {plural(summary.plans_added, 'plan')}",
        f"  Updated:   {plural(summary.offerings_updated, 'offering')}, {plural(summary.plans_updated, 'plan')}",
    ]
    if summary.offerings_failed or summary.plans_failed:
        failed = f"{plural(summary.offerings_failed, 'offering')}, {plural(summary.plans_failed, 'plan')}"
        lines.append(f"  Failed:    {failed}")

    if result.dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")

    lines.append("")
    return "\n".join(lines)


def run_advertise(args: argparse.Namespace) -> AdvertiseResult:
    config = load_config(args.config)

    if not args.verbose:
        from brokersync.cli.progress.rich import RichReplayProgress

        with RichReplayProgress() as progress, BrokerSync.from_config(config, progress=progress) as bs:
            result = bs.advertise(dry_run=args.dry_run)
    else:
        with BrokerSync.from_config(config) as bs:
            result = bs.advertise(dry_run=args.dry_run)

    print(format_advertise_summary(result, config))
    return result


__all__ = ["format_advertise_summary", "run_advertise"]
