"""Diff command formatting."""

from __future__ import annotations

import argparse

from brokersync.advertiser import ServiceAdvertiser
from brokersync.cli.common import format_comma_or_none
from brokersync.config import load_config
from brokersync.sdk import BrokerSync


def format_diff(advertiser: ServiceAdvertiser) -> str:
    active, new = advertiser.change_sets()
    lines = ["", "brokersync - catalog diff", ""]

    for heading, pairs in (("Active", active), ("New", new)):
        lines.append(f"  {heading} offerings: {len(pairs)}")
        for service, change_set in pairs:
            lines.append(f"    {service.describe()} guid={service.guid or '-'}")
            lines.append(f"      add:    {format_comma_or_none([plan.name for plan in change_set.plans_to_add])}")
            lines.append(
                f"      update: {format_comma_or_none([plan.name for plan in change_set.plans_to_update])}"
            )
        lines.append("")

    disabled = [f"{service.describe()} guid={service.guid}" for service in advertiser.inactive_services]
    lines.append(f"  Disabled:  {format_comma_or_none(disabled)}")
    lines.append("")
    return "\n".join(lines)


def run_diff(args: argparse.Namespace) -> ServiceAdvertiser:
    config = load_config(args.config)
    with BrokerSync.from_config(config) as bs:
        advertiser = bs.build_advertiser(dry_run=True)
    print(format_diff(advertiser))
    return advertiser


__all__ = ["format_diff", "run_diff"]
