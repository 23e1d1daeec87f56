"""Identity predicates used to pair catalog entries with registry records.

Matching is two-tier: a stable unique id wins; otherwise entries fall back to
their natural key (``label``/``version``/``provider`` for offerings, ``name``
for plans).
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Sequence
from typing import TypeVar

from brokersync.contracts.catalog import Service, ServicePlan

T = TypeVar("T", Service, ServicePlan)


def unique_id_match(candidate: Service | ServicePlan, registered: Service | ServicePlan) -> bool:
    if not candidate.unique_id:
        return False
    return candidate.unique_id == registered.unique_id


def service_tuple_match(candidate: Service, registered: Service) -> bool:
    return candidate.same_tuple(registered)


def plan_name_match(candidate: ServicePlan, registered: ServicePlan) -> bool:
    return candidate.name == registered.name


def find_unclaimed(
    candidate: T,
    registered: Sequence[T],
    claimed: Collection[int],
    predicate: Callable[[T, T], bool],
) -> int | None:
    """Index of the first unclaimed *registered* entry satisfying *predicate*."""
    for index, entry in enumerate(registered):
        if index in claimed:
            continue
        if predicate(candidate, entry):
            return index
    return None
