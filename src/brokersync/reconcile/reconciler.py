"""Classify a broker catalog against the registry and diff plans."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from brokersync.contracts.catalog import Service, ServicePlan
from brokersync.contracts.changes import ChangeSet, Classification
from brokersync.reconcile.matching import (
    find_unclaimed,
    plan_name_match,
    service_tuple_match,
    unique_id_match,
)

logger = logging.getLogger(__name__)


class Reconciler:
    """Pairs catalog offerings with registry records.

    Inputs are never mutated: matched services and plans are returned as
    copies carrying the registry-assigned guid.
    """

    def classify(self, catalog_services: Sequence[Service], registered_services: Sequence[Service]) -> Classification:
        result = Classification()
        claimed: set[int] = set()

        for service in catalog_services:
            index = find_unclaimed(service, registered_services, claimed, unique_id_match)
            if index is None:
                index = find_unclaimed(service, registered_services, claimed, service_tuple_match)
                if index is not None and service.unique_id:
                    registered = registered_services[index]
                    if service.unique_id != registered.unique_id:
                        logger.warning(
                            "Service with unique id %s in broker catalog matched service with unique id %s "
                            "from registry using label-version-provider tuple.",
                            service.unique_id,
                            registered.unique_id,
                        )

            if index is None:
                result.new_services.append(service.model_copy(update={"guid": None}))
                continue

            claimed.add(index)
            result.active_services.append(service.model_copy(update={"guid": registered_services[index].guid}))

        result.inactive_services = [
            registered for index, registered in enumerate(registered_services) if index not in claimed
        ]
        return result

    def compute_change_set(self, catalog_service: Service, registered_service: Service | None) -> ChangeSet:
        if registered_service is None:
            return ChangeSet(plans_to_add=list(catalog_service.plans))

        change_set = ChangeSet()
        registered_plans = registered_service.plans
        claimed: set[int] = set()

        for plan in catalog_service.plans:
            index = find_unclaimed(plan, registered_plans, claimed, unique_id_match)
            if index is None:
                index = find_unclaimed(plan, registered_plans, claimed, plan_name_match)
            if index is None:
                change_set.plans_to_add.append(plan)
                continue

            claimed.add(index)
            registered_plan = registered_plans[index]
            if not plan.same_attributes(registered_plan):
                change_set.plans_to_update.append(_with_guid(plan, registered_plan.guid))

        return change_set


def _with_guid(plan: ServicePlan, guid: str | None) -> ServicePlan:
    return plan.model_copy(update={"guid": guid})
