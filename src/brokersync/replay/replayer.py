"""Replay reconciliation output as registry create/update calls."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from brokersync.contracts.catalog import Service, ServicePlan
from brokersync.contracts.changes import ChangeSet, ReplaySummary, ServiceOutcome, ServiceReplayState
from brokersync.contracts.transport import HttpHandler, HttpResponse
from brokersync.replay.progress import NullReplayProgress, ReplayProgress

logger = logging.getLogger(__name__)

SERVICES_URI = "/v2/services"
SERVICE_PLANS_URI = "/v2/service_plans"

_PHASE = "Offerings"


class Replayer:
    """Sequentially submits offerings and their plan changes.

    Every failure is logged and absorbed: a failed offering call skips that
    service's plans, a failed plan call skips only that plan.
    """

    def __init__(self, http_handler: HttpHandler, *, progress: ReplayProgress | None = None) -> None:
        self._http = http_handler
        self._progress: ReplayProgress = progress or NullReplayProgress()

    def replay(
        self,
        active_services: Sequence[tuple[Service, ChangeSet]],
        new_services: Sequence[tuple[Service, ChangeSet]],
    ) -> ReplaySummary:
        summary = ReplaySummary()
        self._progress.phase_start(_PHASE, total=len(active_services) + len(new_services))
        try:
            for service, change_set in active_services:
                summary.outcomes.append(self._replay_service(service, service.guid, change_set))
                self._progress.item_done(_PHASE)
            for service, change_set in new_services:
                summary.outcomes.append(self._replay_service(service, None, change_set))
                self._progress.item_done(_PHASE)
        except BaseException as exc:
            self._progress.phase_error(_PHASE, exc)
            raise
        self._progress.phase_done(_PHASE)
        return summary

    def _replay_service(self, service: Service, guid: str | None, change_set: ChangeSet) -> ServiceOutcome:
        outcome = ServiceOutcome(label=service.label, created=guid is None)

        service_guid = self._submit_offering(service, guid)
        outcome.state = ServiceReplayState.OFFERING_SUBMITTED
        outcome.guid = service_guid
        if service_guid is None:
            outcome.state = ServiceReplayState.PLANS_SKIPPED
            return outcome

        if not service.active:
            logger.debug("Offering %s is inactive; skipping plan changes", service_guid)
            outcome.state = ServiceReplayState.PLANS_SKIPPED
            return outcome

        logger.debug(
            "Processing plans for: %s -Add: %d plans, Update: %d plans",
            service_guid,
            len(change_set.plans_to_add),
            len(change_set.plans_to_update),
        )
        for plan in change_set.plans_to_add:
            if self._add_plan(plan, service_guid):
                outcome.plans_added += 1
            else:
                outcome.plans_failed += 1
        for plan in change_set.plans_to_update:
            if self._update_plan(plan, service_guid):
                outcome.plans_updated += 1
            else:
                outcome.plans_failed += 1

        outcome.state = ServiceReplayState.PLANS_PROCESSED
        return outcome

    def _submit_offering(self, service: Service, guid: str | None) -> str | None:
        update = guid is not None
        if update:
            method, uri, payload = "PUT", f"{SERVICES_URI}/{guid}", service.update_payload()
        else:
            method, uri, payload = "POST", SERVICES_URI, service.to_payload()
        action = "update" if update else "advertise"

        logger.debug("%s service offering %s to registry: %s", action.capitalize(), service.describe(), uri)
        response = self._http.request(method, uri, payload)
        if not self._succeeded(response, f"{action} offering {service.describe()}"):
            return None

        try:
            service_guid = response.json()["metadata"]["guid"]
        except (ValueError, KeyError, TypeError):
            service_guid = None
        if not service_guid:
            logger.error(
                "Failed to %s offering %s: response (code=%s) carries no metadata.guid",
                action,
                service.describe(),
                response.status,
            )
            return None

        logger.info("Advertise offering response (code=%s): guid=%s", response.status, service_guid)
        return service_guid

    def _add_plan(self, plan: ServicePlan, service_guid: str) -> bool:
        uri = SERVICE_PLANS_URI
        logger.info("Add new plan %s via %s", plan.name, uri)
        response = self._http.request("POST", uri, plan.add_payload(service_guid))
        if not self._succeeded(response, f"add plan {plan.name}"):
            return False
        logger.info("Successfully added service plan: %s", plan.name)
        return True

    def _update_plan(self, plan: ServicePlan, service_guid: str) -> bool:
        uri = f"{SERVICE_PLANS_URI}/{plan.guid}"
        logger.info("Update plan (guid: %s) to %s via %s", plan.guid, plan.name, uri)
        response = self._http.request("PUT", uri, plan.update_payload(service_guid))
        if not self._succeeded(response, f"update plan {plan.name}"):
            return False
        logger.info("Successfully updated service plan: %s", plan.name)
        return True

    @staticmethod
    def _succeeded(response: HttpResponse, operation: str) -> bool:
        if response.error is not None:
            logger.error("Failed to %s: %s", operation, response.error)
            return False
        if not response.ok:
            logger.error("Failed to %s, status=%s", operation, response.status)
            return False
        return True
