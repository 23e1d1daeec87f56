"""One reconciliation pass: classify the catalog, diff plans, replay."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from brokersync.contracts.catalog import Service
from brokersync.contracts.changes import AdvertiseResult, ChangeSet, Classification
from brokersync.contracts.transport import HttpHandler
from brokersync.reconcile import Reconciler
from brokersync.replay import Replayer, ReplayProgress

logger = logging.getLogger(__name__)


class ServiceAdvertiser:
    """Makes the broker catalog authoritative in the registry.

    Classification happens on construction so that the counts are readable
    before :meth:`advertise` runs. Registry records left unclaimed by the
    catalog are reported as disabled and never modified.

    ``active=False`` marks the reconciler itself as disabled: it then reports
    zero active offerings and counts every registry record as disabled.
    """

    def __init__(
        self,
        *,
        catalog_services: Sequence[Service],
        registered_services: Sequence[Service],
        http_handler: HttpHandler,
        active: bool = True,
        progress: ReplayProgress | None = None,
        reconciler: Reconciler | None = None,
    ) -> None:
        self._catalog_services = list(catalog_services)
        self._registered_services = list(registered_services)
        self._active = active
        self._reconciler = reconciler or Reconciler()
        self._replayer = Replayer(http_handler, progress=progress)
        self._classification = self._reconciler.classify(self._catalog_services, self._registered_services)

    @property
    def classification(self) -> Classification:
        return self._classification

    @property
    def active_services(self) -> list[Service]:
        return self._classification.active_services

    @property
    def new_services(self) -> list[Service]:
        return self._classification.new_services

    @property
    def inactive_services(self) -> list[Service]:
        return self._classification.inactive_services

    def active_count(self) -> int:
        return len(self._catalog_services) if self._active else 0

    def disabled_count(self) -> int:
        return len(self.inactive_services) if self._active else len(self._registered_services)

    def change_sets(self) -> tuple[list[tuple[Service, ChangeSet]], list[tuple[Service, ChangeSet]]]:
        """Change sets for active and new services, in replay order."""
        registered_by_guid: dict[str, Service] = {}
        for registered in self._registered_services:
            if registered.guid:
                registered_by_guid.setdefault(registered.guid, registered)

        active: list[tuple[Service, ChangeSet]] = []
        for service in self.active_services:
            change_set = self._reconciler.compute_change_set(service, registered_by_guid.get(service.guid or ""))
            logger.debug("service_change_set for %s = %r", service.guid, change_set)
            active.append((service, change_set))

        new: list[tuple[Service, ChangeSet]] = []
        for service in self.new_services:
            change_set = self._reconciler.compute_change_set(service, None)
            logger.debug("plans_to_add for new offering %s = %r", service.describe(), change_set.plans_to_add)
            new.append((service, change_set))

        return active, new

    def advertise(self) -> AdvertiseResult:
        logger.debug("Registered in registry: %r", self._registered_services)
        logger.debug("Current catalog: %r", self._catalog_services)

        active, new = self.change_sets()
        summary = self._replayer.replay(active, new)

        logger.info(
            "Found %d active, %d disabled and %d new service offerings",
            len(self.active_services),
            self.disabled_count(),
            len(self.new_services),
        )
        return AdvertiseResult(
            active=len(self.active_services),
            disabled=self.disabled_count(),
            new=len(self.new_services),
            summary=summary,
        )
