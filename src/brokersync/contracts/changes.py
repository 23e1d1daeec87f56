"""Derived, per-pass reconciliation and replay contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from brokersync.contracts.catalog import Service, ServicePlan


class ChangeSet(BaseModel):
    plans_to_add: list[ServicePlan] = Field(default_factory=list)
    plans_to_update: list[ServicePlan] = Field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.plans_to_add and not self.plans_to_update


class Classification(BaseModel):
    active_services: list[Service] = Field(default_factory=list)
    new_services: list[Service] = Field(default_factory=list)
    inactive_services: list[Service] = Field(default_factory=list)


class ServiceReplayState(StrEnum):
    PENDING = "pending"
    OFFERING_SUBMITTED = "offering_submitted"
    PLANS_PROCESSED = "plans_processed"
    PLANS_SKIPPED = "plans_skipped"


class ServiceOutcome(BaseModel):
    label: str
    guid: str | None = None
    created: bool = False
    state: ServiceReplayState = ServiceReplayState.PENDING
    plans_added: int = 0
    plans_updated: int = 0
    plans_failed: int = 0


class ReplaySummary(BaseModel):
    outcomes: list[ServiceOutcome] = Field(default_factory=list)

    @property
    def offerings_created(self) -> int:
        return sum(1 for o in self.outcomes if o.created and o.guid is not None)

    @property
    def offerings_updated(self) -> int:
        return sum(1 for o in self.outcomes if not o.created and o.guid is not None)

    @property
    def offerings_failed(self) -> int:
        return sum(1 for o in self.outcomes if o.guid is None)

    @property
    def plans_added(self) -> int:
        return sum(o.plans_added for o in self.outcomes)

    @property
    def plans_updated(self) -> int:
        return sum(o.plans_updated for o in self.outcomes)

    @property
    def plans_failed(self) -> int:
        return sum(o.plans_failed for o in self.outcomes)


class AdvertiseResult(BaseModel):
    active: int
    disabled: int
    new: int
    summary: ReplaySummary = Field(default_factory=ReplaySummary)
    dry_run: bool = False
