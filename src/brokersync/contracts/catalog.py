"""Catalog contracts: service offerings and their plans."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServicePlan(BaseModel):
    name: str
    unique_id: str | None = None
    guid: str | None = None
    description: str | None = None
    free: bool = True
    public: bool = True
    extra: str | None = None

    def same_attributes(self, other: ServicePlan) -> bool:
        """True when every registry-visible attribute except identifiers is equal."""
        return self._attributes() == other._attributes()

    def add_payload(self, service_guid: str) -> dict[str, Any]:
        payload = self.model_dump(exclude={"guid"}, exclude_none=True)
        payload["service_guid"] = service_guid
        return payload

    def update_payload(self, service_guid: str) -> dict[str, Any]:
        """Cleared attributes are sent as explicit nulls so the registry drops them too."""
        payload = self._attributes()
        payload["service_guid"] = service_guid
        return payload

    def _attributes(self) -> dict[str, Any]:
        return self.model_dump(exclude={"guid", "unique_id"})


class Service(BaseModel):
    label: str
    version: str
    provider: str | None = "core"
    unique_id: str | None = None
    guid: str | None = None
    description: str | None = None
    url: str | None = None
    active: bool = True
    bindable: bool = True
    tags: list[str] = Field(default_factory=list)
    documentation_url: str | None = None
    info_url: str | None = None
    extra: str | None = None
    plans: list[ServicePlan] = Field(default_factory=list)

    @property
    def identity_tuple(self) -> tuple[str, str, str | None]:
        return (self.label, self.version, self.provider)

    def same_tuple(self, other: Service) -> bool:
        return self.identity_tuple == other.identity_tuple

    def to_payload(self) -> dict[str, Any]:
        """Offering body for ``POST /v2/services``: all attributes except guid and plans."""
        return self.model_dump(exclude={"guid", "plans"}, exclude_none=True)

    def update_payload(self) -> dict[str, Any]:
        """Offering body for ``PUT /v2/services/{guid}``.

        The unique id is immutable remotely. Cleared attributes are sent as
        explicit nulls so the registry drops them too.
        """
        return self.model_dump(exclude={"guid", "plans", "unique_id"})

    def describe(self) -> str:
        label, version, provider = self.identity_tuple
        return f"{label}-{version} (provider={provider}, unique_id={self.unique_id})"
