"""Registry snapshot source.

Reads every offering the registry already knows about, following
``next_url`` paging, with plans inlined via ``inline-relations-depth``.
"""

from __future__ import annotations

import logging
from typing import Any

from brokersync.contracts.catalog import Service, ServicePlan
from brokersync.contracts.exceptions import RegistryError
from brokersync.contracts.transport import HttpHandler
from brokersync.replay.replayer import SERVICES_URI

logger = logging.getLogger(__name__)

_FIRST_PAGE = f"{SERVICES_URI}?inline-relations-depth=1"
_RESERVED = frozenset({"guid", "plans", "service_guid"})


class RegistryReader:
    def __init__(self, http_handler: HttpHandler) -> None:
        self._http = http_handler

    def fetch_services(self) -> list[Service]:
        services: list[Service] = []
        next_url: str | None = _FIRST_PAGE
        while next_url:
            page = self._fetch_page(next_url)
            for resource in page.get("resources") or []:
                try:
                    services.append(_service_from_resource(resource))
                except (KeyError, TypeError, ValueError) as exc:
                    logger.warning("Skipping unreadable registry service resource: %s", exc)
            next_url = page.get("next_url")
        logger.debug("Read %d registered service offerings", len(services))
        return services

    def _fetch_page(self, uri: str) -> dict[str, Any]:
        response = self._http.request("GET", uri)
        if response.error is not None:
            raise RegistryError(f"failed to read registry services from {uri}: {response.error}")
        if not response.ok:
            raise RegistryError(
                f"failed to read registry services from {uri}, status={response.status}",
                status=response.status,
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise RegistryError(f"invalid JSON from {uri}") from exc
        if not isinstance(payload, dict):
            raise RegistryError(f"unexpected payload from {uri}")
        return payload


def _service_from_resource(resource: dict[str, Any]) -> Service:
    """Map one registry resource; raises ``KeyError``/``TypeError``/``ValueError`` when it cannot be."""
    entity = dict(resource["entity"])
    plans = [_plan_from_resource(plan) for plan in entity.pop("service_plans", None) or []]
    fields = _fields(entity)
    # A registry record without a provider is not the same offering as a "core" one.
    fields["provider"] = entity.get("provider")
    return Service(**fields, guid=_guid(resource), plans=plans)


def _plan_from_resource(resource: dict[str, Any]) -> ServicePlan:
    return ServicePlan(**_fields(resource["entity"]), guid=_guid(resource))


def _fields(entity: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in entity.items() if value is not None and key not in _RESERVED}


def _guid(resource: dict[str, Any]) -> str:
    guid = resource["metadata"]["guid"]
    if not isinstance(guid, str) or not guid:
        raise ValueError(f"resource {resource['metadata'].get('url')!r} has no metadata.guid")
    return guid
