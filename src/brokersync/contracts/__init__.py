"""Public contracts for brokersync."""

from brokersync.contracts.catalog import Service, ServicePlan
from brokersync.contracts.changes import (
    AdvertiseResult,
    ChangeSet,
    Classification,
    ReplaySummary,
    ServiceOutcome,
    ServiceReplayState,
)
from brokersync.contracts.config import AdvertiserConfig
from brokersync.contracts.exceptions import (
    AuthenticationError,
    BrokerSyncError,
    CatalogLoadError,
    ConfigError,
    RegistryError,
)
from brokersync.contracts.transport import HttpHandler, HttpResponse

__all__ = [
    "AdvertiseResult",
    "AdvertiserConfig",
    "AuthenticationError",
    "BrokerSyncError",
    "CatalogLoadError",
    "ChangeSet",
    "Classification",
    "ConfigError",
    "HttpHandler",
    "HttpResponse",
    "RegistryError",
    "ReplaySummary",
    "Service",
    "ServiceOutcome",
    "ServicePlan",
    "ServiceReplayState",
]
