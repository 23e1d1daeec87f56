"""Public API surface for brokersync."""

__version__ = "0.1.0"

from brokersync.advertiser import ServiceAdvertiser
from brokersync.catalog import load_catalog
from brokersync.config import load_config
from brokersync.contracts import (
    AdvertiseResult,
    AdvertiserConfig,
    AuthenticationError,
    BrokerSyncError,
    CatalogLoadError,
    ChangeSet,
    Classification,
    ConfigError,
    HttpHandler,
    HttpResponse,
    RegistryError,
    ReplaySummary,
    Service,
    ServiceOutcome,
    ServicePlan,
    ServiceReplayState,
)
from brokersync.reconcile import Reconciler
from brokersync.registry import RegistryReader
from brokersync.replay import Replayer, ReplayProgress
from brokersync.sdk import BrokerSync

__all__ = [
    "AdvertiseResult",
    "AdvertiserConfig",
    "AuthenticationError",
    "BrokerSync",
    "BrokerSyncError",
    "CatalogLoadError",
    "ChangeSet",
    "Classification",
    "ConfigError",
    "HttpHandler",
    "HttpResponse",
    "Reconciler",
    "RegistryError",
    "RegistryReader",
    "ReplayProgress",
    "ReplaySummary",
    "Replayer",
    "Service",
    "ServiceAdvertiser",
    "ServiceOutcome",
    "ServicePlan",
    "ServiceReplayState",
    "__version__",
    "load_catalog",
    "load_config",
]
