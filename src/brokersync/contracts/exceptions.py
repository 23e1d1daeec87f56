"""Exception hierarchy for brokersync.

These cover setup failures that happen before a reconciliation pass can
start. Failures inside a pass are logged and absorbed by the replayer.
"""

from __future__ import annotations


class BrokerSyncError(Exception):
    """Base exception for all brokersync errors."""


class ConfigError(BrokerSyncError):
    """Configuration loading or validation failure."""


class CatalogLoadError(BrokerSyncError):
    """Broker catalog file loading/parsing failure."""


class AuthenticationError(BrokerSyncError):
    """Registry token could not be resolved."""


class RegistryError(BrokerSyncError):
    """Registry snapshot could not be read.

    Attributes:
        status: HTTP status of the failing response, if one was received.
    """

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status
