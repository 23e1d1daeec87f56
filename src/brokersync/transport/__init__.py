"""Registry transports."""

from brokersync.transport.dry_run import DryRunHttpHandler, DryRunRequest
from brokersync.transport.http import RegistryHttpHandler

__all__ = ["DryRunHttpHandler", "DryRunRequest", "RegistryHttpHandler"]
