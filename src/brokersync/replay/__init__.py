"""Registry replay."""

from brokersync.replay.progress import NullReplayProgress, ReplayProgress
from brokersync.replay.replayer import SERVICE_PLANS_URI, SERVICES_URI, Replayer

__all__ = ["SERVICES_URI", "SERVICE_PLANS_URI", "NullReplayProgress", "ReplayProgress", "Replayer"]
