"""Concrete token resolvers."""

from brokersync.auth.resolvers.env import EnvTokenResolver
from brokersync.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "StaticTokenResolver"]
