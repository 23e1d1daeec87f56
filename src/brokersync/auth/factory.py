"""Token resolver factory."""

from __future__ import annotations

from brokersync.auth.base import TokenResolver
from brokersync.auth.resolvers.env import EnvTokenResolver
from brokersync.auth.resolvers.static import StaticTokenResolver
from brokersync.contracts.config import AdvertiserConfig
from brokersync.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: AdvertiserConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")
