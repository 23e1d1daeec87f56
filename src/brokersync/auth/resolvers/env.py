"""Environment token resolver."""

from __future__ import annotations

import os

from brokersync.auth.base import TokenResolver
from brokersync.contracts.exceptions import AuthenticationError

TOKEN_ENV_VAR = "BROKERSYNC_TOKEN"


class EnvTokenResolver(TokenResolver):
    def resolve(self) -> str:
        token = (os.getenv(TOKEN_ENV_VAR) or "").strip()
        if not token:
            raise AuthenticationError(f"{TOKEN_ENV_VAR} is not set or empty")
        return token
