"""Auth module public exports."""

from brokersync.auth.base import TokenResolver
from brokersync.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
