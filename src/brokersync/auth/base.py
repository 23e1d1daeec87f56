"""Token resolver contract."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenResolver(ABC):
    @abstractmethod
    def resolve(self) -> str: ...  # pragma: no cover
