"""Registry HTTP transport contract."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HttpResponse:
    """Outcome of one registry request.

    Exactly one of ``error`` (no response obtained) or ``status`` is meaningful.
    """

    status: int | None = None
    body: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status is not None and 200 <= self.status <= 299

    def json(self) -> Any:
        return json.loads(self.body)


class HttpHandler(ABC):
    @abstractmethod
    def request(self, method: str, uri: str, body: dict[str, Any] | None = None) -> HttpResponse:
        """Issue *method* against registry path *uri* with a JSON *body*; never raises on transport failure."""
        ...  # pragma: no cover
