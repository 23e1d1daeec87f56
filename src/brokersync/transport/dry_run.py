"""In-memory dry-run transport."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from brokersync.contracts.transport import HttpHandler, HttpResponse
from brokersync.replay.replayer import SERVICES_URI

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DryRunRequest:
    """Deterministic dry-run request log entry."""

    sequence: int
    method: str
    uri: str
    body: dict[str, Any] | None


@dataclass
class DryRunHttpHandler(HttpHandler):
    """Records registry writes instead of sending them.

    Offering creates answer with a placeholder guid so that the replayer
    walks the same plan calls it would on a live run.
    """

    requests: list[DryRunRequest] = field(default_factory=list)

    def request(self, method: str, uri: str, body: dict[str, Any] | None = None) -> HttpResponse:
        sequence = len(self.requests) + 1
        method = method.upper()
        self.requests.append(DryRunRequest(sequence=sequence, method=method, uri=uri, body=body))
        logger.debug("[dry-run] %s %s", method, uri)

        if uri == SERVICES_URI and method == "POST":
            guid = f"dry-run-service-{sequence}"
        elif uri.startswith(f"{SERVICES_URI}/"):
            guid = uri.rsplit("/", 1)[-1]
        else:
            guid = f"dry-run-{sequence}"
        status = 201 if method == "POST" else 200
        return HttpResponse(status=status, body=json.dumps({"metadata": {"guid": guid}}))
