"""Observer hooks fired while offerings are replayed against the registry."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ReplayProgress(ABC):
    """Receives one ``phase_start``, an ``item_done`` per offering, then ``phase_done`` or ``phase_error``."""

    @abstractmethod
    def phase_start(self, phase: str, total: int) -> None:
        """*total* offerings are about to be submitted."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str) -> None: ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None: ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """The pass stopped early; *error* is re-raised by the replayer afterwards."""
        ...  # pragma: no cover


class NullReplayProgress(ReplayProgress):
    def phase_start(self, phase: str, total: int) -> None:
        pass

    def item_done(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
