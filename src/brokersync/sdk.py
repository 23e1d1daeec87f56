"""SDK composition root for brokersync."""

from __future__ import annotations

from types import TracebackType

from brokersync.advertiser import ServiceAdvertiser
from brokersync.auth import create_token_resolver
from brokersync.catalog import load_catalog
from brokersync.contracts.changes import AdvertiseResult
from brokersync.contracts.config import AdvertiserConfig
from brokersync.contracts.transport import HttpHandler
from brokersync.registry import RegistryReader
from brokersync.replay.progress import ReplayProgress
from brokersync.transport.dry_run import DryRunHttpHandler
from brokersync.transport.http import RegistryHttpHandler


class BrokerSync:
    """brokersync SDK public API.

    Reads the catalog and the registry snapshot fresh for every pass; nothing
    is carried between passes.
    """

    def __init__(
        self,
        *,
        config: AdvertiserConfig,
        http_handler: HttpHandler,
        progress: ReplayProgress | None = None,
    ) -> None:
        self._config = config
        self._http = http_handler
        self._progress = progress

    @classmethod
    def from_config(cls, config: AdvertiserConfig, *, progress: ReplayProgress | None = None) -> BrokerSync:
        token = create_token_resolver(config).resolve()
        http_handler = RegistryHttpHandler(base_url=config.registry_url, token=token, timeout=config.timeout)
        return cls(config=config, http_handler=http_handler, progress=progress)

    def __enter__(self) -> BrokerSync:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if isinstance(self._http, RegistryHttpHandler):
            self._http.close()

    def build_advertiser(self, *, dry_run: bool = False) -> ServiceAdvertiser:
        catalog_services = load_catalog(self._config.catalog_path)
        registered_services = RegistryReader(self._http).fetch_services()
        writer: HttpHandler = DryRunHttpHandler() if dry_run else self._http
        return ServiceAdvertiser(
            catalog_services=catalog_services,
            registered_services=registered_services,
            http_handler=writer,
            active=self._config.active,
            progress=self._progress,
        )

    def advertise(self, *, dry_run: bool = False) -> AdvertiseResult:
        result = self.build_advertiser(dry_run=dry_run).advertise()
        return result.model_copy(update={"dry_run": dry_run})
