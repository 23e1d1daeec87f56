"""Shared test fixtures for brokersync tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from brokersync.contracts.catalog import Service, ServicePlan
from brokersync.contracts.config import AdvertiserConfig
from tests.fakes.http_handler import FakeHttpHandler


@pytest.fixture
def http() -> FakeHttpHandler:
    return FakeHttpHandler()


@pytest.fixture
def small_plan() -> ServicePlan:
    """A minimal plan as the broker advertises it."""
    return ServicePlan(name="small", unique_id="plan-small", description="Small instance")


@pytest.fixture
def db_service(small_plan: ServicePlan) -> Service:
    """A catalog offering with one plan."""
    return Service(
        label="db",
        version="1.0",
        provider="core",
        unique_id="svc-db",
        description="Database",
        plans=[small_plan],
    )


@pytest.fixture
def registered_db(db_service: Service) -> Service:
    """The registry's copy of ``db_service`` with guids assigned."""
    plans = [plan.model_copy(update={"guid": f"pg-{plan.name}"}) for plan in db_service.plans]
    return db_service.model_copy(update={"guid": "g-db", "plans": plans})


@pytest.fixture
def catalog_file(tmp_path: Path, db_service: Service) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"services": [db_service.model_dump(mode="json")]}), encoding="utf-8")
    return path


@pytest.fixture
def sample_config(catalog_file: Path) -> AdvertiserConfig:
    return AdvertiserConfig(
        registry_url="https://registry.example.com",
        catalog_path=catalog_file,
        auth="token",
        token="secret",
    )
