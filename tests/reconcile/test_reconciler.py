"""Tests for Reconciler classification and plan diffing."""

from __future__ import annotations

import logging

import pytest

from brokersync.contracts.catalog import Service, ServicePlan
from brokersync.reconcile import Reconciler


def _svc(label: str, *, unique_id: str | None = None, guid: str | None = None, **fields: object) -> Service:
    return Service(label=label, version="1.0", unique_id=unique_id, guid=guid, **fields)  # type: ignore[arg-type]


@pytest.fixture
def reconciler() -> Reconciler:
    return Reconciler()


class TestClassify:
    def test_unique_id_match_is_active_with_registry_guid(self, reconciler: Reconciler) -> None:
        catalog = [_svc("db", unique_id="A")]
        registry = [_svc("renamed", unique_id="A", guid="g1")]

        result = reconciler.classify(catalog, registry)

        assert [s.guid for s in result.active_services] == ["g1"]
        assert result.new_services == []
        assert result.inactive_services == []

    def test_tuple_fallback_matches_without_unique_id(self, reconciler: Reconciler) -> None:
        catalog = [_svc("db")]
        registry = [_svc("db", guid="g1")]

        result = reconciler.classify(catalog, registry)

        assert [s.guid for s in result.active_services] == ["g1"]
        assert result.inactive_services == []

    def test_tuple_fallback_with_differing_unique_id_warns(
        self, reconciler: Reconciler, caplog: pytest.LogCaptureFixture
    ) -> None:
        catalog = [_svc("db", unique_id="A")]
        registry = [_svc("db", unique_id="B", guid="g1")]

        with caplog.at_level(logging.WARNING, logger="brokersync.reconcile.reconciler"):
            result = reconciler.classify(catalog, registry)

        assert [s.guid for s in result.active_services] == ["g1"]
        assert "unique id A" in caplog.text
        assert "unique id B" in caplog.text

    def test_tuple_fallback_without_catalog_unique_id_does_not_warn(
        self, reconciler: Reconciler, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            reconciler.classify([_svc("db")], [_svc("db", unique_id="B", guid="g1")])

        assert caplog.records == []

    def test_unmatched_catalog_service_is_new_without_guid(self, reconciler: Reconciler) -> None:
        catalog = [_svc("db", unique_id="A", guid="stale")]

        result = reconciler.classify(catalog, [_svc("cache", unique_id="Z", guid="g9")])

        assert len(result.new_services) == 1
        assert result.new_services[0].guid is None
        assert [s.guid for s in result.inactive_services] == ["g9"]

    def test_unique_id_takes_priority_over_tuple(self, reconciler: Reconciler) -> None:
        catalog = [_svc("db", unique_id="A")]
        registry = [_svc("db", guid="tuple-match"), _svc("other", unique_id="A", guid="id-match")]

        result = reconciler.classify(catalog, registry)

        assert result.active_services[0].guid == "id-match"
        assert [s.guid for s in result.inactive_services] == ["tuple-match"]

    def test_first_catalog_entry_claims_tuple_match(self, reconciler: Reconciler) -> None:
        catalog = [_svc("db", description="first"), _svc("db", description="second")]
        registry = [_svc("db", guid="g1")]

        result = reconciler.classify(catalog, registry)

        assert [s.description for s in result.active_services] == ["first"]
        assert [s.description for s in result.new_services] == ["second"]
        assert result.inactive_services == []

    def test_duplicate_catalog_unique_id_binds_registry_record_once(self, reconciler: Reconciler) -> None:
        catalog = [_svc("db", unique_id="A"), _svc("cache", unique_id="A")]
        registry = [_svc("db", unique_id="A", guid="g1")]

        result = reconciler.classify(catalog, registry)

        assert [(s.label, s.guid) for s in result.active_services] == [("db", "g1")]
        assert [(s.label, s.guid) for s in result.new_services] == [("cache", None)]
        bound = [s.guid for s in result.active_services + result.new_services if s.guid is not None]
        assert len(bound) == len(set(bound))
        assert result.inactive_services == []

    def test_counts_partition_catalog_and_registry(self, reconciler: Reconciler) -> None:
        catalog = [_svc("a", unique_id="A"), _svc("b"), _svc("c", unique_id="C")]
        registry = [_svc("a", unique_id="A", guid="ga"), _svc("b", guid="gb"), _svc("x", guid="gx"), _svc("y", guid="gy")]

        result = reconciler.classify(catalog, registry)

        assert len(result.active_services) + len(result.new_services) == len(catalog)
        assert len(result.active_services) + len(result.inactive_services) == len(registry)
        assert [s.guid for s in result.inactive_services] == ["gx", "gy"]

    def test_inputs_are_not_mutated(self, reconciler: Reconciler) -> None:
        catalog = [_svc("db", unique_id="A")]
        registry = [_svc("db", unique_id="A", guid="g1")]

        reconciler.classify(catalog, registry)

        assert catalog[0].guid is None
        assert len(registry) == 1

    def test_catalog_order_is_preserved(self, reconciler: Reconciler) -> None:
        catalog = [_svc("c"), _svc("a", guid=None), _svc("b")]
        registry = [_svc("b", guid="gb"), _svc("c", guid="gc")]

        result = reconciler.classify(catalog, registry)

        assert [s.label for s in result.active_services] == ["c", "b"]
        assert [s.label for s in result.new_services] == ["a"]


class TestComputeChangeSet:
    def test_new_service_adds_every_plan(self, reconciler: Reconciler) -> None:
        plans = [ServicePlan(name="small"), ServicePlan(name="large")]

        change_set = reconciler.compute_change_set(_svc("db", plans=plans), None)

        assert [p.name for p in change_set.plans_to_add] == ["small", "large"]
        assert change_set.plans_to_update == []

    def test_changed_plan_is_updated_with_registry_guid(self, reconciler: Reconciler) -> None:
        catalog = _svc("db", unique_id="A", plans=[ServicePlan(name="p1", unique_id="P1", description="v1")])
        registry = _svc(
            "db", unique_id="A", guid="g1", plans=[ServicePlan(name="p1", unique_id="P1", guid="pg1", description="v0")]
        )

        change_set = reconciler.compute_change_set(catalog, registry)

        assert change_set.plans_to_add == []
        assert [(p.name, p.guid) for p in change_set.plans_to_update] == [("p1", "pg1")]
        assert catalog.plans[0].guid is None

    def test_identical_plans_are_omitted(self, reconciler: Reconciler) -> None:
        plan = ServicePlan(name="p1", unique_id="P1", description="same")
        registry = _svc("db", guid="g1", plans=[plan.model_copy(update={"guid": "pg1"})])

        change_set = reconciler.compute_change_set(_svc("db", plans=[plan]), registry)

        assert change_set.empty

    def test_plan_name_fallback(self, reconciler: Reconciler) -> None:
        catalog = _svc("db", plans=[ServicePlan(name="small", unique_id="new-id", free=False)])
        registry = _svc("db", guid="g1", plans=[ServicePlan(name="small", unique_id="old-id", guid="pg1")])

        change_set = reconciler.compute_change_set(catalog, registry)

        assert change_set.plans_to_add == []
        assert [p.guid for p in change_set.plans_to_update] == ["pg1"]

    def test_unknown_plan_is_added(self, reconciler: Reconciler) -> None:
        catalog = _svc("db", plans=[ServicePlan(name="small"), ServicePlan(name="large", unique_id="L")])
        registry = _svc("db", guid="g1", plans=[ServicePlan(name="small", guid="pg1")])

        change_set = reconciler.compute_change_set(catalog, registry)

        assert [p.name for p in change_set.plans_to_add] == ["large"]
        assert change_set.plans_to_update == []

    def test_registry_plan_binds_to_one_catalog_plan(self, reconciler: Reconciler) -> None:
        catalog = _svc("db", plans=[ServicePlan(name="small"), ServicePlan(name="small", description="dup")])
        registry = _svc("db", guid="g1", plans=[ServicePlan(name="small", guid="pg1")])

        change_set = reconciler.compute_change_set(catalog, registry)

        assert [p.description for p in change_set.plans_to_add] == ["dup"]
        assert change_set.plans_to_update == []

    def test_diff_is_stable_once_synced(self, reconciler: Reconciler) -> None:
        catalog = [_svc("db", unique_id="A", plans=[ServicePlan(name="p1", unique_id="P1", description="v1")])]
        synced = [
            catalog[0].model_copy(
                update={"guid": "g1", "plans": [catalog[0].plans[0].model_copy(update={"guid": "pg1"})]}
            )
        ]

        result = reconciler.classify(catalog, synced)
        change_set = reconciler.compute_change_set(result.active_services[0], synced[0])

        assert change_set.empty
