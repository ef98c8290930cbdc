"""Tests for analytics dashboard tools."""

import re

import pytest


@pytest.fixture
def dashboard(engine):
    result = engine.invoke("create_dashboard", {"name": "Sales"})
    assert result["success"] is True
    return result["dashboard"]


class TestCreateAndList:
    def test_create_dashboard(self, dashboard):
        assert dashboard["name"] == "Sales"
        assert dashboard["widgets"] == []
        assert dashboard["filters"] == {}
        assert dashboard["id"]

    def test_list_dashboards(self, engine, dashboard):
        engine.invoke("create_dashboard", {"name": "Support"})
        result = engine.invoke("list_dashboards", {})
        assert result["success"] is True
        assert [d["name"] for d in result["dashboards"]] == ["Sales", "Support"]
        assert result["dashboards"][0] == {"id": dashboard["id"], "name": "Sales"}

    def test_list_empty(self, engine):
        assert engine.invoke("list_dashboards", {}) == {"success": True, "dashboards": []}

    def test_same_name_gets_distinct_ids(self, engine):
        first = engine.invoke("create_dashboard", {"name": "Ops"})["dashboard"]
        second = engine.invoke("create_dashboard", {"name": "Ops"})["dashboard"]
        assert first["id"] != second["id"]


class TestFilterData:
    def test_sets_filter(self, engine, dashboard):
        result = engine.invoke("filter_data", {
            "dashboardId": dashboard["id"], "field": "status", "operator": "equals", "value": "pending",
        })
        assert result == {"success": True, "filters": {"status": {"operator": "equals", "value": "pending"}}}

    def test_last_write_wins(self, engine, dashboard, stores):
        engine.invoke("filter_data", {"dashboardId": dashboard["id"], "field": "region", "value": "EU"})
        result = engine.invoke("filter_data", {
            "dashboardId": dashboard["id"], "field": "region", "operator": "contains", "value": "US",
        })
        assert list(result["filters"]) == ["region"]
        assert result["filters"]["region"] == {"operator": "contains", "value": "US"}
        assert stores.dashboards.get(dashboard["id"]).filters["region"]["value"] == "US"

    def test_filters_accumulate_per_field(self, engine, dashboard):
        engine.invoke("filter_data", {"dashboardId": dashboard["id"], "field": "region", "value": "EU"})
        result = engine.invoke("filter_data", {
            "dashboardId": dashboard["id"], "field": "total", "operator": "greater_than", "value": "100",
        })
        assert set(result["filters"]) == {"region", "total"}

    def test_operator_defaults_to_equals(self, engine, dashboard):
        result = engine.invoke("filter_data", {"dashboardId": dashboard["id"], "field": "region", "value": "EU"})
        assert result["filters"]["region"]["operator"] == "equals"

    def test_missing_dashboard(self, engine):
        result = engine.invoke("filter_data", {"dashboardId": "missing", "field": "a", "value": "b"})
        assert result == {"success": False, "error": "Dashboard not found"}

    def test_rejects_unknown_operator(self, engine, dashboard):
        result = engine.invoke("filter_data", {
            "dashboardId": dashboard["id"], "field": "a", "operator": "between", "value": "b",
        })
        assert result["success"] is False
        assert "operator" in result["error"]


class TestCreateView:
    def test_create_view(self, engine):
        result = engine.invoke("create_view", {"name": "Big orders", "source": "orders", "columns": ["id", "total"]})
        view = result["view"]
        assert view["columns"] == ["id", "total"]
        assert view["status"] == "created"
        assert view["source"] == "orders"

    def test_columns_default_to_empty(self, engine):
        view = engine.invoke("create_view", {"name": "All", "source": "users"})["view"]
        assert view["columns"] == []


class TestGetMetrics:
    def test_value_per_metric(self, engine):
        result = engine.invoke("get_metrics", {"dashboardId": "any", "metrics": ["revenue", "churn"]})
        assert result["success"] is True
        assert [m["name"] for m in result["metrics"]] == ["revenue", "churn"]
        for metric in result["metrics"]:
            assert isinstance(metric["value"], int)
            assert 0 <= metric["value"] < 1000

    def test_no_metrics_requested(self, engine):
        assert engine.invoke("get_metrics", {"dashboardId": "any"}) == {"success": True, "metrics": []}


class TestExportInsights:
    def test_export_descriptor(self, engine):
        result = engine.invoke("export_insights", {"dashboardId": "d1", "format": "pdf"})
        export = result["export"]
        assert export["dashboardId"] == "d1"
        assert export["format"] == "pdf"
        assert export["status"] == "ready"
        assert re.match(r"^insights_\d+\.pdf$", export["fileName"])

    def test_rejects_unknown_format(self, engine):
        result = engine.invoke("export_insights", {"dashboardId": "d1", "format": "docx"})
        assert result == {
            "success": False,
            "error": "Invalid value for 'format': docx. Expected one of: csv, pdf, excel",
        }
