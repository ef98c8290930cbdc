"""Tests for entity stores, seed loading and configuration."""

import pytest

from ai_data_suite.config import DEFAULT_AUDIT_LOG, DEFAULT_HTTP_PORT, SuiteConfig
from ai_data_suite.models import Dashboard
from ai_data_suite.stores import (
    DEFAULT_SEED_PATH,
    EntityStores,
    KeyedStore,
    SeedDataError,
    generate_id,
    load_seed_tables,
)


class TestSeed:
    def test_bundled_seed(self):
        tables = load_seed_tables(DEFAULT_SEED_PATH)
        assert [t.name for t in tables] == ["users", "orders", "products"]
        orders = tables[1]
        assert [row["total"] for row in orders.data] == [99.99, 149.99]
        assert [c.name for c in orders.numeric_columns()] == ["id", "user_id", "total"]

    def test_dates_stay_strings(self):
        users = load_seed_tables(DEFAULT_SEED_PATH)[0]
        assert users.data[0]["created_at"] == "2024-01-15"

    def test_custom_seed(self, tmp_path):
        seed = tmp_path / "seed.yaml"
        seed.write_text(
            "tables:\n"
            "  - name: metrics\n"
            "    columns: [{name: value, type: decimal}]\n"
            "    data: [{value: 1.5}]\n"
        )
        stores = EntityStores.seeded(str(seed))
        assert stores.tables.names() == ["metrics"]
        assert stores.tables.get("metrics").columns[0].type == "decimal"

    def test_missing_seed_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_seed_tables(tmp_path / "absent.yaml")

    @pytest.mark.parametrize("content", ["[]\n", "tables: nope\n", "tables:\n  - columns: []\n"])
    def test_malformed_seed(self, tmp_path, content):
        seed = tmp_path / "bad.yaml"
        seed.write_text(content)
        with pytest.raises(SeedDataError):
            load_seed_tables(seed)


class TestKeyedStore:
    def test_generate_id(self):
        entity_id = generate_id()
        assert len(entity_id) == 16
        int(entity_id, 16)

    def test_ids_are_unique(self):
        store = KeyedStore()
        ids = set()
        for _ in range(500):
            dashboard = store.add(Dashboard(id=store.new_id(), name="d"))
            ids.add(dashboard.id)
        assert len(ids) == len(store) == 500

    def test_insertion_order_and_lookup(self):
        store = KeyedStore()
        first = store.add(Dashboard(id="a", name="first"))
        store.add(Dashboard(id="b", name="second"))
        assert [d.name for d in store] == ["first", "second"]
        assert store.get("a") is first
        assert store.get(None) is None
        assert "b" in store

    def test_fresh_stores_are_isolated(self):
        one, two = EntityStores.seeded(), EntityStores.seeded()
        one.dashboards.add(Dashboard(id="x", name="only here"))
        assert len(two.dashboards) == 0


class TestConfig:
    ENV = [
        "AI_DATA_SUITE_NAME", "AI_DATA_SUITE_DEFAULT_TABLE", "AI_DATA_SUITE_SEED",
        "AI_DATA_SUITE_AUDIT_LOG", "AI_DATA_SUITE_HTTP_HOST", "AI_DATA_SUITE_HTTP_PORT",
    ]

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in self.ENV:
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        config = SuiteConfig.from_environment()
        assert config.server_name == "ai-data-suite"
        assert config.default_table == "users"
        assert config.seed_path is None
        assert config.audit_log_path == str(DEFAULT_AUDIT_LOG)
        assert config.http_port == DEFAULT_HTTP_PORT

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("AI_DATA_SUITE_NAME", "suite-dev")
        monkeypatch.setenv("AI_DATA_SUITE_DEFAULT_TABLE", "orders")
        monkeypatch.setenv("AI_DATA_SUITE_SEED", "/tmp/seed.yaml")
        monkeypatch.setenv("AI_DATA_SUITE_AUDIT_LOG", "/tmp/audit.log")
        monkeypatch.setenv("AI_DATA_SUITE_HTTP_PORT", "9000")
        config = SuiteConfig.from_environment()
        assert config.server_name == "suite-dev"
        assert config.default_table == "orders"
        assert config.seed_path == "/tmp/seed.yaml"
        assert config.audit_log_path == "/tmp/audit.log"
        assert config.http_port == 9000

    def test_empty_audit_log_disables(self, monkeypatch):
        monkeypatch.setenv("AI_DATA_SUITE_AUDIT_LOG", "")
        assert SuiteConfig.from_environment().audit_log_path is None

    def test_bad_port_falls_back(self, monkeypatch):
        monkeypatch.setenv("AI_DATA_SUITE_HTTP_PORT", "eighty")
        assert SuiteConfig.from_environment().http_port == DEFAULT_HTTP_PORT
